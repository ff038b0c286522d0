from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..core.enums import SessionState


@dataclass(frozen=True)
class WorkSessionSnapshot:
    """Read-model of one work session (export, payroll, JSON)."""

    worker_id: str
    state: SessionState
    clock_in_time: Optional[datetime]
    clock_out_time: Optional[datetime]
    lunch_start_time: Optional[datetime]
    lunch_end_time: Optional[datetime]
    total_work_duration: Optional[timedelta]

    @property
    def is_clocked_in(self) -> bool:
        return self.state in (SessionState.WORKING, SessionState.ON_LUNCH)
