from __future__ import annotations

import logging
from datetime import datetime

from ..common.datetime_utils import format_duration, format_time
from ..core.exceptions import InvalidTransitionError
from ..sessions.model import WorkSessionSnapshot
from ..sessions.registry import SessionRegistry

logger = logging.getLogger(__name__)


class TimeTrackingService:
    """Use case: clock in/out and lunch for the current worker."""

    def __init__(self, registry: SessionRegistry):
        self._registry = registry

    def _apply(self, worker_id: str, operation: str, now: datetime | None) -> tuple[bool, WorkSessionSnapshot]:
        ok, snapshot = self._registry.apply(worker_id, operation, now=now)
        if not ok:
            logger.info("Worker %s: %s rejected in state %s", worker_id, operation, snapshot.state.value)
        return ok, snapshot

    def clock_in(self, worker_id: str, *, now: datetime | None = None) -> bool:
        return self._apply(worker_id, "clock_in", now)[0]

    def start_lunch(self, worker_id: str, *, now: datetime | None = None) -> bool:
        return self._apply(worker_id, "start_lunch", now)[0]

    def end_lunch(self, worker_id: str, *, now: datetime | None = None) -> bool:
        return self._apply(worker_id, "end_lunch", now)[0]

    def clock_out(self, worker_id: str, *, now: datetime | None = None) -> bool:
        return self._apply(worker_id, "clock_out", now)[0]

    def perform(self, worker_id: str, operation: str, *, now: datetime | None = None) -> WorkSessionSnapshot:
        """Run a transition and return the new state; raise if it was rejected."""
        ok, snapshot = self._apply(worker_id, operation, now)
        if not ok:
            raise InvalidTransitionError(f"Cannot {operation.replace('_', ' ')} now (session is {snapshot.state.value})")
        return snapshot

    def begin_new_session(self, worker_id: str) -> WorkSessionSnapshot:
        return self._registry.begin_new_session(worker_id).snapshot(worker_id)

    def snapshot(self, worker_id: str) -> WorkSessionSnapshot:
        return self._registry.snapshot(worker_id)

    def summary(self, worker_id: str) -> dict:
        return self.to_dict(self._registry.snapshot(worker_id))

    def history(self, worker_id: str) -> list[dict]:
        return [self.to_dict(s) for s in self._registry.history(worker_id)]

    @staticmethod
    def to_dict(s: WorkSessionSnapshot) -> dict:
        duration = s.total_work_duration
        return {
            "worker_id": s.worker_id,
            "state": s.state.value,
            "is_clocked_in": s.is_clocked_in,
            "clock_in_time": format_time(s.clock_in_time),
            "lunch_start_time": format_time(s.lunch_start_time),
            "lunch_end_time": format_time(s.lunch_end_time),
            "clock_out_time": format_time(s.clock_out_time),
            "total_work_seconds": int(duration.total_seconds()) if duration is not None else None,
            "total_work_hours": format_duration(duration),
        }
