from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.enums import SessionState
from .model import WorkSessionSnapshot

logger = logging.getLogger(__name__)


class SessionTracker:
    """State machine for one worker's clock-in / lunch / clock-out day.

    NOT_CLOCKED_IN -> WORKING -> (ON_LUNCH -> WORKING) -> CLOCKED_OUT

    Every transition returns False and changes nothing when called from the
    wrong state. CLOCKED_OUT is terminal; start a new day with a new tracker.
    Only one lunch interval is kept: a second lunch overwrites the first.
    Timestamps are stored as UTC instants (naive values are read as local
    time) and must not go backwards.
    """

    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._clock = clock
        self._state = SessionState.NOT_CLOCKED_IN
        self._clock_in_time: Optional[datetime] = None
        self._clock_out_time: Optional[datetime] = None
        self._lunch_start_time: Optional[datetime] = None
        self._lunch_end_time: Optional[datetime] = None

    @property
    def current_state(self) -> SessionState:
        return self._state

    @property
    def clock_in_time(self) -> Optional[datetime]:
        return self._clock_in_time

    @property
    def clock_out_time(self) -> Optional[datetime]:
        return self._clock_out_time

    @property
    def lunch_start_time(self) -> Optional[datetime]:
        return self._lunch_start_time

    @property
    def lunch_end_time(self) -> Optional[datetime]:
        return self._lunch_end_time

    def _stamp(self, operation: str, now: datetime | None) -> Optional[datetime]:
        """Normalized timestamp for a transition, or None if it is out of order."""
        stamp = (now or self._clock()).astimezone(timezone.utc)
        recorded = [
            t
            for t in (self._clock_in_time, self._lunch_start_time, self._lunch_end_time, self._clock_out_time)
            if t is not None
        ]
        if recorded and stamp < max(recorded):
            logger.info("Rejected %s: %s is earlier than %s", operation, stamp.isoformat(), max(recorded).isoformat())
            return None
        return stamp

    def _reject(self, operation: str) -> bool:
        logger.debug("Rejected %s from state %s", operation, self._state.value)
        return False

    def clock_in(self, *, now: datetime | None = None) -> bool:
        if self._state != SessionState.NOT_CLOCKED_IN:
            return self._reject("clock_in")
        stamp = self._stamp("clock_in", now)
        if stamp is None:
            return False
        self._clock_in_time = stamp
        self._state = SessionState.WORKING
        return True

    def start_lunch(self, *, now: datetime | None = None) -> bool:
        if self._state != SessionState.WORKING:
            return self._reject("start_lunch")
        stamp = self._stamp("start_lunch", now)
        if stamp is None:
            return False
        if self._lunch_end_time is not None:
            logger.info("Second lunch started; previous lunch interval will be replaced")
        self._lunch_start_time = stamp
        self._state = SessionState.ON_LUNCH
        return True

    def end_lunch(self, *, now: datetime | None = None) -> bool:
        if self._state != SessionState.ON_LUNCH:
            return self._reject("end_lunch")
        stamp = self._stamp("end_lunch", now)
        if stamp is None:
            return False
        self._lunch_end_time = stamp
        self._state = SessionState.WORKING
        return True

    def clock_out(self, *, now: datetime | None = None) -> bool:
        if self._state != SessionState.WORKING:
            return self._reject("clock_out")
        stamp = self._stamp("clock_out", now)
        if stamp is None:
            return False
        self._clock_out_time = stamp
        self._state = SessionState.CLOCKED_OUT
        return True

    def total_work_duration(self) -> Optional[timedelta]:
        """Clocked time minus the lunch interval; None until clocked out."""
        if self._clock_in_time is None or self._clock_out_time is None:
            return None
        total = self._clock_out_time - self._clock_in_time
        if self._lunch_start_time is not None and self._lunch_end_time is not None:
            total -= self._lunch_end_time - self._lunch_start_time
        return total

    def is_clocked_in(self) -> bool:
        return self._state in (SessionState.WORKING, SessionState.ON_LUNCH)

    def snapshot(self, worker_id: str) -> WorkSessionSnapshot:
        return WorkSessionSnapshot(
            worker_id=worker_id,
            state=self._state,
            clock_in_time=self._clock_in_time,
            clock_out_time=self._clock_out_time,
            lunch_start_time=self._lunch_start_time,
            lunch_end_time=self._lunch_end_time,
            total_work_duration=self.total_work_duration(),
        )
