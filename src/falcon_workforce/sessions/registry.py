from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Callable

from ..common.datetime_utils import now_local
from ..core.enums import SessionState
from ..core.exceptions import ValidationError
from .model import WorkSessionSnapshot
from .tracker import SessionTracker

logger = logging.getLogger(__name__)

TRANSITIONS = ("clock_in", "start_lunch", "end_lunch", "clock_out")


class SessionRegistry:
    """One current session per worker, one lock per worker.

    Transitions are not atomic on their own, so every call that touches a
    worker's tracker goes through that worker's lock.
    """

    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._clock = clock
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._current: dict[str, SessionTracker] = {}
        self._history: dict[str, list[WorkSessionSnapshot]] = {}

    def _lock_for(self, worker_id: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(worker_id)
            if lock is None:
                lock = self._locks[worker_id] = threading.Lock()
            return lock

    def _current_unlocked(self, worker_id: str) -> SessionTracker:
        tracker = self._current.get(worker_id)
        if tracker is None:
            tracker = self._current[worker_id] = SessionTracker(clock=self._clock)
        return tracker

    def current(self, worker_id: str) -> SessionTracker:
        with self._lock_for(worker_id):
            return self._current_unlocked(worker_id)

    def snapshot(self, worker_id: str) -> WorkSessionSnapshot:
        with self._lock_for(worker_id):
            return self._current_unlocked(worker_id).snapshot(worker_id)

    def transition(self, worker_id: str, operation: str, *, now: datetime | None = None) -> bool:
        ok, _ = self.apply(worker_id, operation, now=now)
        return ok

    def apply(
        self, worker_id: str, operation: str, *, now: datetime | None = None
    ) -> tuple[bool, WorkSessionSnapshot]:
        """Run a transition and snapshot the result under the same lock."""
        if operation not in TRANSITIONS:
            raise ValidationError(f"Unknown session operation: {operation}")
        with self._lock_for(worker_id):
            tracker = self._current_unlocked(worker_id)
            ok = getattr(tracker, operation)(now=now)
            if ok:
                logger.info("Worker %s: %s -> %s", worker_id, operation, tracker.current_state.value)
            return ok, tracker.snapshot(worker_id)

    def begin_new_session(self, worker_id: str) -> SessionTracker:
        """Replace a finished (or never started) session with a fresh one."""
        with self._lock_for(worker_id):
            tracker = self._current_unlocked(worker_id)
            if tracker.is_clocked_in():
                raise ValidationError("Clock out before starting a new session")
            if tracker.current_state == SessionState.CLOCKED_OUT:
                self._history.setdefault(worker_id, []).append(tracker.snapshot(worker_id))
            fresh = self._current[worker_id] = SessionTracker(clock=self._clock)
            return fresh

    def history(self, worker_id: str) -> list[WorkSessionSnapshot]:
        with self._lock_for(worker_id):
            return list(self._history.get(worker_id, []))
