from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from falcon_workforce.core.enums import SessionState
from falcon_workforce.sessions.tracker import SessionTracker

T0 = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)
T1 = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)
T2 = datetime(2026, 3, 2, 12, 30, tzinfo=timezone.utc)
T3 = datetime(2026, 3, 2, 17, 0, tzinfo=timezone.utc)


def test_fresh_tracker_is_not_clocked_in():
    t = SessionTracker()

    assert t.current_state == SessionState.NOT_CLOCKED_IN
    assert t.clock_in_time is None
    assert t.clock_out_time is None
    assert t.lunch_start_time is None
    assert t.lunch_end_time is None
    assert t.is_clocked_in() is False
    assert t.total_work_duration() is None


def test_full_day_with_lunch_is_seven_and_a_half_hours():
    t = SessionTracker()

    assert t.clock_in(now=T0)
    assert t.start_lunch(now=T1)
    assert t.end_lunch(now=T2)
    assert t.clock_out(now=T3)

    assert t.current_state == SessionState.CLOCKED_OUT
    assert t.total_work_duration() == timedelta(hours=7, minutes=30)
    assert t.total_work_duration() == (t.clock_out_time - t.clock_in_time) - (t.lunch_end_time - t.lunch_start_time)


def test_day_without_lunch_has_no_deduction():
    t = SessionTracker()
    t.clock_in(now=T0)
    t.clock_out(now=T3)

    assert t.total_work_duration() == timedelta(hours=8)


def test_second_clock_in_fails_and_keeps_first_time():
    t = SessionTracker()

    assert t.clock_in(now=T0) is True
    assert t.clock_in(now=T1) is False
    assert t.clock_in_time == T0


def test_clock_out_before_clock_in_fails():
    t = SessionTracker()

    assert t.clock_out(now=T3) is False
    assert t.current_state == SessionState.NOT_CLOCKED_IN
    assert t.clock_out_time is None
    assert t.total_work_duration() is None


def test_start_lunch_twice_keeps_first_lunch_start():
    t = SessionTracker()
    t.clock_in(now=T0)

    assert t.start_lunch(now=T1) is True
    assert t.start_lunch(now=T2) is False
    assert t.lunch_start_time == T1
    assert t.current_state == SessionState.ON_LUNCH


def test_cannot_clock_out_while_on_lunch():
    t = SessionTracker()
    t.clock_in(now=T0)
    t.start_lunch(now=T1)

    assert t.clock_out(now=T3) is False
    assert t.clock_out_time is None
    assert t.is_clocked_in() is True


def test_end_lunch_requires_lunch():
    t = SessionTracker()
    t.clock_in(now=T0)

    assert t.end_lunch(now=T2) is False
    assert t.lunch_end_time is None


def test_clocked_out_is_terminal():
    t = SessionTracker()
    t.clock_in(now=T0)
    t.clock_out(now=T3)

    assert t.clock_in(now=T3) is False
    assert t.start_lunch(now=T3) is False
    assert t.end_lunch(now=T3) is False
    assert t.clock_out(now=T3) is False
    assert t.clock_in_time == T0
    assert t.is_clocked_in() is False


def test_second_lunch_overwrites_first_interval():
    t = SessionTracker()
    t.clock_in(now=T0)
    t.start_lunch(now=T1)
    t.end_lunch(now=T2)

    assert t.start_lunch(now=datetime(2026, 3, 2, 15, 0, tzinfo=timezone.utc)) is True
    assert t.end_lunch(now=datetime(2026, 3, 2, 15, 10, tzinfo=timezone.utc)) is True
    t.clock_out(now=T3)

    assert t.lunch_start_time == datetime(2026, 3, 2, 15, 0, tzinfo=timezone.utc)
    assert t.total_work_duration() == timedelta(hours=7, minutes=50)


def test_injected_clock_supplies_now():
    times = iter([T0, T3])
    t = SessionTracker(clock=lambda: next(times))

    t.clock_in()
    t.clock_out()

    assert t.clock_in_time == T0
    assert t.clock_out_time == T3


def test_snapshot_copies_fields():
    t = SessionTracker()
    t.clock_in(now=T0)
    snap = t.snapshot("w1")

    assert snap.worker_id == "w1"
    assert snap.state == SessionState.WORKING
    assert snap.is_clocked_in is True
    assert snap.clock_in_time == T0
    assert snap.total_work_duration is None


def test_clock_out_earlier_than_clock_in_is_rejected():
    t = SessionTracker()
    t.clock_in(now=T3)

    assert t.clock_out(now=T0) is False
    assert t.current_state == SessionState.WORKING
    assert t.clock_out_time is None
    assert t.total_work_duration() is None


def test_lunch_ending_before_it_starts_is_rejected():
    t = SessionTracker()
    t.clock_in(now=T0)
    t.start_lunch(now=T2)

    assert t.end_lunch(now=T1) is False
    assert t.lunch_end_time is None
    assert t.current_state == SessionState.ON_LUNCH

    assert t.end_lunch(now=T2) is True
    assert t.clock_out(now=T3) is True
    assert t.total_work_duration() == timedelta(hours=8)


def test_second_lunch_cannot_start_before_first_ended():
    t = SessionTracker()
    t.clock_in(now=T0)
    t.start_lunch(now=T1)
    t.end_lunch(now=T2)

    assert t.start_lunch(now=T1) is False
    assert t.lunch_start_time == T1
    assert t.current_state == SessionState.WORKING


def test_naive_clock_mixed_with_aware_now():
    naive_out = datetime(2026, 3, 2, 17, 0)
    t = SessionTracker(clock=lambda: naive_out)

    assert t.clock_in(now=datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc))
    assert t.clock_out()

    assert t.clock_out_time == naive_out.astimezone()
    assert t.clock_out_time.tzinfo is not None
    assert t.total_work_duration() > timedelta(0)


def test_default_clock_is_timezone_aware():
    t = SessionTracker()
    t.clock_in()

    assert t.clock_in_time.tzinfo is not None


def test_duration_across_dst_fall_back_with_fixed_offsets():
    edt = timezone(timedelta(hours=-4))
    est = timezone(timedelta(hours=-5))
    t = SessionTracker()

    t.clock_in(now=datetime(2026, 11, 1, 1, 30, tzinfo=edt))
    t.clock_out(now=datetime(2026, 11, 1, 1, 30, tzinfo=est))

    assert t.total_work_duration() == timedelta(hours=1)


def test_duration_across_dst_fall_back_in_one_zone():
    zoneinfo = pytest.importorskip("zoneinfo")
    try:
        new_york = zoneinfo.ZoneInfo("America/New_York")
    except zoneinfo.ZoneInfoNotFoundError:
        pytest.skip("tz database not available")
    t = SessionTracker()

    t.clock_in(now=datetime(2026, 11, 1, 1, 30, tzinfo=new_york))
    t.clock_out(now=datetime(2026, 11, 1, 1, 30, fold=1, tzinfo=new_york))

    assert t.total_work_duration() == timedelta(hours=1)
