from datetime import datetime, timedelta, timezone

from falcon_workforce.common.datetime_utils import format_duration, format_time, now_local


def test_format_duration():
    assert format_duration(None) == "-"
    assert format_duration(timedelta(hours=7, minutes=30)) == "07:30"
    assert format_duration(timedelta(seconds=59)) == "00:00"


def test_format_negative_duration_keeps_sign_in_front():
    assert format_duration(timedelta(minutes=-30)) == "-00:30"
    assert format_duration(timedelta(hours=-1, minutes=-5)) == "-01:05"


def test_now_local_is_aware():
    assert now_local().tzinfo is not None


def test_format_time_includes_offset():
    assert format_time(datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)) == "2026-03-02T09:00:00+00:00"
    assert format_time(None) is None
