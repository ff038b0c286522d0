from __future__ import annotations

from datetime import datetime, timedelta


def now_local() -> datetime:
    """Current local time, timezone-aware.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().astimezone()


def format_duration(value: timedelta | None) -> str:
    """Render a duration as HH:MM, or "-" when there is none."""
    if value is None:
        return "-"
    sign = "-" if value < timedelta(0) else ""
    minutes = int(abs(value).total_seconds() // 60)
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def format_time(value: datetime | None) -> str | None:
    return value.isoformat(timespec="seconds") if value else None
