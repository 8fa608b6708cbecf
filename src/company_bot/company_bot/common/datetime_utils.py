from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytz


def now_utc() -> datetime:
    """Current time as an aware UTC datetime.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(pytz.utc)


def ensure_aware(value: datetime) -> datetime:
    if value.tzinfo is None:
        return pytz.utc.localize(value)
    return value


def day_key(value: datetime, tz_name: str) -> str:
    """Calendar date (YYYY-MM-DD) of ``value`` in the reference time zone."""
    return ensure_aware(value).astimezone(pytz.timezone(tz_name)).strftime("%Y-%m-%d")


def format_time(value: Optional[datetime], tz_name: str, *, default: str = "未記録") -> str:
    if value is None:
        return default
    return ensure_aware(value).astimezone(pytz.timezone(tz_name)).strftime("%H:%M:%S")


def to_iso(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return ensure_aware(value).isoformat()


def parse_iso(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    # Older files were written with a trailing "Z".
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return ensure_aware(datetime.fromisoformat(value))


def minutes_between(start: datetime, end: datetime) -> float:
    return (ensure_aware(end) - ensure_aware(start)).total_seconds() / 60
