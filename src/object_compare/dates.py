"""Date arithmetic helpers."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

SECONDS_PER_DAY = 86400
DAYS_PER_YEAR = 365.25
MILLISECONDS_PER_DAY = SECONDS_PER_DAY * 1000
SECONDS_PER_YEAR = int(SECONDS_PER_DAY * DAYS_PER_YEAR)
MILLISECONDS_PER_YEAR = SECONDS_PER_YEAR * 1000
MILLISECONDS_PER_MONTH = MILLISECONDS_PER_YEAR // 12

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def is_after(value: Optional[datetime], target: datetime) -> bool:
    """``False`` when ``value`` is missing."""
    return value is not None and value > target


def is_before(value: Optional[datetime], target: datetime) -> bool:
    return value is not None and value < target


def first_non_null(value: Optional[datetime], fallback: datetime) -> datetime:
    return fallback if value is None else value


def add_nanos(value: datetime, nanos: float) -> datetime:
    """Add nanoseconds, rounded to the microsecond resolution of ``datetime``."""
    return value + timedelta(microseconds=round(nanos / 1000))


def get_time(value: datetime) -> int:
    """Milliseconds since 1970-01-01, treating naive values as already UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    delta = value - _EPOCH
    return round(delta / timedelta(milliseconds=1))


def current_time_millis(value: Optional[datetime] = None) -> int:
    """Unix time in milliseconds; naive values are interpreted as local time."""
    if value is None:
        value = datetime.now(timezone.utc)
    elif value.tzinfo is None:
        value = value.astimezone()
    return int((value.astimezone(timezone.utc) - _EPOCH) / timedelta(milliseconds=1))


__all__ = [
    "SECONDS_PER_DAY",
    "DAYS_PER_YEAR",
    "MILLISECONDS_PER_DAY",
    "SECONDS_PER_YEAR",
    "MILLISECONDS_PER_YEAR",
    "MILLISECONDS_PER_MONTH",
    "is_after",
    "is_before",
    "first_non_null",
    "add_nanos",
    "get_time",
    "current_time_millis",
]
