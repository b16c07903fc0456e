"""Instant and naive-epoch helpers.

An instant is an ``int`` count of milliseconds since the Unix epoch.  The
"naive epoch" of a set of calendar fields is the instant those fields
would name if they were read as UTC; the converter compares wall clocks
through it.
"""

from __future__ import annotations

import calendar
import time
from datetime import UTC, datetime, timedelta

MINUTE_MS = 60_000
HOUR_MS = 60 * MINUTE_MS

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def naive_epoch_ms(
    year: int, month: int, day: int, hour: int = 0, minute: int = 0, second: int = 0
) -> int:
    """Return the instant the fields would name in UTC.

    Hour, minute and second overflow linearly (hour 24 is midnight of the
    next day), matching how the fields are compared during convergence.
    """
    return calendar.timegm((year, month, day, hour, minute, second, 0, 0, 0)) * 1000


def fields_from_naive_ms(value: int) -> tuple[int, int, int, int, int, int]:
    """Inverse of :func:`naive_epoch_ms`: ``(year, month, day, hour, minute, second)``."""
    dt = instant_to_datetime(value)
    return dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second


def instant_to_datetime(instant: int) -> datetime:
    """Return the aware UTC datetime for *instant*."""
    return _EPOCH + timedelta(milliseconds=instant)


def datetime_to_instant(dt: datetime) -> int:
    """Return the instant for an aware datetime.

    Treats naive datetimes as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return (dt - _EPOCH) // timedelta(milliseconds=1)


def now_instant() -> int:
    """Current instant from the host clock."""
    return time.time_ns() // 1_000_000


def format_short_offset(offset_minutes: int) -> str:
    """``GMT-5``, ``GMT+5:30``, or ``GMT`` for zero."""
    if offset_minutes == 0:
        return "GMT"
    sign = "+" if offset_minutes > 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    if minutes:
        return f"GMT{sign}{hours}:{minutes:02d}"
    return f"GMT{sign}{hours}"


def format_long_offset(offset_minutes: int) -> str:
    """``GMT-05:00``, ``GMT+05:30``, or ``GMT`` for zero."""
    if offset_minutes == 0:
        return "GMT"
    sign = "+" if offset_minutes > 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"GMT{sign}{hours:02d}:{minutes:02d}"
