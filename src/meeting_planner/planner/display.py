"""Clock and date labels for the world clock cards."""

from __future__ import annotations

import logging
from datetime import date

from meeting_planner.core.models import CalendarFields
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.types import Instant, ZoneId

logger = logging.getLogger(__name__)

TIME_PLACEHOLDER = "--:--:--"
MEETING_PLACEHOLDER = "--"

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _twelve_hour(hour: int) -> tuple[int, str]:
    hour %= 24
    suffix = "AM" if hour < 12 else "PM"
    return (hour % 12) or 12, suffix


def clock_time_label(fields: CalendarFields, *, seconds: bool = True) -> str:
    """``2:05:09 PM`` (or ``2:05 PM`` without seconds)."""
    hour, suffix = _twelve_hour(fields.hour)
    if seconds:
        return f"{hour}:{fields.minute:02d}:{fields.second:02d} {suffix}"
    return f"{hour}:{fields.minute:02d} {suffix}"


def clock_date_label(fields: CalendarFields) -> str:
    """``Mon, Jan 15``."""
    weekday = date(fields.year, fields.month, fields.day).weekday()
    return f"{_WEEKDAYS[weekday]}, {_MONTHS[fields.month - 1]} {fields.day}"


def format_clock_time(instant: Instant, zone: ZoneId, formatter: ZoneFormatter) -> str:
    try:
        fields = formatter.format_fields(instant, zone)
    except (ValueError, OverflowError) as exc:
        logger.debug("format_clock_time: %s", exc)
        return TIME_PLACEHOLDER
    return clock_time_label(fields)


def format_clock_date(instant: Instant, zone: ZoneId, formatter: ZoneFormatter) -> str:
    try:
        fields = formatter.format_fields(instant, zone)
    except (ValueError, OverflowError) as exc:
        logger.debug("format_clock_date: %s", exc)
        return ""
    return clock_date_label(fields)


def format_meeting_time(instant: Instant, zone: ZoneId, formatter: ZoneFormatter) -> str:
    try:
        fields = formatter.format_fields(instant, zone)
    except (ValueError, OverflowError) as exc:
        logger.debug("format_meeting_time: %s", exc)
        return MEETING_PLACEHOLDER
    return clock_time_label(fields, seconds=False)
