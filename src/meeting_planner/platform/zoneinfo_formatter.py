"""Zone formatter backed by the host IANA database (stdlib ``zoneinfo``)."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from meeting_planner.core.enums import NameStyle
from meeting_planner.core.errors import UnknownZoneError
from meeting_planner.core.models import CalendarFields
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.time import (
    format_long_offset,
    format_short_offset,
    instant_to_datetime,
)
from meeting_planner.core.types import Instant, ZoneId

logger = logging.getLogger(__name__)

# tzdata only carries abbreviations; long names for the common ones.
# Ambiguous abbreviations (IST is also Irish/Israel time) take the most
# common reading.
LONG_NAMES: dict[str, str] = {
    "UTC": "Coordinated Universal Time",
    "GMT": "Greenwich Mean Time",
    "BST": "British Summer Time",
    "IST": "India Standard Time",
    "EST": "Eastern Standard Time",
    "EDT": "Eastern Daylight Time",
    "CST": "Central Standard Time",
    "CDT": "Central Daylight Time",
    "MST": "Mountain Standard Time",
    "MDT": "Mountain Daylight Time",
    "PST": "Pacific Standard Time",
    "PDT": "Pacific Daylight Time",
    "AKST": "Alaska Standard Time",
    "AKDT": "Alaska Daylight Time",
    "HST": "Hawaii-Aleutian Standard Time",
    "CET": "Central European Standard Time",
    "CEST": "Central European Summer Time",
    "EET": "Eastern European Standard Time",
    "EEST": "Eastern European Summer Time",
    "WET": "Western European Standard Time",
    "WEST": "Western European Summer Time",
    "MSK": "Moscow Standard Time",
    "SAST": "South Africa Standard Time",
    "PKT": "Pakistan Standard Time",
    "JST": "Japan Standard Time",
    "KST": "Korean Standard Time",
    "HKT": "Hong Kong Standard Time",
    "AEST": "Australian Eastern Standard Time",
    "AEDT": "Australian Eastern Daylight Time",
    "ACST": "Australian Central Standard Time",
    "ACDT": "Australian Central Daylight Time",
    "AWST": "Australian Western Standard Time",
    "NZST": "New Zealand Standard Time",
    "NZDT": "New Zealand Daylight Time",
}


@lru_cache(maxsize=256)
def _zone(zone: ZoneId) -> ZoneInfo:
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        logger.debug("zoneinfo could not load %r: %s", zone, exc)
        raise UnknownZoneError(zone) from exc


def _offset_minutes(dt: datetime) -> int:
    offset = dt.utcoffset() or timedelta(0)
    return int(offset.total_seconds()) // 60


class ZoneInfoFormatter(ZoneFormatter):
    """Reads calendar fields and zone names from ``zoneinfo``."""

    def _localize(self, instant: Instant, zone: ZoneId) -> datetime:
        if not isinstance(zone, str) or not zone:
            raise UnknownZoneError(str(zone))
        return instant_to_datetime(instant).astimezone(_zone(zone))

    def format_fields(self, instant: Instant, zone: ZoneId) -> CalendarFields:
        dt = self._localize(instant, zone)
        return CalendarFields(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second)

    def format_name(self, instant: Instant, zone: ZoneId, style: NameStyle) -> str:
        dt = self._localize(instant, zone)
        offset = _offset_minutes(dt)
        abbreviation = dt.tzname() or ""
        # tzdata uses "+0530"/"-03" style names where no letters exist
        has_letters = abbreviation.isalpha()

        if style is NameStyle.SHORT:
            return abbreviation if has_letters else format_short_offset(offset)
        if style is NameStyle.SHORT_OFFSET:
            return format_short_offset(offset)
        if style is NameStyle.LONG_OFFSET:
            return format_long_offset(offset)
        if has_letters and abbreviation in LONG_NAMES:
            return LONG_NAMES[abbreviation]
        return format_long_offset(offset)


def create_formatter(use_mock: bool | None = None) -> ZoneFormatter:
    """Create the formatter for the current environment.

    *use_mock* defaults to the ``MEETING_PLANNER_MOCK`` environment variable.
    """
    if use_mock is None:
        use_mock = os.environ.get("MEETING_PLANNER_MOCK", "0") == "1"
    if use_mock:
        from meeting_planner.mock import FakeZoneFormatter

        return FakeZoneFormatter()
    return ZoneInfoFormatter()
