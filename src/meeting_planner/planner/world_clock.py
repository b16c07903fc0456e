"""Live clocks and quick-reference conversions.

The GUI calls :meth:`WorldClock.tick` once a second with the current
instant.  Ticks only read zone ids; they never touch planner state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from meeting_planner.core.enums import ReferenceRegion
from meeting_planner.core.errors import UnknownZoneError
from meeting_planner.core.models import ClockReading, ReferenceMeeting, WallClock
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.types import Instant, ZoneId

from .converter import render_wall_clock, resolve_instant, zone_abbreviation
from .display import format_clock_date, format_clock_time, format_meeting_time
from .sync import PlannerState

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegionInfo:
    zone_id: ZoneId
    title: str  # "India Standard Time"
    short: str  # "IST"
    place: str  # "India"


REFERENCE_REGIONS: dict[ReferenceRegion, RegionInfo] = {
    ReferenceRegion.IST: RegionInfo("Asia/Kolkata", "India Standard Time", "IST", "India"),
    ReferenceRegion.NY: RegionInfo("America/New_York", "New York Time", "ET", "New York"),
}


def read_clock(instant: Instant, zone: ZoneId, formatter: ZoneFormatter) -> ClockReading:
    """Everything a clock card shows for *zone* at *instant*."""
    try:
        wall_clock: WallClock | None = render_wall_clock(instant, zone, formatter)
    except (UnknownZoneError, OverflowError) as exc:
        logger.debug("read_clock: %s", exc)
        wall_clock = None
    return ClockReading(
        zone_id=zone,
        wall_clock=wall_clock,
        time_label=format_clock_time(instant, zone, formatter),
        date_label=format_clock_date(instant, zone, formatter),
        abbreviation=zone_abbreviation(instant, zone, formatter),
    )


class WorldClock:
    """Clocks for a list of displayed zones."""

    def __init__(self, formatter: ZoneFormatter, zones: list[ZoneId] | None = None) -> None:
        self._formatter = formatter
        self._zones: list[ZoneId] = list(zones or [])

    @property
    def zones(self) -> list[ZoneId]:
        return list(self._zones)

    def set_zones(self, zones: list[ZoneId]) -> None:
        self._zones = list(zones)

    def tick(self, now: Instant) -> list[ClockReading]:
        return [read_clock(now, zone, self._formatter) for zone in self._zones]


def short_abbreviation(label: str) -> str:
    """First word of an abbreviation label: ``"IST (GMT+5:30)"`` -> ``"IST"``."""
    return label.split(" ")[0] if label else ""


def reference_meeting(
    state: PlannerState, region: ReferenceRegion, formatter: ZoneFormatter
) -> ReferenceMeeting | None:
    """The user's planned meeting (field A) shown in a reference region's zone.

    Returns None when field A is empty, unparsable, out of range or in an
    unknown zone.
    """
    if not state.text_a:
        return None
    try:
        wall_clock = WallClock.parse(state.text_a)
        instant = resolve_instant(wall_clock, state.zone_a, formatter)
    except (ValueError, OverflowError) as exc:
        logger.debug("reference_meeting: %s", exc)
        return None

    info = REFERENCE_REGIONS[region]
    return ReferenceMeeting(
        region_label=info.place,
        zone_id=info.zone_id,
        selected_time=format_meeting_time(instant, state.zone_a, formatter),
        converted_time=format_clock_time(instant, info.zone_id, formatter),
        converted_date=format_clock_date(instant, info.zone_id, formatter),
        abbreviation=zone_abbreviation(instant, info.zone_id, formatter),
    )
