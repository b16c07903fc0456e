from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from meeting_planner.core.enums import AnchorSide, NameStyle, ReferenceRegion
from meeting_planner.core.models import (
    CalendarFields,
    ClockReading,
    ReferenceMeeting,
    WallClock,
    ZoneEntry,
)
from meeting_planner.core.types import Instant, ZoneId

if TYPE_CHECKING:
    from meeting_planner.planner.settings import PlannerSettings
    from meeting_planner.planner.sync import PlannerState


class ZoneFormatter(Protocol):
    """Zone-aware formatter: reads what a clock in a zone shows for an instant.

    Implementations raise :class:`~meeting_planner.core.errors.UnknownZoneError`
    for zone ids they cannot resolve.
    """

    def format_fields(self, instant: Instant, zone: ZoneId) -> CalendarFields:
        """Return the calendar fields *instant* displays in *zone*."""
        ...

    def format_name(self, instant: Instant, zone: ZoneId, style: NameStyle) -> str:
        """Return the zone's display name in *style* at *instant*."""
        ...


class PlannerService(Protocol):
    def get_state(self) -> PlannerState: ...

    def edit_a(self, text: str) -> PlannerState: ...

    def edit_b(self, text: str) -> PlannerState: ...

    def set_zone_a(self, zone: ZoneId) -> PlannerState: ...

    def set_zone_b(self, zone: ZoneId) -> PlannerState: ...

    def anchor(self) -> AnchorSide: ...

    def convert(self, wall_clock: WallClock, from_zone: ZoneId, to_zone: ZoneId) -> WallClock:
        """Convert a wall clock between zones. Raises on unknown zones."""
        ...

    def tick(self) -> list[ClockReading]:
        """Read the displayed clocks at the current instant."""
        ...

    def read_clock(self, zone: ZoneId) -> ClockReading:
        """Read one zone's clock at the current instant."""
        ...

    def abbreviation(self, zone: ZoneId, instant: Instant | None = None) -> str: ...

    def reference_meeting(self, region: ReferenceRegion) -> ReferenceMeeting | None: ...

    def list_zones(self) -> list[ZoneEntry]: ...

    def get_settings(self) -> PlannerSettings: ...

    def update_settings(self, settings: PlannerSettings) -> None: ...

    def poll_warnings(self) -> list[str]:
        """Drain zone warnings logged since the last call."""
        ...
