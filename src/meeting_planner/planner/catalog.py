"""Zones offered in the planner's zone pickers.

The list is trusted as-is; ``unresolvable`` reports entries a formatter
cannot load.
"""

from __future__ import annotations

from meeting_planner.core.errors import UnknownZoneError
from meeting_planner.core.models import ZoneEntry
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.types import Instant, ZoneId

DEFAULT_ZONES: tuple[ZoneEntry, ...] = (
    ZoneEntry("UTC", "UTC"),
    ZoneEntry("Honolulu (HST)", "Pacific/Honolulu"),
    ZoneEntry("Anchorage (AKT)", "America/Anchorage"),
    ZoneEntry("Los Angeles (PT)", "America/Los_Angeles"),
    ZoneEntry("Denver (MT)", "America/Denver"),
    ZoneEntry("Phoenix (MST)", "America/Phoenix"),
    ZoneEntry("Chicago (CT)", "America/Chicago"),
    ZoneEntry("New York (ET)", "America/New_York"),
    ZoneEntry("Toronto (ET)", "America/Toronto"),
    ZoneEntry("Caracas (VET)", "America/Caracas"),
    ZoneEntry("Sao Paulo (BRT)", "America/Sao_Paulo"),
    ZoneEntry("London (GMT/BST)", "Europe/London"),
    ZoneEntry("Dublin (GMT/IST)", "Europe/Dublin"),
    ZoneEntry("Paris (CET)", "Europe/Paris"),
    ZoneEntry("Berlin (CET)", "Europe/Berlin"),
    ZoneEntry("Athens (EET)", "Europe/Athens"),
    ZoneEntry("Johannesburg (SAST)", "Africa/Johannesburg"),
    ZoneEntry("Moscow (MSK)", "Europe/Moscow"),
    ZoneEntry("Dubai (GST)", "Asia/Dubai"),
    ZoneEntry("Karachi (PKT)", "Asia/Karachi"),
    ZoneEntry("India (IST)", "Asia/Kolkata"),
    ZoneEntry("Kathmandu (NPT)", "Asia/Kathmandu"),
    ZoneEntry("Singapore (SGT)", "Asia/Singapore"),
    ZoneEntry("Hong Kong (HKT)", "Asia/Hong_Kong"),
    ZoneEntry("Tokyo (JST)", "Asia/Tokyo"),
    ZoneEntry("Sydney (AET)", "Australia/Sydney"),
    ZoneEntry("Auckland (NZT)", "Pacific/Auckland"),
)


def label_for(zone_id: ZoneId, entries: tuple[ZoneEntry, ...] = DEFAULT_ZONES) -> str:
    """Catalog label for *zone_id*, or the id itself when it is not listed."""
    for entry in entries:
        if entry.zone_id == zone_id:
            return entry.label
    return zone_id


def index_of(zone_id: ZoneId, entries: tuple[ZoneEntry, ...] = DEFAULT_ZONES) -> int | None:
    for index, entry in enumerate(entries):
        if entry.zone_id == zone_id:
            return index
    return None


def with_zone(
    zone_id: ZoneId, entries: tuple[ZoneEntry, ...] = DEFAULT_ZONES
) -> tuple[ZoneEntry, ...]:
    """Return *entries* with *zone_id* appended if it is missing."""
    if index_of(zone_id, entries) is not None:
        return entries
    return (*entries, ZoneEntry(zone_id, zone_id))


def unresolvable(
    formatter: ZoneFormatter, instant: Instant, entries: tuple[ZoneEntry, ...] = DEFAULT_ZONES
) -> list[ZoneEntry]:
    missing: list[ZoneEntry] = []
    for entry in entries:
        try:
            formatter.format_fields(instant, entry.zone_id)
        except UnknownZoneError:
            missing.append(entry)
    return missing
