"""Offset tables for the fake formatter.

Transition instants are the real 2024 rules for the zones that observe
DST; outside 2024 the 2024 periods simply carry on.  Zones without a
letter abbreviation report a bare offset as their short name, the way
locale formatters do.
"""

from __future__ import annotations

from meeting_planner.core.time import naive_epoch_ms

from .formatter import OffsetPeriod, ZoneRules

US_EASTERN_2024 = (
    OffsetPeriod(naive_epoch_ms(2024, 3, 10, 7), -240, "EDT", "Eastern Daylight Time"),
    OffsetPeriod(naive_epoch_ms(2024, 11, 3, 6), -300, "EST", "Eastern Standard Time"),
)

UK_2024 = (
    OffsetPeriod(naive_epoch_ms(2024, 3, 31, 1), 60, "BST", "British Summer Time"),
    OffsetPeriod(naive_epoch_ms(2024, 10, 27, 1), 0, "GMT", "Greenwich Mean Time"),
)

MOCK_ZONE_RULES: dict[str, ZoneRules] = {
    "UTC": ZoneRules(0, "UTC", "Coordinated Universal Time"),
    "America/New_York": ZoneRules(-300, "EST", "Eastern Standard Time", US_EASTERN_2024),
    "Europe/London": ZoneRules(0, "GMT", "Greenwich Mean Time", UK_2024),
    "Asia/Kolkata": ZoneRules(330, "GMT+5:30", "India Standard Time"),
    "Asia/Dubai": ZoneRules(240, "GMT+4", "Gulf Standard Time"),
    "Asia/Tokyo": ZoneRules(540, "GMT+9", "Japan Standard Time"),
    "Asia/Kathmandu": ZoneRules(345, "GMT+5:45", "Nepal Time"),
    "America/Caracas": ZoneRules(-240, "GMT-4", "Venezuela Time"),
    # No usable long name: the acronym heuristic must fall back to the offset.
    "Pacific/Kiritimati": ZoneRules(840, "GMT+14", "GMT+14:00"),
}
