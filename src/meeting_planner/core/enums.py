"""Enums for anchor sides, zone name styles, and reference regions."""

from enum import StrEnum


class AnchorSide(StrEnum):
    """Which wall-clock field was edited last.

    The anchored field is held fixed when either zone changes; the other
    field is re-derived from it.
    """

    A = "A"  # User's field
    B = "B"  # Client's field


class NameStyle(StrEnum):
    """Zone name styles a formatter can produce.

    Values follow the locale-formatting vocabulary:
        short:       "EST", "IST", or "GMT+5:30" when no abbreviation exists
        shortOffset: "GMT-5", "GMT+5:30", "GMT"
        longOffset:  "GMT-05:00", "GMT+05:30", "GMT"
        long:        "Eastern Standard Time", "India Standard Time"
    """

    SHORT = "short"
    SHORT_OFFSET = "shortOffset"
    LONG_OFFSET = "longOffset"
    LONG = "long"


class ReferenceRegion(StrEnum):
    """Quick-reference regions shown beside the planner."""

    IST = "IST"
    NY = "NY"
