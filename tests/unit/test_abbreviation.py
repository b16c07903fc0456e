from __future__ import annotations

import pytest

from meeting_planner.core.enums import NameStyle
from meeting_planner.core.time import naive_epoch_ms
from meeting_planner.mock import FakeZoneFormatter
from meeting_planner.planner.converter import acronym, is_offset_like, zone_abbreviation
from meeting_planner.platform.zoneinfo_formatter import ZoneInfoFormatter

JAN = naive_epoch_ms(2024, 1, 15, 12, 0)
JUL = naive_epoch_ms(2024, 7, 15, 12, 0)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("GMT+5:30", True),
        ("UTC-3", True),
        ("GMT", False),
        ("IST", False),
        ("EGMT+1", False),
    ],
)
def test_is_offset_like(name: str, expected: bool) -> None:
    assert is_offset_like(name) is expected


def test_acronym_takes_word_initial_capitals() -> None:
    assert acronym("India Standard Time") == "IST"
    assert acronym("Nepal Time") == "NT"
    assert acronym("GMT+14:00") == "G"


@pytest.mark.parametrize(
    ("zone", "instant", "expected"),
    [
        ("Asia/Kolkata", JAN, "IST (GMT+5:30)"),
        ("UTC", JAN, "UTC (GMT)"),
        ("Europe/London", JAN, "GMT"),
        ("Europe/London", JUL, "BST (GMT+1)"),
        ("America/New_York", JAN, "EST (GMT-5)"),
        ("America/New_York", JUL, "EDT (GMT-4)"),
        ("Asia/Dubai", JAN, "GMT+4"),
    ],
)
def test_host_labels(zone: str, instant: int, expected: str) -> None:
    assert zone_abbreviation(instant, zone, ZoneInfoFormatter()) == expected


@pytest.mark.parametrize(
    ("zone", "expected"),
    [
        ("Asia/Kolkata", "IST (GMT+5:30)"),
        ("Asia/Dubai", "GST (GMT+4)"),
        ("Asia/Kathmandu", "NT (GMT+5:45)"),
        ("America/Caracas", "VT (GMT-4)"),
        # acronym "G" is too short, the bare offset is kept
        ("Pacific/Kiritimati", "GMT+14"),
    ],
)
def test_acronym_replaces_offset_short_names(zone: str, expected: str) -> None:
    assert zone_abbreviation(JAN, zone, FakeZoneFormatter()) == expected


def test_unknown_zone_gives_empty_label() -> None:
    assert zone_abbreviation(JAN, "Mars/Olympus_Mons", ZoneInfoFormatter()) == ""
    assert zone_abbreviation(JAN, "Mars/Olympus_Mons", FakeZoneFormatter()) == ""


class _NoShortOffset(FakeZoneFormatter):
    def format_name(self, instant, zone, style):
        if style is NameStyle.SHORT_OFFSET:
            return ""
        return super().format_name(instant, zone, style)


def test_long_offset_used_when_short_offset_missing() -> None:
    assert zone_abbreviation(JAN, "America/New_York", _NoShortOffset()) == "EST (GMT-05:00)"
