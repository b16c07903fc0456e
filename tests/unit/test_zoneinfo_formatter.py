from __future__ import annotations

import pytest

from meeting_planner.core.enums import NameStyle
from meeting_planner.core.errors import UnknownZoneError
from meeting_planner.core.models import CalendarFields
from meeting_planner.core.time import naive_epoch_ms
from meeting_planner.mock import FakeZoneFormatter
from meeting_planner.platform.zoneinfo_formatter import ZoneInfoFormatter, create_formatter

JAN = naive_epoch_ms(2024, 1, 15, 12, 0, 30)


@pytest.fixture()
def tz() -> ZoneInfoFormatter:
    return ZoneInfoFormatter()


def test_format_fields(tz) -> None:
    assert tz.format_fields(JAN, "Asia/Kolkata") == CalendarFields(2024, 1, 15, 17, 30, 30)


@pytest.mark.parametrize(
    ("zone", "style", "expected"),
    [
        ("Asia/Kolkata", NameStyle.SHORT, "IST"),
        ("Asia/Kolkata", NameStyle.SHORT_OFFSET, "GMT+5:30"),
        ("Asia/Kolkata", NameStyle.LONG_OFFSET, "GMT+05:30"),
        ("Asia/Kolkata", NameStyle.LONG, "India Standard Time"),
        ("America/New_York", NameStyle.SHORT_OFFSET, "GMT-5"),
        ("America/New_York", NameStyle.LONG_OFFSET, "GMT-05:00"),
        ("UTC", NameStyle.SHORT_OFFSET, "GMT"),
        ("Asia/Dubai", NameStyle.SHORT, "GMT+4"),
        ("Asia/Dubai", NameStyle.LONG, "GMT+04:00"),
    ],
)
def test_format_name(tz, zone: str, style: NameStyle, expected: str) -> None:
    assert tz.format_name(JAN, zone, style) == expected


@pytest.mark.parametrize("zone", ["Mars/Olympus_Mons", "", "../etc/passwd"])
def test_unknown_zones_raise(tz, zone: str) -> None:
    with pytest.raises(UnknownZoneError):
        tz.format_fields(JAN, zone)


def test_create_formatter_honours_mock_env(monkeypatch) -> None:
    monkeypatch.setenv("MEETING_PLANNER_MOCK", "1")
    assert isinstance(create_formatter(), FakeZoneFormatter)
    monkeypatch.setenv("MEETING_PLANNER_MOCK", "0")
    assert isinstance(create_formatter(), ZoneInfoFormatter)
    assert isinstance(create_formatter(use_mock=True), FakeZoneFormatter)
