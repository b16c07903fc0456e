from __future__ import annotations

import pytest

from meeting_planner.core.models import CalendarFields
from meeting_planner.core.time import naive_epoch_ms
from meeting_planner.mock import FakeZoneFormatter
from meeting_planner.planner.display import (
    MEETING_PLACEHOLDER,
    TIME_PLACEHOLDER,
    clock_date_label,
    clock_time_label,
    format_clock_date,
    format_clock_time,
    format_meeting_time,
)


@pytest.mark.parametrize(
    ("hour", "expected"),
    [
        (0, "12:05:09 AM"),
        (9, "9:05:09 AM"),
        (12, "12:05:09 PM"),
        (14, "2:05:09 PM"),
        (24, "12:05:09 AM"),
    ],
)
def test_clock_time_label(hour: int, expected: str) -> None:
    assert clock_time_label(CalendarFields(2024, 1, 15, hour, 5, 9)) == expected


def test_clock_time_label_without_seconds() -> None:
    assert clock_time_label(CalendarFields(2024, 1, 15, 14, 5, 9), seconds=False) == "2:05 PM"


def test_clock_date_label() -> None:
    assert clock_date_label(CalendarFields(2024, 1, 15, 14, 5)) == "Mon, Jan 15"
    assert clock_date_label(CalendarFields(2024, 12, 1, 0, 0)) == "Sun, Dec 1"


def test_formatters_read_the_zone() -> None:
    fake = FakeZoneFormatter()
    instant = naive_epoch_ms(2024, 1, 15, 23, 30, 15)
    assert format_clock_time(instant, "Asia/Kolkata", fake) == "5:00:15 AM"
    assert format_clock_date(instant, "Asia/Kolkata", fake) == "Tue, Jan 16"
    assert format_meeting_time(instant, "America/New_York", fake) == "6:30 PM"


def test_unknown_zone_degrades_to_placeholders() -> None:
    fake = FakeZoneFormatter()
    instant = naive_epoch_ms(2024, 1, 15, 12, 0)
    assert format_clock_time(instant, "Mars/Olympus_Mons", fake) == TIME_PLACEHOLDER
    assert format_clock_date(instant, "Mars/Olympus_Mons", fake) == ""
    assert format_meeting_time(instant, "Mars/Olympus_Mons", fake) == MEETING_PLACEHOLDER
