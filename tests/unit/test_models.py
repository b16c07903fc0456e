from __future__ import annotations

import pytest

from meeting_planner.core.errors import UnknownZoneError
from meeting_planner.core.models import WallClock


def test_parse_datetime_local_text() -> None:
    assert WallClock.parse("2024-03-01T10:00") == WallClock(2024, 3, 1, 10, 0)


def test_parse_drops_seconds_and_whitespace() -> None:
    assert WallClock.parse(" 2024-03-01T10:00:59 ") == WallClock(2024, 3, 1, 10, 0)


def test_str_round_trips() -> None:
    assert str(WallClock(2024, 3, 1, 9, 5)) == "2024-03-01T09:05"
    assert str(WallClock.parse("2024-12-31T23:59")) == "2024-12-31T23:59"


@pytest.mark.parametrize(
    "text",
    [
        "",
        "2024-03-01",
        "2024-03-01 10:00",
        "2024-13-01T10:00",
        "2023-02-29T10:00",
        "2024-03-01T24:00",
        "2024-03-01T10:60",
        "10:00",
    ],
)
def test_parse_rejects_bad_text(text: str) -> None:
    with pytest.raises(ValueError):
        WallClock.parse(text)


def test_parse_accepts_leap_day() -> None:
    assert WallClock.parse("2024-02-29T00:00") == WallClock(2024, 2, 29, 0, 0)


def test_with_minute() -> None:
    assert WallClock(2024, 3, 1, 10, 45).with_minute(0) == WallClock(2024, 3, 1, 10, 0)


def test_unknown_zone_error_is_a_value_error() -> None:
    err = UnknownZoneError("Mars/Olympus_Mons")
    assert isinstance(err, ValueError)
    assert err.zone == "Mars/Olympus_Mons"
    assert "Mars/Olympus_Mons" in str(err)
