from __future__ import annotations

from datetime import UTC, datetime

import pytest

from meeting_planner.core.time import (
    datetime_to_instant,
    fields_from_naive_ms,
    format_long_offset,
    format_short_offset,
    instant_to_datetime,
    naive_epoch_ms,
)


def test_naive_epoch_ms() -> None:
    assert naive_epoch_ms(1970, 1, 1) == 0
    assert naive_epoch_ms(2024, 1, 15, 12, 0) == 1_705_320_000_000
    # Hour 24 overflows into the next day.
    assert naive_epoch_ms(2024, 1, 15, 24) == naive_epoch_ms(2024, 1, 16)


def test_fields_from_naive_ms_inverts() -> None:
    value = naive_epoch_ms(2024, 2, 29, 23, 59, 58)
    assert fields_from_naive_ms(value) == (2024, 2, 29, 23, 59, 58)


def test_datetime_conversions() -> None:
    dt = datetime(2024, 1, 15, 12, 0, tzinfo=UTC)
    instant = datetime_to_instant(dt)
    assert instant == 1_705_320_000_000
    assert instant_to_datetime(instant) == dt
    assert datetime_to_instant(dt.replace(tzinfo=None)) == instant


@pytest.mark.parametrize(
    ("minutes", "short", "long"),
    [
        (0, "GMT", "GMT"),
        (-300, "GMT-5", "GMT-05:00"),
        (330, "GMT+5:30", "GMT+05:30"),
        (345, "GMT+5:45", "GMT+05:45"),
        (-570, "GMT-9:30", "GMT-09:30"),
        (840, "GMT+14", "GMT+14:00"),
    ],
)
def test_offset_names(minutes: int, short: str, long: str) -> None:
    assert format_short_offset(minutes) == short
    assert format_long_offset(minutes) == long
