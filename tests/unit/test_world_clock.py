from __future__ import annotations

from meeting_planner.core.enums import AnchorSide, ReferenceRegion
from meeting_planner.core.models import WallClock
from meeting_planner.core.time import naive_epoch_ms
from meeting_planner.mock import FakeZoneFormatter
from meeting_planner.planner.display import TIME_PLACEHOLDER
from meeting_planner.planner.sync import PlannerState
from meeting_planner.planner.world_clock import (
    REFERENCE_REGIONS,
    WorldClock,
    read_clock,
    reference_meeting,
    short_abbreviation,
)

NOW = naive_epoch_ms(2024, 1, 15, 14, 5, 9)


def test_read_clock() -> None:
    reading = read_clock(NOW, "Asia/Kolkata", FakeZoneFormatter())
    assert reading.zone_id == "Asia/Kolkata"
    assert reading.wall_clock == WallClock(2024, 1, 15, 19, 35)
    assert reading.time_label == "7:35:09 PM"
    assert reading.date_label == "Mon, Jan 15"
    assert reading.abbreviation == "IST (GMT+5:30)"


def test_read_clock_unknown_zone() -> None:
    reading = read_clock(NOW, "Mars/Olympus_Mons", FakeZoneFormatter())
    assert reading.wall_clock is None
    assert reading.time_label == TIME_PLACEHOLDER
    assert reading.abbreviation == ""


def test_world_clock_ticks_each_zone() -> None:
    clock = WorldClock(FakeZoneFormatter(), ["UTC", "America/New_York"])
    readings = clock.tick(NOW)
    assert [r.zone_id for r in readings] == ["UTC", "America/New_York"]
    assert readings[1].time_label == "9:05:09 AM"

    clock.set_zones(["Asia/Tokyo"])
    assert clock.zones == ["Asia/Tokyo"]
    assert [r.zone_id for r in clock.tick(NOW)] == ["Asia/Tokyo"]


def test_world_clock_zones_is_a_copy() -> None:
    clock = WorldClock(FakeZoneFormatter(), ["UTC"])
    clock.zones.append("Asia/Tokyo")
    assert clock.zones == ["UTC"]


def test_short_abbreviation() -> None:
    assert short_abbreviation("IST (GMT+5:30)") == "IST"
    assert short_abbreviation("GMT+4") == "GMT+4"
    assert short_abbreviation("") == ""


def test_reference_regions() -> None:
    assert REFERENCE_REGIONS[ReferenceRegion.IST].zone_id == "Asia/Kolkata"
    assert REFERENCE_REGIONS[ReferenceRegion.NY].zone_id == "America/New_York"


def test_reference_meeting_in_india() -> None:
    state = PlannerState(
        AnchorSide.A, "America/New_York", "Europe/London", text_a="2024-01-15T10:00"
    )
    meeting = reference_meeting(state, ReferenceRegion.IST, FakeZoneFormatter())
    assert meeting is not None
    assert meeting.region_label == "India"
    assert meeting.zone_id == "Asia/Kolkata"
    assert meeting.selected_time == "10:00 AM"
    assert meeting.converted_time == "8:30:00 PM"
    assert meeting.converted_date == "Mon, Jan 15"
    assert meeting.abbreviation == "IST (GMT+5:30)"


def test_reference_meeting_in_new_york() -> None:
    state = PlannerState(AnchorSide.A, "Asia/Kolkata", "UTC", text_a="2024-07-15T21:30")
    meeting = reference_meeting(state, ReferenceRegion.NY, FakeZoneFormatter())
    assert meeting is not None
    assert meeting.converted_time == "12:00:00 PM"
    assert meeting.abbreviation == "EDT (GMT-4)"


def test_reference_meeting_needs_a_parsable_field_a() -> None:
    fake = FakeZoneFormatter()
    empty = PlannerState(AnchorSide.A, "UTC", "UTC")
    garbage = PlannerState(AnchorSide.A, "UTC", "UTC", text_a="tomorrow")
    unknown = PlannerState(AnchorSide.A, "Mars/Olympus_Mons", "UTC", text_a="2024-01-15T10:00")
    assert reference_meeting(empty, ReferenceRegion.IST, fake) is None
    assert reference_meeting(garbage, ReferenceRegion.IST, fake) is None
    assert reference_meeting(unknown, ReferenceRegion.IST, fake) is None


def test_reference_meeting_out_of_range_is_none() -> None:
    state = PlannerState(AnchorSide.A, "Asia/Kolkata", "UTC", text_a="9999-12-31T23:00")
    assert reference_meeting(state, ReferenceRegion.NY, FakeZoneFormatter()) is None


def test_read_clock_out_of_range_uses_placeholders() -> None:
    last_hour = naive_epoch_ms(9999, 12, 31, 23, 0)
    reading = read_clock(last_hour, "Asia/Kolkata", FakeZoneFormatter())
    assert reading.wall_clock is None
    assert reading.time_label == TIME_PLACEHOLDER
    assert reading.date_label == ""
