from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

_WALL_CLOCK_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2})(?::(\d{2}))?$")


@dataclass(frozen=True, slots=True)
class WallClock:
    """Calendar date and time with no zone attached.

    The text form is the ``datetime-local`` form ``YYYY-MM-DDTHH:MM``.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int

    @classmethod
    def parse(cls, text: str) -> WallClock:
        """Parse ``YYYY-MM-DDTHH:MM`` (trailing ``:SS`` accepted and dropped).

        Raises ValueError for malformed text or out-of-range fields.
        """
        match = _WALL_CLOCK_RE.match(text.strip())
        if match is None:
            raise ValueError(f"Expected YYYY-MM-DDTHH:MM, got {text!r}")
        year, month, day, hour, minute = (int(g) for g in match.groups()[:5])
        # date() validates month/day including leap years
        date(year, month, day)
        if not 0 <= hour <= 23:
            raise ValueError(f"hour must be in 0..23, got {hour}")
        if not 0 <= minute <= 59:
            raise ValueError(f"minute must be in 0..59, got {minute}")
        return cls(year, month, day, hour, minute)

    def with_minute(self, minute: int) -> WallClock:
        return WallClock(self.year, self.month, self.day, self.hour, minute)

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}"
        )


@dataclass(frozen=True, slots=True)
class CalendarFields:
    """Calendar fields a clock in some zone displays for an instant.

    ``hour`` can be 24 for midnight on platforms with that quirk.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int = 0


@dataclass(frozen=True, slots=True)
class ZoneEntry:
    label: str
    zone_id: str


@dataclass(frozen=True, slots=True)
class ClockReading:
    zone_id: str
    wall_clock: WallClock | None
    time_label: str  # "2:05:09 PM"
    date_label: str  # "Mon, Jan 15"
    abbreviation: str  # "IST (GMT+5:30)"


@dataclass(frozen=True, slots=True)
class ReferenceMeeting:
    """The user's planned meeting shown in a quick-reference zone."""

    region_label: str
    zone_id: str
    selected_time: str
    converted_time: str
    converted_date: str
    abbreviation: str
