"""Fake zone formatter driven by fixed offset tables."""

from __future__ import annotations

import bisect
import logging
from dataclasses import dataclass, field

from meeting_planner.core.enums import NameStyle
from meeting_planner.core.errors import UnknownZoneError
from meeting_planner.core.models import CalendarFields
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.time import (
    MINUTE_MS,
    fields_from_naive_ms,
    format_long_offset,
    format_short_offset,
)
from meeting_planner.core.types import Instant, ZoneId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OffsetPeriod:
    """Offset and names in force from *start* (inclusive) until the next period."""

    start: Instant
    offset_minutes: int
    short_name: str
    long_name: str


@dataclass(frozen=True, slots=True)
class ZoneRules:
    """Offset table for one zone.

    *base* applies before the first transition; *transitions* must be
    sorted by start instant.
    """

    base_offset_minutes: int
    base_short_name: str
    base_long_name: str
    transitions: tuple[OffsetPeriod, ...] = field(default_factory=tuple)

    def period_at(self, instant: Instant) -> tuple[int, str, str]:
        starts = [period.start for period in self.transitions]
        index = bisect.bisect_right(starts, instant) - 1
        if index < 0:
            return self.base_offset_minutes, self.base_short_name, self.base_long_name
        period = self.transitions[index]
        return period.offset_minutes, period.short_name, period.long_name


class FakeZoneFormatter(ZoneFormatter):
    """Deterministic formatter for tests and ``MEETING_PLANNER_MOCK=1``.

    Set *midnight_as_24* to reproduce platforms that report midnight as
    hour 24 of the same day.
    """

    def __init__(
        self,
        rules: dict[ZoneId, ZoneRules] | None = None,
        *,
        midnight_as_24: bool = False,
    ) -> None:
        if rules is None:
            from .data import MOCK_ZONE_RULES

            rules = MOCK_ZONE_RULES
        self._rules = dict(rules)
        self._midnight_as_24 = midnight_as_24
        self.field_calls = 0

    def zones(self) -> list[ZoneId]:
        return list(self._rules)

    def _rules_for(self, zone: ZoneId) -> ZoneRules:
        rules = self._rules.get(zone)
        if rules is None:
            logger.debug("FakeZoneFormatter: no rules for %s", zone)
            raise UnknownZoneError(zone)
        return rules

    def format_fields(self, instant: Instant, zone: ZoneId) -> CalendarFields:
        self.field_calls += 1
        offset_minutes, _short, _long = self._rules_for(zone).period_at(instant)
        year, month, day, hour, minute, second = fields_from_naive_ms(
            instant + offset_minutes * MINUTE_MS
        )
        if self._midnight_as_24 and hour == 0:
            hour = 24
        return CalendarFields(year, month, day, hour, minute, second)

    def format_name(self, instant: Instant, zone: ZoneId, style: NameStyle) -> str:
        offset_minutes, short_name, long_name = self._rules_for(zone).period_at(instant)
        if style is NameStyle.SHORT:
            return short_name
        if style is NameStyle.SHORT_OFFSET:
            return format_short_offset(offset_minutes)
        if style is NameStyle.LONG_OFFSET:
            return format_long_offset(offset_minutes)
        return long_name
