"""Wall-clock conversion between IANA zones.

``resolve_instant`` is the hard direction: a zone's offset depends on the
instant, so the instant for a wall clock is found by fixed-point
iteration against the formatter.  ``render_wall_clock`` is the easy
direction and always single-valued.

Known imprecision, kept as-is:

- A wall clock inside a spring-forward gap has no instant.  The iteration
  settles on some instant next to the gap (typically an hour after it)
  and that estimate is returned.
- A wall clock inside a fall-back overlap happens twice.  Whichever offset
  the formatter reports around the naive first guess wins; there is no
  disambiguation.
"""

from __future__ import annotations

import logging
import re

from meeting_planner.core.enums import NameStyle
from meeting_planner.core.models import CalendarFields, WallClock
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.time import fields_from_naive_ms, naive_epoch_ms
from meeting_planner.core.types import Instant, ZoneId

logger = logging.getLogger(__name__)

# Offsets are bounded to +/-14h and DST shifts to <= 2h, so three steps
# are enough for every real zone.
MAX_ITERATIONS = 3
CONVERGENCE_TOLERANCE_MS = 1000

_OFFSET_LIKE_RE = re.compile(r"^(GMT|UTC)[+-]")
_WORD_CAPITAL_RE = re.compile(r"\b([A-Z])")


def _observed_naive_ms(fields: CalendarFields) -> int:
    # Seconds are ignored: wall clocks carry minute precision.
    hour = 0 if fields.hour == 24 else fields.hour
    return naive_epoch_ms(fields.year, fields.month, fields.day, hour, fields.minute)


def _wall_clock_naive_ms(wall_clock: WallClock) -> int:
    return naive_epoch_ms(
        wall_clock.year, wall_clock.month, wall_clock.day, wall_clock.hour, wall_clock.minute
    )


def resolve_instant(
    wall_clock: WallClock,
    zone: ZoneId,
    formatter: ZoneFormatter,
    *,
    max_iterations: int = MAX_ITERATIONS,
) -> Instant:
    """Return the instant at which a clock in *zone* shows *wall_clock*.

    Raises UnknownZoneError if the formatter cannot resolve *zone*.  Never
    fails for lack of convergence; the last estimate is returned instead.
    """
    desired = _wall_clock_naive_ms(wall_clock)
    # Crude seed: pretend the zone is UTC.
    guess = desired
    for _ in range(max_iterations):
        observed = _observed_naive_ms(formatter.format_fields(guess, zone))
        delta = desired - observed
        if abs(delta) < CONVERGENCE_TOLERANCE_MS:
            return guess
        guess += delta
    logger.debug(
        "resolve_instant: %s in %s did not converge after %d steps, using %d",
        wall_clock,
        zone,
        max_iterations,
        guess,
    )
    return guess


def render_wall_clock(instant: Instant, zone: ZoneId, formatter: ZoneFormatter) -> WallClock:
    """Return the wall clock *instant* displays in *zone*.

    Hour 24 (midnight on some platforms) is normalised to hour 0 of the
    same calendar day.
    """
    fields = formatter.format_fields(instant, zone)
    hour = 0 if fields.hour == 24 else fields.hour
    return WallClock(fields.year, fields.month, fields.day, hour, fields.minute)


def convert(
    wall_clock: WallClock, from_zone: ZoneId, to_zone: ZoneId, formatter: ZoneFormatter
) -> WallClock:
    """Return the wall clock in *to_zone* matching *wall_clock* in *from_zone*."""
    instant = resolve_instant(wall_clock, from_zone, formatter)
    return render_wall_clock(instant, to_zone, formatter)


def shift_wall_clock(wall_clock: WallClock, delta_ms: int) -> WallClock:
    """Move a wall clock's fields by *delta_ms* without involving a zone."""
    shifted = _wall_clock_naive_ms(wall_clock) + delta_ms
    year, month, day, hour, minute, _second = fields_from_naive_ms(shifted)
    return WallClock(year, month, day, hour, minute)


def is_offset_like(name: str) -> bool:
    """True for bare offsets such as ``GMT+5:30`` or ``UTC-3``."""
    return bool(_OFFSET_LIKE_RE.match(name))


def acronym(long_name: str) -> str:
    """Capital letters that start words: "India Standard Time" -> "IST"."""
    return "".join(_WORD_CAPITAL_RE.findall(long_name))


def zone_abbreviation(instant: Instant, zone: ZoneId, formatter: ZoneFormatter) -> str:
    """Label such as ``"IST (GMT+5:30)"`` for *zone* at *instant*.

    Display-only: returns ``""`` when the formatter cannot resolve *zone*.
    """
    try:
        short_name = formatter.format_name(instant, zone, NameStyle.SHORT)
        offset = formatter.format_name(
            instant, zone, NameStyle.SHORT_OFFSET
        ) or formatter.format_name(instant, zone, NameStyle.LONG_OFFSET)

        abbreviation = short_name
        if is_offset_like(short_name):
            long_name = formatter.format_name(instant, zone, NameStyle.LONG)
            if long_name:
                candidate = acronym(long_name)
                if 2 <= len(candidate) <= 5:
                    abbreviation = candidate
    except (ValueError, OverflowError) as exc:
        logger.debug("zone_abbreviation: %s", exc)
        return ""

    if is_offset_like(abbreviation):
        return abbreviation
    if abbreviation == offset:
        return abbreviation
    return f"{abbreviation} ({offset})"
