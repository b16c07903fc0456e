"""Two-field meeting planner synchronisation.

The planner shows one wall-clock field per party (A: user, B: client),
each paired with a zone.  The field edited last is the anchor: it is
held fixed when a zone changes and the other field is re-derived from
it.  ``transition`` is a pure function of (state, event).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from meeting_planner.core.enums import AnchorSide
from meeting_planner.core.errors import UnknownZoneError
from meeting_planner.core.models import WallClock
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.time import HOUR_MS
from meeting_planner.core.types import Instant, ZoneId

from .converter import convert, render_wall_clock, resolve_instant, shift_wall_clock

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlannerState:
    anchor: AnchorSide
    zone_a: ZoneId
    zone_b: ZoneId
    text_a: str = ""  # "" when cleared
    text_b: str = ""

    def anchored_text(self) -> str:
        return self.text_a if self.anchor is AnchorSide.A else self.text_b


@dataclass(frozen=True, slots=True)
class EditA:
    text: str


@dataclass(frozen=True, slots=True)
class EditB:
    text: str


@dataclass(frozen=True, slots=True)
class ChangeZoneA:
    zone: ZoneId


@dataclass(frozen=True, slots=True)
class ChangeZoneB:
    zone: ZoneId


PlannerEvent = EditA | EditB | ChangeZoneA | ChangeZoneB


def derive_text(text: str, from_zone: ZoneId, to_zone: ZoneId, formatter: ZoneFormatter) -> str:
    """Convert field text between zones, or ``""`` when it cannot be converted.

    Empty or unparsable input, unresolvable zones and instants outside
    the datetime range clear the dependent field.
    """
    if not text:
        return ""
    try:
        wall_clock = WallClock.parse(text)
    except ValueError as exc:
        logger.debug("derive_text: %s", exc)
        return ""
    try:
        return str(convert(wall_clock, from_zone, to_zone, formatter))
    except (UnknownZoneError, OverflowError) as exc:
        logger.warning("Cannot convert %s from %s to %s: %s", text, from_zone, to_zone, exc)
        return ""


def _apply_edit(
    state: PlannerState, side: AnchorSide, text: str, formatter: ZoneFormatter
) -> PlannerState:
    if side is AnchorSide.A:
        other = derive_text(text, state.zone_a, state.zone_b, formatter)
        updated = replace(state, text_a=text, text_b=other)
    else:
        other = derive_text(text, state.zone_b, state.zone_a, formatter)
        updated = replace(state, text_b=text, text_a=other)
    if not text.strip():
        # Clearing a field never moves the anchor.
        return updated
    return replace(updated, anchor=side)


def _rederive(state: PlannerState, formatter: ZoneFormatter) -> PlannerState:
    """Recompute the non-anchored field from the anchored one."""
    text = state.anchored_text()
    if not text:
        return state
    if state.anchor is AnchorSide.A:
        return replace(state, text_b=derive_text(text, state.zone_a, state.zone_b, formatter))
    return replace(state, text_a=derive_text(text, state.zone_b, state.zone_a, formatter))


def transition(
    state: PlannerState, event: PlannerEvent, formatter: ZoneFormatter
) -> PlannerState:
    """Return the state after *event*. Never raises for bad input or zones."""
    if isinstance(event, EditA):
        return _apply_edit(state, AnchorSide.A, event.text, formatter)
    if isinstance(event, EditB):
        return _apply_edit(state, AnchorSide.B, event.text, formatter)
    if isinstance(event, ChangeZoneA):
        return _rederive(replace(state, zone_a=event.zone), formatter)
    if isinstance(event, ChangeZoneB):
        return _rederive(replace(state, zone_b=event.zone), formatter)
    raise TypeError(f"Unsupported planner event: {event!r}")


def next_whole_hour(now: Instant, zone: ZoneId, formatter: ZoneFormatter) -> WallClock:
    """The start of the hour after the current one, as seen in *zone*."""
    current = render_wall_clock(now, zone, formatter).with_minute(0)
    candidate = shift_wall_clock(current, HOUR_MS)
    # Round-trip through an instant so a DST gap yields a real wall clock.
    return render_wall_clock(resolve_instant(candidate, zone, formatter), zone, formatter)


def initial_state(
    zone_a: ZoneId, zone_b: ZoneId, now: Instant, formatter: ZoneFormatter
) -> PlannerState:
    """Anchor on A, seed A with the next whole hour and derive B."""
    try:
        seed = str(next_whole_hour(now, zone_a, formatter))
    except UnknownZoneError as exc:
        logger.warning("Cannot seed planner in %s: %s", zone_a, exc)
        return PlannerState(anchor=AnchorSide.A, zone_a=zone_a, zone_b=zone_b)
    return PlannerState(
        anchor=AnchorSide.A,
        zone_a=zone_a,
        zone_b=zone_b,
        text_a=seed,
        text_b=derive_text(seed, zone_a, zone_b, formatter),
    )
