from __future__ import annotations

import logging

from meeting_planner.core.enums import AnchorSide, ReferenceRegion
from meeting_planner.core.models import ClockReading, ReferenceMeeting, WallClock, ZoneEntry
from meeting_planner.core.services import PlannerService, ZoneFormatter
from meeting_planner.core.time import now_instant
from meeting_planner.core.types import ClockSource, Instant, ZoneId

from . import catalog
from .config import RuntimeConfig, load_runtime_config
from .converter import convert, zone_abbreviation
from .db import open_db
from .logging_setup import install_zone_error_handler, remove_zone_error_handler
from .settings import PlannerSettings
from .settings_store import SettingsStore
from .sync import (
    ChangeZoneA,
    ChangeZoneB,
    EditA,
    EditB,
    PlannerEvent,
    PlannerState,
    initial_state,
    transition,
)
from .world_clock import WorldClock, read_clock
from .world_clock import reference_meeting as build_reference_meeting

logger = logging.getLogger(__name__)

MAX_PENDING_WARNINGS = 20


class PlannerClient(PlannerService):
    """Planner backend for the GTK window and the CLI."""

    def __init__(
        self,
        formatter: ZoneFormatter,
        *,
        settings_store: SettingsStore | None = None,
        clock: ClockSource = now_instant,
    ) -> None:
        self._formatter = formatter
        self._clock = clock
        self._settings_store = settings_store or SettingsStore(open_db())
        self._settings = self._settings_store.load()
        self._config: RuntimeConfig = load_runtime_config(self._settings)
        logger.info("Planner config: %s", self._config.to_log_string())

        self._state = initial_state(
            self._config.user_timezone,
            self._config.client_timezone,
            self._clock(),
            self._formatter,
        )
        self._world_clock = WorldClock(self._formatter, [self._state.zone_a, self._state.zone_b])
        self._warnings: list[str] = []
        self._zone_error_handler = install_zone_error_handler(self._on_zone_error)

    def close(self) -> None:
        remove_zone_error_handler(self._zone_error_handler)

    # -- state machine -------------------------------------------------------

    def _dispatch(self, event: PlannerEvent) -> PlannerState:
        self._state = transition(self._state, event, self._formatter)
        self._world_clock.set_zones([self._state.zone_a, self._state.zone_b])
        return self._state

    def get_state(self) -> PlannerState:
        return self._state

    def anchor(self) -> AnchorSide:
        return self._state.anchor

    def edit_a(self, text: str) -> PlannerState:
        return self._dispatch(EditA(text))

    def edit_b(self, text: str) -> PlannerState:
        return self._dispatch(EditB(text))

    def set_zone_a(self, zone: ZoneId) -> PlannerState:
        state = self._dispatch(ChangeZoneA(zone))
        self._settings.user_timezone = zone
        self._settings_store.save(self._settings)
        return state

    def set_zone_b(self, zone: ZoneId) -> PlannerState:
        state = self._dispatch(ChangeZoneB(zone))
        self._settings.client_timezone = zone
        self._settings_store.save(self._settings)
        return state

    # -- conversions and readings --------------------------------------------

    def convert(self, wall_clock: WallClock, from_zone: ZoneId, to_zone: ZoneId) -> WallClock:
        return convert(wall_clock, from_zone, to_zone, self._formatter)

    def tick(self) -> list[ClockReading]:
        return self._world_clock.tick(self._clock())

    def read_clock(self, zone: ZoneId) -> ClockReading:
        return read_clock(self._clock(), zone, self._formatter)

    def abbreviation(self, zone: ZoneId, instant: Instant | None = None) -> str:
        at = self._clock() if instant is None else instant
        return zone_abbreviation(at, zone, self._formatter)

    def reference_meeting(self, region: ReferenceRegion) -> ReferenceMeeting | None:
        return build_reference_meeting(self._state, region, self._formatter)

    def list_zones(self) -> list[ZoneEntry]:
        entries = catalog.with_zone(self._state.zone_a)
        return list(catalog.with_zone(self._state.zone_b, entries))

    # -- settings --------------------------------------------------------------

    def get_settings(self) -> PlannerSettings:
        return self._settings.clone()

    def update_settings(self, settings: PlannerSettings) -> None:
        updated = settings.clone()
        self._settings = updated
        self._settings_store.save(updated)
        self._config = load_runtime_config(updated)
        if self._config.user_timezone != self._state.zone_a:
            self._dispatch(ChangeZoneA(self._config.user_timezone))
        if self._config.client_timezone != self._state.zone_b:
            self._dispatch(ChangeZoneB(self._config.client_timezone))

    # -- zone warnings ---------------------------------------------------------

    def _on_zone_error(self, message: str) -> None:
        """Callback from ZoneErrorHandler; queued for the UI."""
        self._warnings.append(message)
        if len(self._warnings) > MAX_PENDING_WARNINGS:
            self._warnings = self._warnings[-MAX_PENDING_WARNINGS:]

    def poll_warnings(self) -> list[str]:
        pending, self._warnings = self._warnings, []
        return pending
