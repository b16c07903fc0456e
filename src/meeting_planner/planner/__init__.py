from .config import RuntimeConfig, load_runtime_config
from .converter import convert, render_wall_clock, resolve_instant, zone_abbreviation
from .service import PlannerClient
from .settings import PlannerSettings
from .sync import PlannerState, initial_state, transition

__all__ = [
    "PlannerClient",
    "PlannerSettings",
    "PlannerState",
    "RuntimeConfig",
    "convert",
    "initial_state",
    "load_runtime_config",
    "render_wall_clock",
    "resolve_instant",
    "transition",
    "zone_abbreviation",
]
