from __future__ import annotations

from dataclasses import dataclass, replace

from meeting_planner.core.enums import ReferenceRegion


@dataclass(slots=True)
class PlannerSettings:
    # Zones
    user_timezone: str = ""  # empty = host zone
    client_timezone: str = "Asia/Kolkata"

    # Quick refs
    reference_region: str = ReferenceRegion.IST.value

    # Logging
    log_level: str = "INFO"

    def clone(self) -> PlannerSettings:
        return replace(self)
