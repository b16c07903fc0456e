from __future__ import annotations

import os
from dataclasses import dataclass

from meeting_planner.platform.local_zone import detect_local_zone

from .settings import PlannerSettings


@dataclass(slots=True)
class RuntimeConfig:
    user_timezone: str
    client_timezone: str
    use_mock: bool = False

    def to_log_string(self) -> str:
        return (
            f"user_timezone={self.user_timezone} client_timezone={self.client_timezone} "
            f"use_mock={self.use_mock}"
        )


def _env_str(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_runtime_config(settings: PlannerSettings | None = None) -> RuntimeConfig:
    """Resolve zones from env, then persisted settings, then the host zone.

    ``MEETING_PLANNER_USER_TZ`` / ``MEETING_PLANNER_CLIENT_TZ`` win over
    stored settings.
    """
    settings = settings or PlannerSettings()
    user_default = settings.user_timezone or detect_local_zone()
    return RuntimeConfig(
        user_timezone=_env_str("MEETING_PLANNER_USER_TZ", user_default),
        client_timezone=_env_str("MEETING_PLANNER_CLIENT_TZ", settings.client_timezone),
        use_mock=_env_bool("MEETING_PLANNER_MOCK", False),
    )
