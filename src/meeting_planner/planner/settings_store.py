"""Planner settings persisted as key/value rows."""

from __future__ import annotations

import sqlite3
from dataclasses import asdict, fields

from .settings import PlannerSettings

_UPSERT = """
INSERT INTO settings (key, value) VALUES (?, ?)
ON CONFLICT(key) DO UPDATE SET value = excluded.value
"""


class SettingsStore:
    """Reads and writes :class:`PlannerSettings` in the ``settings`` table.

    Every field is text, so rows map straight onto keyword arguments.
    Rows for keys no field claims are skipped.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def load(self) -> PlannerSettings:
        known = {field.name for field in fields(PlannerSettings)}
        rows = self._conn.execute("SELECT key, value FROM settings")
        return PlannerSettings(**{key: value for key, value in rows if key in known})

    def save(self, settings: PlannerSettings) -> None:
        with self._conn:
            self._conn.executemany(_UPSERT, asdict(settings).items())
