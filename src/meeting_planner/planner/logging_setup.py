"""Logging for meeting-planner.

The root logger feeds two handlers: stderr at a user-chosen level and a
rotating DEBUG file under the state directory.  Planner and formatter
warnings can also be forwarded to the UI as toasts.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from meeting_planner.core.types import NotifyCallback

from .paths import log_dir

LOG_DIR = log_dir()
LOG_FILE = LOG_DIR / "app.log"
LOG_FORMAT = "[%(name)s] %(message)s"
FILE_LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
MAX_BYTES = 1_000_000
BACKUP_COUNT = 3

VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LEVEL = "INFO"

_stderr_handler: logging.StreamHandler | None = None


def _level_name(*candidates: str | None) -> str | None:
    """First candidate that names a known level, upper-cased."""
    for candidate in candidates:
        if candidate and candidate.upper() in VALID_LEVELS:
            return candidate.upper()
    return None


def configure_logging(console_level: str | None = None) -> None:
    """Attach the stderr and file handlers to the root logger once.

    ``LOG_LEVEL`` in the environment wins over *console_level*.
    """
    global _stderr_handler  # noqa: PLW0603

    if _stderr_handler is not None:
        return

    level = _level_name(os.environ.get("LOG_LEVEL"), console_level) or DEFAULT_LEVEL
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    _stderr_handler = logging.StreamHandler(sys.stderr)
    _stderr_handler.setLevel(level)
    _stderr_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(_stderr_handler)

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    rotating = RotatingFileHandler(LOG_FILE, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT)
    rotating.setLevel(logging.DEBUG)
    rotating.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    root.addHandler(rotating)


def set_stderr_level(level_name: str) -> None:
    """Change the stderr level; unknown names are ignored."""
    level = _level_name(level_name)
    if _stderr_handler is not None and level:
        _stderr_handler.setLevel(level)


def export_logs(dest: str | Path | None = None) -> Path | None:
    """Write the current log and its backups, oldest first.

    Writes to stdout when *dest* is None, otherwise to the file *dest*
    (returned as a Path).
    """
    backups = (LOG_FILE.with_name(f"{LOG_FILE.name}.{n}") for n in range(BACKUP_COUNT, 0, -1))
    sources = [path for path in (*backups, LOG_FILE) if path.exists()]

    def _copy(out) -> None:
        for source in sources:
            with source.open() as f:
                shutil.copyfileobj(f, out)

    if dest is None:
        _copy(sys.stdout)
        return None
    dest = Path(dest)
    with dest.open("w") as out:
        _copy(out)
    return dest


# ---------------------------------------------------------------------------
# Zone warnings -> UI
# ---------------------------------------------------------------------------

_ZONE_LOGGER_PREFIXES = ("meeting_planner.planner", "meeting_planner.platform")


class ZoneErrorHandler(logging.Handler):
    """Passes WARNING+ messages from planner and formatter loggers to a callback."""

    def __init__(self, callback: NotifyCallback) -> None:
        super().__init__(level=logging.WARNING)
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        if not record.name.startswith(_ZONE_LOGGER_PREFIXES):
            return
        try:
            self._callback(record.getMessage())
        except Exception:  # noqa: BLE001
            self.handleError(record)


def install_zone_error_handler(callback: NotifyCallback) -> ZoneErrorHandler:
    handler = ZoneErrorHandler(callback)
    logging.getLogger().addHandler(handler)
    return handler


def remove_zone_error_handler(handler: ZoneErrorHandler) -> None:
    logging.getLogger().removeHandler(handler)
