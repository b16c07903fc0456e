"""Detect the host's IANA zone id."""

from __future__ import annotations

import logging

import tzlocal

logger = logging.getLogger(__name__)

FALLBACK_ZONE = "UTC"


def detect_local_zone() -> str:
    """Return the host zone id as reported by ``tzlocal``.

    ``tzlocal`` honours ``TZ`` before the system configuration.  Falls
    back to ``UTC`` when the host zone cannot be determined.
    """
    try:
        name = tzlocal.get_localzone_name()
    except (LookupError, ValueError, OSError) as exc:
        logger.debug("detect_local_zone: tzlocal failed: %s", exc)
        name = None
    if not name:
        logger.debug("detect_local_zone: nothing found, using %s", FALLBACK_ZONE)
        return FALLBACK_ZONE
    return name
