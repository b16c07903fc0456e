"""Type aliases shared across meeting_planner."""

from __future__ import annotations

from typing import Callable

# Milliseconds since the Unix epoch, independent of zone.
Instant = int

# IANA time zone database key, e.g. "Asia/Kolkata".
ZoneId = str

# Source of the current instant; injected so ticks are testable.
ClockSource = Callable[[], Instant]

# Callback for user-facing warnings (toasts in the GUI).
NotifyCallback = Callable[[str], None]
