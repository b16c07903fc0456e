from __future__ import annotations


class UnknownZoneError(ValueError):
    """Raised by a zone formatter when a zone id cannot be resolved."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"Unknown time zone: {zone!r}")
        self.zone = zone
