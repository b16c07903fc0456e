"""Mock implementations for testing and development."""

from .formatter import FakeZoneFormatter, OffsetPeriod, ZoneRules

__all__ = ["FakeZoneFormatter", "OffsetPeriod", "ZoneRules"]
