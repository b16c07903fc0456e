from .enums import AnchorSide, NameStyle, ReferenceRegion
from .errors import UnknownZoneError
from .models import CalendarFields, ClockReading, ReferenceMeeting, WallClock, ZoneEntry
from .services import PlannerService, ZoneFormatter
from .types import ClockSource, Instant, NotifyCallback, ZoneId

__all__ = [
    "AnchorSide",
    "CalendarFields",
    "ClockReading",
    "ClockSource",
    "Instant",
    "NameStyle",
    "NotifyCallback",
    "PlannerService",
    "ReferenceMeeting",
    "ReferenceRegion",
    "UnknownZoneError",
    "WallClock",
    "ZoneEntry",
    "ZoneFormatter",
    "ZoneId",
]
