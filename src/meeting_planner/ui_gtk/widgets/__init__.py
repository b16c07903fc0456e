from .clock_card import ClockCard
from .section_header import SectionHeader

__all__ = [
    "ClockCard",
    "SectionHeader",
]
