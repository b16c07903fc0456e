from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk

from meeting_planner.core.enums import ReferenceRegion
from meeting_planner.core.models import ClockReading
from meeting_planner.core.services import PlannerService
from meeting_planner.planner.display import MEETING_PLACEHOLDER
from meeting_planner.planner.world_clock import REFERENCE_REGIONS, short_abbreviation
from meeting_planner.ui_gtk.widgets import ClockCard, SectionHeader


class QuickRefsView(Gtk.Box):
    """Your planned meeting shown in each reference region."""

    def __init__(self, service: PlannerService) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        self._service = service
        self.set_margin_start(12)
        self.set_margin_end(12)
        self.set_margin_top(12)

        self.append(SectionHeader("Quick references", "Your meeting time in common regions."))

        grid = Gtk.Grid()
        grid.set_row_spacing(8)
        grid.set_column_spacing(14)
        self.append(grid)

        self._cards: dict[ReferenceRegion, ClockCard] = {}
        self._meeting_labels: dict[ReferenceRegion, Gtk.Label] = {}
        for column, (region, info) in enumerate(REFERENCE_REGIONS.items()):
            card = ClockCard(info.title)
            self._cards[region] = card
            grid.attach(card, column, 0, 1, 1)

            meeting = Gtk.Label(label=MEETING_PLACEHOLDER)
            meeting.add_css_class("panel-muted")
            meeting.set_halign(Gtk.Align.START)
            meeting.set_wrap(True)
            self._meeting_labels[region] = meeting
            grid.attach(meeting, column, 1, 1, 1)

    def refresh(self) -> None:
        """Recompute the meeting lines from the planner's current field A."""
        for region, label in self._meeting_labels.items():
            info = REFERENCE_REGIONS[region]
            meeting = self._service.reference_meeting(region)
            if meeting is None:
                label.set_text(MEETING_PLACEHOLDER)
                continue
            abbr = short_abbreviation(meeting.abbreviation) or info.short
            label.set_text(
                f"Your {meeting.selected_time} is {meeting.converted_time} {abbr} "
                f"on {meeting.converted_date} in {meeting.region_label}"
            )

    def tick(self, _readings: list[ClockReading]) -> None:
        for region, card in self._cards.items():
            card.update(self._service.read_clock(REFERENCE_REGIONS[region].zone_id))
        self.refresh()
