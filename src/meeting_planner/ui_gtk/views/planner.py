from __future__ import annotations

import logging

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk

from meeting_planner.core.enums import AnchorSide, ReferenceRegion
from meeting_planner.core.models import ClockReading, ZoneEntry
from meeting_planner.core.services import PlannerService
from meeting_planner.planner import catalog
from meeting_planner.planner.sync import PlannerState
from meeting_planner.ui_gtk.helpers import selected_index, selected_zone, zone_dropdown
from meeting_planner.ui_gtk.widgets import ClockCard, SectionHeader

logger = logging.getLogger(__name__)

ENTRY_PLACEHOLDER = "YYYY-MM-DDTHH:MM"


class PlannerView(Gtk.Box):
    """Two synchronised wall-clock fields, one per party."""

    def __init__(self, service: PlannerService) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=12)
        self._service = service
        self._entries_list: list[ZoneEntry] = service.list_zones()
        # Guards against feedback from programmatic set_text / set_selected.
        self._updating = False

        self.set_margin_start(12)
        self.set_margin_end(12)
        self.set_margin_top(12)
        self.append(
            SectionHeader(
                "Plan a meeting",
                "Type a time on either side. The side you typed last stays fixed "
                "when a zone changes.",
            )
        )

        columns = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=14)
        columns.set_homogeneous(True)
        self.append(columns)

        state = service.get_state()
        self._cards: dict[AnchorSide, ClockCard] = {}
        self._dropdowns: dict[AnchorSide, Gtk.DropDown] = {}
        self._entries: dict[AnchorSide, Gtk.Entry] = {}
        self._anchor_labels: dict[AnchorSide, Gtk.Label] = {}
        columns.append(self._build_side(AnchorSide.A, "You", state.zone_a))
        columns.append(self._build_side(AnchorSide.B, "Client", state.zone_b))

        self._reference_label = Gtk.Label(label="")
        self._reference_label.add_css_class("panel-muted")
        self._reference_label.set_halign(Gtk.Align.START)
        self.append(self._reference_label)

        self._apply_state(state)

    def sync_from_service(self) -> None:
        """Pick up zone changes made outside this view (e.g. settings)."""
        entries = self._service.list_zones()
        if entries != self._entries_list:
            self._entries_list = entries
            self._updating = True
            try:
                for dropdown in self._dropdowns.values():
                    dropdown.set_model(Gtk.StringList.new([e.label for e in entries]))
            finally:
                self._updating = False
        self._apply_state(self._service.get_state())

    def _build_side(self, side: AnchorSide, title: str, zone: str) -> Gtk.Box:
        panel = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        panel.add_css_class("panel-card")

        card = ClockCard(f"{title}: {catalog.label_for(zone, tuple(self._entries_list))}")
        self._cards[side] = card
        panel.append(card)

        dropdown = zone_dropdown(self._entries_list, zone)
        dropdown.connect("notify::selected", self._on_zone_selected, side)
        self._dropdowns[side] = dropdown
        panel.append(dropdown)

        entry = Gtk.Entry.new()
        entry.set_placeholder_text(ENTRY_PLACEHOLDER)
        entry.set_width_chars(18)
        entry.connect("changed", self._on_entry_changed, side)
        self._entries[side] = entry
        panel.append(entry)

        anchor_label = Gtk.Label(label="")
        anchor_label.add_css_class("panel-muted")
        anchor_label.set_halign(Gtk.Align.START)
        self._anchor_labels[side] = anchor_label
        panel.append(anchor_label)
        return panel

    def get_default_focus(self) -> Gtk.Widget | None:
        return self._entries.get(self._service.anchor())

    def _on_entry_changed(self, entry: Gtk.Entry, side: AnchorSide) -> None:
        if self._updating:
            return
        text = entry.get_text()
        logger.debug("UI: planner entry %s changed to %r", side.value, text)
        if side is AnchorSide.A:
            state = self._service.edit_a(text)
        else:
            state = self._service.edit_b(text)
        self._apply_state(state, editing=side)

    def _on_zone_selected(self, dropdown: Gtk.DropDown, _pspec: object, side: AnchorSide) -> None:
        if self._updating:
            return
        zone = selected_zone(dropdown, self._entries_list)
        if zone is None:
            return
        logger.debug("UI: planner zone %s -> %s", side.value, zone)
        if side is AnchorSide.A:
            state = self._service.set_zone_a(zone)
        else:
            state = self._service.set_zone_b(zone)
        self._apply_state(state)

    def _apply_state(self, state: PlannerState, *, editing: AnchorSide | None = None) -> None:
        texts = {AnchorSide.A: state.text_a, AnchorSide.B: state.text_b}
        zones = {AnchorSide.A: state.zone_a, AnchorSide.B: state.zone_b}
        titles = {AnchorSide.A: "You", AnchorSide.B: "Client"}
        self._updating = True
        try:
            for side, entry in self._entries.items():
                if side is not editing and entry.get_text() != texts[side]:
                    entry.set_text(texts[side])
                dropdown = self._dropdowns[side]
                index = selected_index(self._entries_list, zones[side])
                if dropdown.get_selected() != index:
                    dropdown.set_selected(index)
                label = catalog.label_for(zones[side], tuple(self._entries_list))
                self._cards[side].set_title(f"{titles[side]}: {label}")
                self._anchor_labels[side].set_text("Fixed" if side is state.anchor else "")
        finally:
            self._updating = False
        self._refresh_reference()

    def _refresh_reference(self) -> None:
        try:
            region = ReferenceRegion(self._service.get_settings().reference_region)
        except ValueError:
            region = ReferenceRegion.IST
        meeting = self._service.reference_meeting(region)
        if meeting is None:
            self._reference_label.set_text("")
            return
        self._reference_label.set_text(
            f"{meeting.region_label}: {meeting.converted_time} {meeting.converted_date} "
            f"{meeting.abbreviation}"
        )

    def tick(self, readings: list[ClockReading]) -> None:
        state = self._service.get_state()
        by_zone = {reading.zone_id: reading for reading in readings}
        for side, zone in ((AnchorSide.A, state.zone_a), (AnchorSide.B, state.zone_b)):
            reading = by_zone.get(zone)
            if reading is not None:
                self._cards[side].update(reading)
