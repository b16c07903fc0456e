"""GTK widget utility functions."""

from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk

from meeting_planner.core.models import ZoneEntry
from meeting_planner.core.types import ZoneId
from meeting_planner.planner import catalog


def zone_dropdown(entries: list[ZoneEntry], selected: ZoneId) -> Gtk.DropDown:
    """A DropDown listing *entries* by label with *selected* preselected."""
    dropdown = Gtk.DropDown.new_from_strings([entry.label for entry in entries])
    dropdown.set_selected(selected_index(entries, selected))
    return dropdown


def selected_index(entries: list[ZoneEntry], zone: ZoneId) -> int:
    index = catalog.index_of(zone, tuple(entries))
    return Gtk.INVALID_LIST_POSITION if index is None else index


def selected_zone(dropdown: Gtk.DropDown, entries: list[ZoneEntry]) -> ZoneId | None:
    index = dropdown.get_selected()
    if index == Gtk.INVALID_LIST_POSITION or index >= len(entries):
        return None
    return entries[index].zone_id
