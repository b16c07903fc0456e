from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk

from meeting_planner.core.models import ClockReading
from meeting_planner.planner.display import TIME_PLACEHOLDER


class ClockCard(Gtk.Box):
    """Live clock for one zone: title, time, date and abbreviation label."""

    def __init__(self, title: str, *, min_width: int = 220) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        self.add_css_class("clock-card")
        self.set_margin_top(6)
        self.set_margin_bottom(6)
        self.set_margin_start(6)
        self.set_margin_end(6)
        self.set_size_request(min_width, -1)

        self._title_label = Gtk.Label.new(title)
        self._title_label.add_css_class("clock-title")
        self._title_label.set_halign(Gtk.Align.START)
        self.append(self._title_label)

        self._time_label = Gtk.Label.new(TIME_PLACEHOLDER)
        self._time_label.add_css_class("clock-time")
        self._time_label.set_halign(Gtk.Align.START)
        self.append(self._time_label)

        self._date_label = Gtk.Label.new("")
        self._date_label.add_css_class("clock-date")
        self._date_label.set_halign(Gtk.Align.START)
        self.append(self._date_label)

        self._abbr_label = Gtk.Label.new("")
        self._abbr_label.add_css_class("clock-abbr")
        self._abbr_label.set_halign(Gtk.Align.START)
        self.append(self._abbr_label)

    def set_title(self, title: str) -> None:
        self._title_label.set_text(title)

    def update(self, reading: ClockReading) -> None:
        self._time_label.set_text(reading.time_label)
        self._date_label.set_text(reading.date_label)
        self._abbr_label.set_text(reading.abbreviation)
