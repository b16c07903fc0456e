from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gtk


class SectionHeader(Gtk.Box):
    def __init__(self, title: str, subtitle: str | None = None) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=4)

        title_label = Gtk.Label.new(title)
        title_label.add_css_class("section-title")
        title_label.add_css_class("title-2")
        title_label.set_halign(Gtk.Align.START)
        self.append(title_label)

        self._subtitle_label = Gtk.Label.new(subtitle or "")
        self._subtitle_label.add_css_class("section-subtitle")
        self._subtitle_label.set_halign(Gtk.Align.START)
        self._subtitle_label.set_wrap(True)
        self._subtitle_label.set_visible(bool(subtitle))
        self.append(self._subtitle_label)

    def set_subtitle(self, subtitle: str) -> None:
        self._subtitle_label.set_text(subtitle)
        self._subtitle_label.set_visible(bool(subtitle))
