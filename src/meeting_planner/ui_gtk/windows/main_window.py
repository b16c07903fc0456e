from __future__ import annotations

import logging

import gi

logger = logging.getLogger(__name__)

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, GLib, Gtk

from meeting_planner.core.services import PlannerService
from meeting_planner.ui_gtk.views import PlannerView, QuickRefsView, SettingsView

TICK_SECONDS = 1


class MainWindow(Adw.ApplicationWindow):
    def __init__(self, application: Adw.Application, service: PlannerService) -> None:
        super().__init__(application=application)
        self._service = service
        self.set_title("Meeting Planner")
        self.set_default_size(960, 540)
        self.add_css_class("app-root")

        header_bar = Adw.HeaderBar.new()
        header_bar.add_css_class("app-header")

        # Navigation buttons on the left (set_active called after _stack is created)
        self._nav_buttons: dict[str, Gtk.ToggleButton] = {}
        for label, page_name in [
            ("Planner", "planner"),
            ("Quick Refs", "quick_refs"),
        ]:
            btn = Gtk.ToggleButton.new_with_label(label)
            btn.add_css_class("nav-button")
            btn.connect("toggled", self._on_nav_button_toggled, page_name)
            self._nav_buttons[page_name] = btn
            header_bar.pack_start(btn)

        title = Gtk.Label(label="Meeting Planner")
        title.add_css_class("app-title")
        header_bar.set_title_widget(title)

        settings_btn = Gtk.Button.new_from_icon_name("emblem-system-symbolic")
        settings_btn.set_tooltip_text("Settings")
        settings_btn.update_property([Gtk.AccessibleProperty.LABEL], ["Settings"])
        settings_btn.connect("clicked", self._on_settings_clicked)
        header_bar.pack_end(settings_btn)

        self._planner_view = PlannerView(service)
        self._quick_refs_view = QuickRefsView(service)

        self._stack = Gtk.Stack.new()
        self._stack.set_transition_type(Gtk.StackTransitionType.CROSSFADE)
        self._stack.set_hexpand(True)
        self._stack.set_vexpand(True)
        self._stack.add_named(self._planner_view, "planner")
        self._stack.add_named(self._quick_refs_view, "quick_refs")
        self._stack.add_named(SettingsView(service), "settings")
        self._stack.set_visible_child_name("planner")

        # Now safe to set nav button active (after _stack exists)
        self._nav_buttons["planner"].set_active(True)

        page = Adw.ToolbarView.new()
        page.add_top_bar(header_bar)
        page.set_content(self._stack)

        self._toast_overlay = Adw.ToastOverlay.new()
        self._toast_overlay.set_child(page)
        self.set_content(self._toast_overlay)

        self._tick()
        GLib.timeout_add_seconds(TICK_SECONDS, self._tick)

    def _tick(self) -> bool:
        readings = self._service.tick()
        self._planner_view.tick(readings)
        if self._stack.get_visible_child_name() == "quick_refs":
            self._quick_refs_view.tick(readings)
        for message in self._service.poll_warnings():
            logger.debug("UI: toast '%s'", message)
            self._toast_overlay.add_toast(Adw.Toast.new(message))
        return True  # GLib.SOURCE_CONTINUE

    def _switch_to_page(self, page_name: str) -> None:
        self._stack.set_visible_child_name(page_name)
        if page_name == "planner":
            self._planner_view.sync_from_service()
        elif page_name == "quick_refs":
            self._quick_refs_view.refresh()

    def _on_nav_button_toggled(self, button: Gtk.ToggleButton, page_name: str) -> None:
        logger.debug("UI: nav button toggled page=%s active=%s", page_name, button.get_active())
        if button.get_active():
            for name, btn in self._nav_buttons.items():
                if name != page_name:
                    btn.set_active(False)
            self._switch_to_page(page_name)
        elif all(not btn.get_active() for btn in self._nav_buttons.values()):
            # Don't allow all buttons to be deactivated
            if self._stack.get_visible_child_name() != "settings":
                button.set_active(True)

    def _on_settings_clicked(self, _button: Gtk.Button) -> None:
        logger.debug("UI: settings button clicked")
        self._stack.set_visible_child_name("settings")
        for btn in self._nav_buttons.values():
            btn.set_active(False)
