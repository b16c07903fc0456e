from __future__ import annotations

import os
import signal
from pathlib import Path
from typing import Sequence

from meeting_planner.planner.logging_setup import configure_logging, set_stderr_level

import gi

configure_logging()

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gdk, GLib, Gio, Gtk

from meeting_planner.ui_gtk.windows.main_window import MainWindow

APP_ID = "com.meetingplanner.Planner"


def _load_css() -> None:
    resources = Path(__file__).parent / "ui_gtk" / "resources"
    display = Gdk.Display.get_default()
    if display is None:
        return

    css_path = resources / "app.css"
    if not css_path.exists():
        return
    provider = Gtk.CssProvider()
    provider.load_from_path(str(css_path))
    Gtk.StyleContext.add_provider_for_display(
        display,
        provider,
        Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
    )


class PlannerApplication(Adw.Application):
    def __init__(self) -> None:
        super().__init__(application_id=APP_ID, flags=Gio.ApplicationFlags.FLAGS_NONE)

        from meeting_planner.planner.service import PlannerClient
        from meeting_planner.platform.zoneinfo_formatter import create_formatter

        self.service = PlannerClient(create_formatter())

        # Apply persisted log level unless LOG_LEVEL env var is set
        if not os.environ.get("LOG_LEVEL"):
            set_stderr_level(self.service.get_settings().log_level)

    def do_shutdown(self) -> None:
        self.service.close()
        Adw.Application.do_shutdown(self)

    def do_activate(self) -> None:
        _load_css()
        window = self.props.active_window
        if window is None:
            window = MainWindow(application=self, service=self.service)
        window.present()


def run(argv: Sequence[str] | None = None) -> int:
    app = PlannerApplication()
    GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGINT, lambda: app.quit() or True)
    return app.run(argv)
