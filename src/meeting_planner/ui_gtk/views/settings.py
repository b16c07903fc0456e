from __future__ import annotations

import gi

gi.require_version("Gtk", "4.0")

from gi.repository import Gio, Gtk

from meeting_planner.core.enums import ReferenceRegion
from meeting_planner.core.services import PlannerService
from meeting_planner.planner.logging_setup import (
    VALID_LEVELS,
    export_logs,
    set_stderr_level,
)
from meeting_planner.planner.settings import PlannerSettings
from meeting_planner.planner.world_clock import REFERENCE_REGIONS


class SettingsView(Gtk.Box):
    def __init__(self, service: PlannerService) -> None:
        super().__init__(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        self._service = service
        self._status_label = Gtk.Label(label="")
        self._status_label.add_css_class("panel-muted")
        self._status_label.set_halign(Gtk.Align.START)
        self._entries: dict[str, Gtk.Entry] = {}

        content = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=14)
        content.set_margin_start(8)
        content.set_margin_end(8)
        content.set_margin_top(8)
        self.append(content)

        columns = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=14)
        columns.set_homogeneous(True)
        columns.append(self._build_zones_panel())
        columns.append(self._build_logging_panel())
        content.append(columns)

        actions = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=10)
        actions.add_css_class("panel-card")
        save = Gtk.Button.new_with_label("Save Settings")
        save.connect("clicked", self._on_save)
        actions.append(save)

        reload_btn = Gtk.Button.new_with_label("Reload")
        reload_btn.connect("clicked", self._on_reload)
        actions.append(reload_btn)
        actions.append(self._status_label)
        content.append(actions)

        self._load_from_service()

    def _build_zones_panel(self) -> Gtk.Box:
        panel = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        panel.add_css_class("panel-card")

        title = Gtk.Label(label="Zones")
        title.add_css_class("panel-title")
        title.set_halign(Gtk.Align.START)
        panel.append(title)

        grid = Gtk.Grid()
        grid.set_row_spacing(8)
        grid.set_column_spacing(8)

        grid.attach(self._grid_label("Your zone"), 0, 0, 1, 1)
        user_entry = self._grid_entry("user_timezone", 22)
        user_entry.set_placeholder_text("Host zone")
        grid.attach(user_entry, 1, 0, 1, 1)

        grid.attach(self._grid_label("Client zone"), 0, 1, 1, 1)
        grid.attach(self._grid_entry("client_timezone", 22), 1, 1, 1, 1)

        grid.attach(self._grid_label("Quick reference"), 0, 2, 1, 1)
        self._region_combo = Gtk.ComboBoxText.new()
        for region, info in REFERENCE_REGIONS.items():
            self._region_combo.append(region.value, info.title)
        grid.attach(self._region_combo, 1, 2, 1, 1)

        panel.append(grid)
        return panel

    def _build_logging_panel(self) -> Gtk.Box:
        panel = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=8)
        panel.add_css_class("panel-card")
        panel.set_valign(Gtk.Align.START)

        title = Gtk.Label(label="Logging")
        title.add_css_class("panel-title")
        title.set_halign(Gtk.Align.START)
        panel.append(title)

        grid = Gtk.Grid()
        grid.set_row_spacing(8)
        grid.set_column_spacing(8)

        grid.attach(self._grid_label("Log Level"), 0, 0, 1, 1)
        self._log_level_combo = Gtk.ComboBoxText.new()
        for level in VALID_LEVELS:
            self._log_level_combo.append(level, level)
        self._log_level_combo.connect("changed", self._on_log_level_changed)
        grid.attach(self._log_level_combo, 1, 0, 1, 1)

        export_btn = Gtk.Button.new_with_label("Export Logs")
        export_btn.connect("clicked", self._on_export_logs)
        grid.attach(export_btn, 1, 1, 1, 1)

        panel.append(grid)
        return panel

    def _on_log_level_changed(self, combo: Gtk.ComboBoxText) -> None:
        level = combo.get_active_id()
        if level:
            set_stderr_level(level)

    def _on_export_logs(self, _button: Gtk.Button) -> None:
        from datetime import UTC, datetime

        ts = datetime.now(tz=UTC).strftime("%Y%m%d-%H%M%S")
        dialog = Gtk.FileDialog()
        dialog.set_title("Export Logs")
        dialog.set_initial_name(f"meeting-planner-logs-{ts}.txt")
        txt_filter = Gtk.FileFilter()
        txt_filter.set_name("Text files")
        txt_filter.add_pattern("*.txt")
        filters = Gio.ListStore.new(Gtk.FileFilter)
        filters.append(txt_filter)
        dialog.set_filters(filters)

        window = self.get_root()
        parent = window if isinstance(window, Gtk.Window) else None
        dialog.save(parent, None, self._on_export_save_done)

    def _on_export_save_done(self, dialog: Gtk.FileDialog, result: Gio.AsyncResult) -> None:
        try:
            gfile = dialog.save_finish(result)
        except Exception:  # noqa: BLE001
            return  # user cancelled
        dest = gfile.get_path()
        if not dest:
            return
        try:
            export_logs(dest)
            self._status_label.set_text(f"Logs exported to {dest}")
        except OSError as exc:
            self._status_label.set_text(f"Export failed: {exc}")

    def _grid_label(self, text: str) -> Gtk.Label:
        label = Gtk.Label(label=text)
        label.add_css_class("panel-muted")
        label.set_halign(Gtk.Align.END)
        label.set_valign(Gtk.Align.CENTER)
        return label

    def _grid_entry(self, key: str, width_chars: int) -> Gtk.Entry:
        entry = Gtk.Entry.new()
        entry.set_width_chars(width_chars)
        entry.set_halign(Gtk.Align.START)
        self._entries[key] = entry
        return entry

    def _on_reload(self, _button: Gtk.Button) -> None:
        self._load_from_service()
        self._status_label.set_text("Reloaded from persisted settings.")

    def _on_save(self, _button: Gtk.Button) -> None:
        self._service.update_settings(self._collect_settings())
        self._status_label.set_text("Settings saved.")

    def _load_from_service(self) -> None:
        settings = self._service.get_settings()
        self._entries["user_timezone"].set_text(settings.user_timezone)
        self._entries["client_timezone"].set_text(settings.client_timezone)
        self._region_combo.set_active_id(settings.reference_region)
        self._log_level_combo.set_active_id(settings.log_level)

    def _collect_settings(self) -> PlannerSettings:
        current = self._service.get_settings()
        out = current.clone()
        out.user_timezone = self._entries["user_timezone"].get_text().strip()
        out.client_timezone = (
            self._entries["client_timezone"].get_text().strip() or current.client_timezone
        )
        out.reference_region = self._region_combo.get_active_id() or ReferenceRegion.IST.value
        out.log_level = self._log_level_combo.get_active_id() or "INFO"
        return out
