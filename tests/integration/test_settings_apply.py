from pathlib import Path

from meeting_planner.core.time import naive_epoch_ms
from meeting_planner.mock import FakeZoneFormatter
from meeting_planner.planner.db import open_db
from meeting_planner.planner.service import PlannerClient
from meeting_planner.planner.settings import PlannerSettings
from meeting_planner.planner.settings_store import SettingsStore

NOW = naive_epoch_ms(2024, 1, 15, 14, 25)


def test_client_updates_and_persists_settings(tmp_path: Path, monkeypatch) -> None:
    for name in ("MEETING_PLANNER_USER_TZ", "MEETING_PLANNER_CLIENT_TZ"):
        monkeypatch.delenv(name, raising=False)
    conn = open_db(tmp_path / "planner.db")
    store = SettingsStore(conn)
    store.save(PlannerSettings(user_timezone="America/New_York"))
    client = PlannerClient(FakeZoneFormatter(), settings_store=store, clock=lambda: NOW)

    settings = client.get_settings()
    settings.client_timezone = "Asia/Tokyo"
    settings.reference_region = "NY"
    settings.log_level = "DEBUG"
    client.update_settings(settings)

    updated = client.get_settings()
    assert updated.client_timezone == "Asia/Tokyo"
    assert updated.reference_region == "NY"
    # The client zone change is applied to the running planner.
    state = client.get_state()
    assert state.zone_b == "Asia/Tokyo"
    assert state.text_a == "2024-01-15T10:00"
    assert state.text_b == "2024-01-16T00:00"
    client.close()

    reloaded = store.load()
    assert reloaded.client_timezone == "Asia/Tokyo"
    assert reloaded.log_level == "DEBUG"

    restarted = PlannerClient(FakeZoneFormatter(), settings_store=store, clock=lambda: NOW)
    assert restarted.get_state().zone_b == "Asia/Tokyo"
    restarted.close()
    conn.close()


def test_get_settings_returns_a_copy(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("MEETING_PLANNER_USER_TZ", "UTC")
    conn = open_db(tmp_path / "planner.db")
    client = PlannerClient(
        FakeZoneFormatter(), settings_store=SettingsStore(conn), clock=lambda: NOW
    )
    settings = client.get_settings()
    settings.client_timezone = "UTC"
    assert client.get_settings().client_timezone == "Asia/Kolkata"
    client.close()
    conn.close()
