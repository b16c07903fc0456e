from __future__ import annotations

import argparse
import json

import pytest

import meeting_planner.planner.logging_setup as log_mod
from meeting_planner import main as main_mod
from meeting_planner.planner import catalog
from meeting_planner.planner_cli import register_subcommands, run_command


def _run(argv: list[str]) -> int:
    parser = argparse.ArgumentParser()
    sub = parser.add_subparsers(dest="command", required=True)
    register_subcommands(sub)
    return run_command(parser.parse_args(argv))


def _lines(capsys) -> list[dict]:
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("MEETING_PLANNER_USER_TZ", "MEETING_PLANNER_CLIENT_TZ", "MEETING_PLANNER_MOCK"):
        monkeypatch.delenv(name, raising=False)


def test_convert_with_host_database(capsys) -> None:
    code = _run(["convert", "2024-01-15T14:00", "--from", "America/New_York", "--to", "UTC"])
    assert code == 0
    [payload] = _lines(capsys)
    assert payload == {
        "from_zone": "America/New_York",
        "to_zone": "UTC",
        "input": "2024-01-15T14:00",
        "output": "2024-01-15T19:00",
        "instant": "2024-01-15T19:00:00Z",
        "from_label": "EST (GMT-5)",
        "to_label": "UTC (GMT)",
    }


def test_convert_with_mock_tables(capsys) -> None:
    argv = ["convert", "--mock", "2024-01-15T09:30", "--from", "Asia/Kolkata", "--to", "UTC"]
    assert _run(argv) == 0
    [payload] = _lines(capsys)
    assert payload["output"] == "2024-01-15T04:00"
    assert payload["from_label"] == "IST (GMT+5:30)"


def test_plan_edit_a_with_reference(capsys) -> None:
    argv = [
        "plan",
        "--mock",
        "--zone-a",
        "America/New_York",
        "--zone-b",
        "Europe/London",
        "--a",
        "2024-03-01T10:00",
        "--ref",
        "IST",
    ]
    assert _run(argv) == 0
    [payload] = _lines(capsys)
    assert payload["anchor"] == "A"
    assert payload["a"] == "2024-03-01T10:00"
    assert payload["b"] == "2024-03-01T15:00"
    assert payload["reference"]["time"] == "8:30:00 PM"
    assert payload["reference"]["date"] == "Fri, Mar 1"
    assert payload["reference"]["label"] == "IST (GMT+5:30)"


def test_plan_edit_b(capsys) -> None:
    argv = ["plan", "--mock", "--zone-a", "America/New_York", "--zone-b", "Europe/London"]
    assert _run([*argv, "--b", "2024-03-01T16:00"]) == 0
    [payload] = _lines(capsys)
    assert payload["anchor"] == "B"
    assert payload["a"] == "2024-03-01T11:00"


def test_label(capsys) -> None:
    assert _run(["label", "--mock", "Asia/Kolkata"]) == 0
    assert _run(["label", "--mock", "America/New_York", "--at", "2024-07-15T12:00"]) == 0
    first, second = _lines(capsys)
    assert first == {"zone": "Asia/Kolkata", "label": "IST (GMT+5:30)"}
    assert second["label"] == "EDT (GMT-4)"


def test_now_reports_unknown_zones(capsys) -> None:
    assert _run(["now", "--mock", "UTC", "Mars/Olympus_Mons"]) == 1
    utc, unknown = _lines(capsys)
    assert utc["zone"] == "UTC"
    assert utc["label"] == "UTC (GMT)"
    assert unknown == {"zone": "Mars/Olympus_Mons", "error": "unknown zone"}


def test_zones_lists_catalog(capsys) -> None:
    assert _run(["zones"]) == 0
    assert len(_lines(capsys)) == len(catalog.DEFAULT_ZONES)


def test_zones_check(capsys) -> None:
    assert _run(["zones", "--check"]) == 0
    assert _lines(capsys) == []

    assert _run(["zones", "--check", "--mock"]) == 1
    missing = _lines(capsys)
    assert missing
    assert all(entry["resolvable"] is False for entry in missing)


def test_export_logs_to_file(tmp_path, monkeypatch, capsys) -> None:
    log_file = tmp_path / "app.log"
    log_file.write_text("hello\n")
    monkeypatch.setattr(log_mod, "LOG_FILE", log_file)

    dest = tmp_path / "out.txt"
    assert _run(["export-logs", "-o", str(dest)]) == 0
    assert dest.read_text() == "hello\n"
    assert f"Logs written to {dest}" in capsys.readouterr().out


@pytest.fixture()
def patched_version(monkeypatch) -> None:
    monkeypatch.setattr(main_mod.importlib.metadata, "version", lambda _name: "0.0.0")


def test_main_reports_bad_input(patched_version, capsys) -> None:
    code = main_mod.main(["convert", "10am", "--from", "UTC", "--to", "UTC"])
    assert code == 1
    assert capsys.readouterr().out.startswith("error: Expected YYYY-MM-DDTHH:MM")


def test_main_reports_unknown_zone(patched_version, capsys) -> None:
    code = main_mod.main(["convert", "2024-01-15T10:00", "--from", "Mars/Base", "--to", "UTC"])
    assert code == 1
    assert "Unknown time zone: 'Mars/Base'" in capsys.readouterr().out
