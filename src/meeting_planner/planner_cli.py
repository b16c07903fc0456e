from __future__ import annotations

import argparse
import json
import logging
from typing import Any

from meeting_planner.core.enums import ReferenceRegion
from meeting_planner.core.models import WallClock
from meeting_planner.core.services import ZoneFormatter
from meeting_planner.core.time import instant_to_datetime, now_instant
from meeting_planner.core.types import ZoneId
from meeting_planner.planner import catalog
from meeting_planner.planner.config import load_runtime_config
from meeting_planner.planner.converter import render_wall_clock, resolve_instant, zone_abbreviation
from meeting_planner.planner.sync import EditA, EditB, PlannerState, initial_state, transition
from meeting_planner.planner.world_clock import read_clock, reference_meeting
from meeting_planner.platform.zoneinfo_formatter import create_formatter

logger = logging.getLogger(__name__)


def _add_global_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--debug",
        dest="debug",
        action="store_true",
        help="Enable verbose debug logs",
    )
    p.add_argument(
        "--mock",
        dest="mock",
        action="store_true",
        help="Use the built-in fixed offset tables instead of the host tz database",
    )


def register_subcommands(sub: argparse._SubParsersAction) -> None:
    convert = sub.add_parser("convert", help="Convert a wall-clock time between two zones")
    _add_global_args(convert)
    convert.add_argument("time", help="Wall-clock time, YYYY-MM-DDTHH:MM")
    convert.add_argument("--from", dest="from_zone", required=True, help="Source IANA zone")
    convert.add_argument("--to", dest="to_zone", required=True, help="Target IANA zone")

    plan = sub.add_parser("plan", help="Fill one planner field and print both")
    _add_global_args(plan)
    plan.add_argument("--zone-a", default=None, help="Your zone (default: configured)")
    plan.add_argument("--zone-b", default=None, help="Client zone (default: configured)")
    side = plan.add_mutually_exclusive_group()
    side.add_argument("--a", dest="text_a", default=None, help="Time in your zone")
    side.add_argument("--b", dest="text_b", default=None, help="Time in the client zone")
    plan.add_argument(
        "--ref",
        choices=[region.value for region in ReferenceRegion],
        default=None,
        help="Also show your time in a reference region",
    )

    now = sub.add_parser("now", help="Print the current time in one or more zones")
    _add_global_args(now)
    now.add_argument("zones", nargs="*", help="IANA zones (default: configured zones)")

    label = sub.add_parser("label", help="Print a zone's abbreviation label")
    _add_global_args(label)
    label.add_argument("zone", help="IANA zone")
    label.add_argument(
        "--at", default=None, help="Wall-clock time in the zone (default: now)"
    )

    zones = sub.add_parser("zones", help="List the zone catalog")
    _add_global_args(zones)
    zones.add_argument(
        "--check",
        action="store_true",
        help="Only list entries the tz database cannot resolve",
    )

    export = sub.add_parser("export-logs", help="Export application logs for bug reports")
    export.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write logs to file (default: stdout)",
    )


def _emit(payload: dict[str, Any]) -> None:
    print(json.dumps(payload))


def _iso(instant: int) -> str:
    return instant_to_datetime(instant).isoformat().replace("+00:00", "Z")


def _convert(formatter: ZoneFormatter, text: str, from_zone: ZoneId, to_zone: ZoneId) -> int:
    wall_clock = WallClock.parse(text)
    instant = resolve_instant(wall_clock, from_zone, formatter)
    result = render_wall_clock(instant, to_zone, formatter)
    _emit(
        {
            "from_zone": from_zone,
            "to_zone": to_zone,
            "input": str(wall_clock),
            "output": str(result),
            "instant": _iso(instant),
            "from_label": zone_abbreviation(instant, from_zone, formatter),
            "to_label": zone_abbreviation(instant, to_zone, formatter),
        }
    )
    return 0


def _plan(formatter: ZoneFormatter, args: argparse.Namespace) -> int:
    config = load_runtime_config()
    zone_a = args.zone_a or config.user_timezone
    zone_b = args.zone_b or config.client_timezone
    state: PlannerState = initial_state(zone_a, zone_b, now_instant(), formatter)
    if args.text_a is not None:
        WallClock.parse(args.text_a)
        state = transition(state, EditA(args.text_a), formatter)
    elif args.text_b is not None:
        WallClock.parse(args.text_b)
        state = transition(state, EditB(args.text_b), formatter)

    payload: dict[str, Any] = {
        "anchor": state.anchor.value,
        "zone_a": state.zone_a,
        "zone_b": state.zone_b,
        "a": state.text_a,
        "b": state.text_b,
    }
    if args.ref is not None:
        meeting = reference_meeting(state, ReferenceRegion(args.ref), formatter)
        if meeting is not None:
            payload["reference"] = {
                "region": meeting.region_label,
                "zone": meeting.zone_id,
                "selected_time": meeting.selected_time,
                "time": meeting.converted_time,
                "date": meeting.converted_date,
                "label": meeting.abbreviation,
            }
    _emit(payload)
    return 0


def _now(formatter: ZoneFormatter, zones: list[ZoneId]) -> int:
    if not zones:
        config = load_runtime_config()
        zones = [config.user_timezone, config.client_timezone]
    instant = now_instant()
    status = 0
    for zone in zones:
        reading = read_clock(instant, zone, formatter)
        if reading.wall_clock is None:
            _emit({"zone": zone, "error": "unknown zone"})
            status = 1
            continue
        _emit(
            {
                "zone": zone,
                "wall_clock": str(reading.wall_clock),
                "time": reading.time_label,
                "date": reading.date_label,
                "label": reading.abbreviation,
            }
        )
    return status


def _label(formatter: ZoneFormatter, zone: ZoneId, at: str | None) -> int:
    if at is None:
        instant = now_instant()
    else:
        instant = resolve_instant(WallClock.parse(at), zone, formatter)
    label = zone_abbreviation(instant, zone, formatter)
    if not label:
        raise ValueError(f"cannot label zone {zone!r}")
    _emit({"zone": zone, "label": label})
    return 0


def _zones(formatter: ZoneFormatter, check: bool) -> int:
    if check:
        missing = catalog.unresolvable(formatter, now_instant())
        for entry in missing:
            _emit({"zone": entry.zone_id, "label": entry.label, "resolvable": False})
        return 1 if missing else 0
    for entry in catalog.DEFAULT_ZONES:
        _emit({"zone": entry.zone_id, "label": entry.label})
    return 0


def _export_logs(output: str | None) -> int:
    from meeting_planner.planner.logging_setup import export_logs

    written = export_logs(output or None)
    if written is not None:
        print(f"Logs written to {written}")
    return 0


def run_command(args: argparse.Namespace) -> int:
    if args.command == "export-logs":
        return _export_logs(args.output)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="[debug] [%(name)s] %(message)s")
    logger.debug("command=%s mock=%s", args.command, args.mock)
    formatter = create_formatter(use_mock=True if args.mock else None)

    if args.command == "convert":
        return _convert(formatter, args.time, args.from_zone, args.to_zone)
    if args.command == "plan":
        return _plan(formatter, args)
    if args.command == "now":
        return _now(formatter, args.zones)
    if args.command == "label":
        return _label(formatter, args.zone, args.at)
    if args.command == "zones":
        return _zones(formatter, args.check)
    raise RuntimeError(f"Unsupported command: {args.command}")
