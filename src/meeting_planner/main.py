from __future__ import annotations

import argparse
import importlib.metadata
import traceback


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="meeting-planner",
        description="Meeting planner: GUI and headless CLI",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=importlib.metadata.version("meeting-planner"),
    )

    sub = parser.add_subparsers(dest="command")

    from meeting_planner.planner_cli import register_subcommands

    register_subcommands(sub)

    args = parser.parse_args(argv)

    if args.command is None:
        from meeting_planner.app import run

        return run()

    from meeting_planner.planner_cli import run_command

    try:
        return run_command(args)
    except Exception as exc:  # noqa: BLE001
        if getattr(args, "debug", False):
            print(f"[debug] error: {exc}")
            traceback.print_exc()
        else:
            print(f"error: {exc}")
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
