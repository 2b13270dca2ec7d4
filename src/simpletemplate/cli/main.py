"""CLI entry point for simpletemplate."""
from __future__ import annotations

import argparse
import logging

from simpletemplate import __version__

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str | int) -> None:
    """Set the package log level, installing a stderr handler if none exists."""
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            logging.getLogger(__name__).warning("Unknown log level %r, using WARNING", level)
            resolved = logging.WARNING
        level = resolved
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger("simpletemplate").setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simpletemplate",
        description="Render {{ placeholder }} templates against JSON/YAML data",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", default=None, help="Config file path (default: simpletemplate.yaml if present)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", help="Available commands")

    # render
    ren_p = sub.add_parser("render", help="Render a template")
    ren_p.add_argument("template", nargs="?", default=None, help="Template file (default: template.path)")
    ren_p.add_argument("--data", help="JSON or YAML data file")
    ren_p.add_argument("--json", dest="json_data", help="Inline JSON object merged into the data")
    ren_p.add_argument("--set", dest="assignments", action="append", metavar="KEY=VALUE",
                       help="Set a top-level key (value parsed as YAML, repeatable)")
    ren_p.add_argument("--output", help="Write output to this file instead of stdout")
    ren_p.add_argument("--no-newline", action="store_true", help="Do not print a trailing newline")
    ren_p.add_argument("--demo", action="store_true", help="Render against the built-in demo data")

    # inspect
    ins_p = sub.add_parser("inspect", help="Show the parsed structure of a template")
    ins_p.add_argument("template", help="Template file")
    ins_p.add_argument("--tokens", action="store_true", help="Show the token stream instead of the tree")
    ins_p.add_argument("--strict", action="store_true", help="Exit 1 when warnings are found")

    # init
    init_p = sub.add_parser("init", help="Create simpletemplate.yaml and a sample template")
    init_p.add_argument("--force", action="store_true", help="Overwrite an existing config file")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "render":
        from simpletemplate.cli.cmd_render import cmd_render
        return cmd_render(args)

    if args.command == "inspect":
        from simpletemplate.cli.cmd_inspect import cmd_inspect
        return cmd_inspect(args)

    if args.command == "init":
        from simpletemplate.cli.cmd_init import cmd_init
        return cmd_init(args)

    parser.print_help()
    return 1
