"""simpletemplate render command — render a template file."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from simpletemplate.cli.main import configure_logging
from simpletemplate.config.loader import load_config
from simpletemplate.config.schema import SimpleTemplateConfig
from simpletemplate.data.loader import (
    DEMO_DATA,
    DataLoadError,
    load_data,
    merge_data,
    parse_assignment,
    parse_data_string,
)
from simpletemplate.engine.pipeline import compile_template

logger = logging.getLogger(__name__)


def _cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.template:
        overrides["template.path"] = args.template
    if args.data:
        overrides["data.path"] = args.data
    if args.output:
        overrides["output.path"] = args.output
    if args.no_newline:
        overrides["output.trailing_newline"] = False
    return overrides


def _build_data(args: argparse.Namespace, config: SimpleTemplateConfig) -> Any:
    if args.demo:
        data: Any = merge_data(DEMO_DATA, {})
    elif config.data.path:
        data = load_data(Path(config.data.path), config.data.format, config.template.encoding)
    else:
        data = {}

    if args.json_data:
        inline = parse_data_string(args.json_data, "json", source="--json")
        if not isinstance(inline, dict):
            raise DataLoadError("--json", f"expected a JSON object, got {type(inline).__name__}")
        data = merge_data(data, inline)

    for assignment in args.assignments or []:
        key, value = parse_assignment(assignment)
        data = merge_data(data, {key: value})

    return data


def cmd_render(args: argparse.Namespace) -> int:
    try:
        config = load_config(Path(args.config) if args.config else None, _cli_overrides(args))
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not args.verbose:
        configure_logging(config.logging.level)

    template_path = Path(config.template.path)
    try:
        source = template_path.read_text(encoding=config.template.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read template {template_path}: {exc}", file=sys.stderr)
        return 1

    try:
        data = _build_data(args, config)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    template = compile_template(source)
    for d in template.diagnostics:
        if d.level == "warning":
            logger.warning("%s: %s (offset %d)", template_path, d.reason, d.position)
    rendered = template.render(data)

    end = "\n" if config.output.trailing_newline else ""
    if config.output.path:
        output_path = Path(config.output.path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + end, encoding=config.template.encoding)
        logger.info("Rendered %s to %s", template_path, output_path)
        return 0

    sys.stdout.write(rendered + end)
    return 0
