"""simpletemplate init command — generates config file and sample template."""
from __future__ import annotations

import argparse
from pathlib import Path

from simpletemplate.config.defaults import DEFAULT_CONFIG_PATH, DEFAULT_CONFIG_YAML, SAMPLE_TEMPLATE


def cmd_init(args: argparse.Namespace) -> int:
    config_path = Path(args.config or DEFAULT_CONFIG_PATH)

    if config_path.exists() and not args.force:
        print(f"Config already exists: {config_path}")
        print("Delete it first or pass --force to regenerate.")
        return 1

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    print(f"Created {config_path}")

    # Relative to the config so `render` works from the config's directory.
    template_path = config_path.parent / "templates" / "index.html"
    if not template_path.exists():
        template_path.parent.mkdir(parents=True, exist_ok=True)
        template_path.write_text(SAMPLE_TEMPLATE, encoding="utf-8")
        print(f"Created {template_path}")

    print("Try: simpletemplate render --demo")
    return 0
