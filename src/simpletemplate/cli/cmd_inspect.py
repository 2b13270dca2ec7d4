"""simpletemplate inspect command — show tokens, tree and diagnostics."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from simpletemplate.engine.parser import dump_tree
from simpletemplate.engine.pipeline import Template
from simpletemplate.utils.text import offset_to_line_col


def cmd_inspect(args: argparse.Namespace) -> int:
    path = Path(args.template)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Error: cannot read template {path}: {exc}", file=sys.stderr)
        return 1

    template = Template(source)

    if args.tokens:
        for tok in template.tokens:
            line, col = offset_to_line_col(source, tok.position)
            print(f"{line:>4}:{col:<4} {tok.kind.value:<8} {tok.text!r}")
    elif template.nodes:
        print(dump_tree(template.nodes))
    else:
        print("(empty template)")

    if template.diagnostics:
        print()
        for d in template.diagnostics:
            line, col = offset_to_line_col(source, d.position)
            print(f"  [{d.level}] {path}:{line}:{col} {d.reason}")

    warnings = sum(1 for d in template.diagnostics if d.level == "warning")
    print(f"\nSummary: nodes={len(template.nodes)} warnings={warnings}")

    if args.strict and warnings > 0:
        return 1
    return 0
