"""Placeholder grammar and text helpers."""
from __future__ import annotations

import re

# ---------------------------------------------------------------------------
# Compiled regex patterns
# ---------------------------------------------------------------------------

# One alternative per placeholder shape. ``else``/``endif``/``endfor`` arrive
# through ``name``; the lexer maps them to keyword tokens.
TAG_RE: re.Pattern[str] = re.compile(
    r"\{\{ (?:"
    r"for (?P<for_var>\w+) in (?P<for_iter>\w+)"
    r"|if (?P<if_cond>\w+)"
    r"|(?P<index_name>\w+)\[(?P<index>\d+)\]"
    r"|(?P<name>\w+)"
    r") \}\}"
)

# Anything that looks like a placeholder; used to flag text the grammar ignores.
LOOSE_TAG_RE: re.Pattern[str] = re.compile(r"\{\{[^\n]*?\}\}")

# ---------------------------------------------------------------------------
# Functions
# ---------------------------------------------------------------------------


def strip_leading_newlines(text: str) -> str:
    """Drop every contiguous ``\\n`` at the start of *text* (``\\r`` is kept)."""
    return text.lstrip("\n")


def offset_to_line_col(source: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based ``(line, column)`` pair.

    Examples:
        >>> offset_to_line_col("ab\\ncd", 3)
        (2, 1)
    """
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    last_nl = source.rfind("\n", 0, offset)
    return line, offset - last_nl
