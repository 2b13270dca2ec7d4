"""Value formatting and truthiness for rendered data."""
from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


def is_array(value: Any) -> bool:
    """Check whether *value* is an array in the data tree."""
    return isinstance(value, (list, tuple))


def lookup(data: Any, key: str) -> Any:
    """Resolve a top-level *key*; anything missing resolves to ``None``."""
    if isinstance(data, Mapping):
        return data.get(key)
    return None


def is_falsy(value: Any) -> bool:
    """Conditional truthiness: only ``None``, ``False`` and ``"false"`` are falsy.

    ``0``, ``""`` and empty collections are truthy. The string ``"false"`` is
    honoured so string-typed flags work.
    """
    return value is None or value is False or (isinstance(value, str) and value == "false")


def format_value(value: Any) -> str:
    """Turn one resolved value into its display text.

    Strings render raw; everything else renders as compact JSON
    (``null``, ``true``, ``12``, ``1.5``, ``["a","b"]``) with object keys sorted.
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), sort_keys=True, default=str)
    except (TypeError, ValueError):
        return str(value)


def format_joined(value: Any) -> str:
    """Like :func:`format_value`, but arrays render as ``"a, b, c"``."""
    if is_array(value):
        return ", ".join(format_value(v) for v in value)
    return format_value(value)
