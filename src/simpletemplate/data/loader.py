"""Loading data trees from JSON/YAML files and command-line values."""
from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

# Data tree used by ``simpletemplate render --demo``.
DEMO_DATA: dict[str, Any] = {
    "name": ["Bob", "Belcher"],
    "number": 12345,
    "color": "light purple",
    "show_items": "true",
    "show_foo": "false",
}

_SUFFIX_FORMATS: dict[str, str] = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class DataLoadError(ValueError):
    """Raised when a data file or inline data value cannot be parsed."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = source


def detect_format(path: Path, fmt: str = "auto") -> str:
    """Resolve the data format for *path*; unknown suffixes default to JSON."""
    fmt = fmt.lower()
    if fmt in ("json", "yaml"):
        return fmt
    if fmt != "auto":
        raise ValueError(f"Unknown data format: {fmt!r}. Supported: auto, json, yaml")
    return _SUFFIX_FORMATS.get(path.suffix.lower(), "json")


def parse_data_string(text: str, fmt: str = "json", source: str = "<string>") -> Any:
    """Parse *text* as JSON or YAML into a data tree."""
    if fmt == "yaml":
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DataLoadError(source, f"invalid YAML ({exc})") from exc
        return data
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DataLoadError(source, f"invalid JSON ({exc})") from exc


def load_data(path: Path, fmt: str = "auto", encoding: str = "utf-8") -> Any:
    """Load a data tree from a JSON or YAML file.

    Raises:
        FileNotFoundError: If *path* does not exist.
        DataLoadError: If the file cannot be parsed.
    """
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")
    resolved = detect_format(path, fmt)
    data = parse_data_string(path.read_text(encoding=encoding), resolved, source=str(path))
    return {} if data is None else data


def parse_assignment(text: str) -> tuple[str, Any]:
    """Parse a ``key=value`` pair; the value is read as a YAML scalar.

    Examples:
        >>> parse_assignment("count=3")
        ('count', 3)
        >>> parse_assignment("name=Bob")
        ('name', 'Bob')
    """
    key, sep, raw = text.partition("=")
    key = key.strip()
    if not sep or not key:
        raise DataLoadError(text, "expected KEY=VALUE")
    return key, parse_data_string(raw, "yaml", source=text)


def merge_data(base: Any, overlay: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge *overlay* into *base*, returning a new dict.

    A non-mapping *base* is replaced. Neither argument is mutated.
    """
    result = copy.deepcopy(base) if isinstance(base, dict) else {}
    for key, value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_data(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result
