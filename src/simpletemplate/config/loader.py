"""Configuration loader for simpletemplate."""
from __future__ import annotations

import dataclasses
import logging
import os
from pathlib import Path
from typing import Any, TypeVar

import yaml  # type: ignore[import-untyped]

from simpletemplate.config.defaults import DEFAULT_CONFIG_PATH
from simpletemplate.config.schema import (
    DataConfig,
    LoggingConfig,
    OutputConfig,
    SimpleTemplateConfig,
    TemplateConfig,
)


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    text = path.read_text(encoding="utf-8")
    data = yaml.safe_load(text)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a YAML mapping at top level in {path}, got {type(data).__name__}")
    return data


def _set_dotted(raw: dict[str, Any], key_path: list[str], value: Any) -> None:
    # Navigate to the correct nested dict, creating intermediates as needed.
    d = raw
    for part in key_path[:-1]:
        if part not in d or not isinstance(d[part], dict):
            d[part] = {}
        d = d[part]
    d[key_path[-1]] = value


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Overlay SIMPLETEMPLATE_* environment variables onto the raw config dict."""
    env_mappings: list[tuple[str, list[str], type]] = [
        ("SIMPLETEMPLATE_TEMPLATE_PATH", ["template", "path"], str),
        ("SIMPLETEMPLATE_TEMPLATE_ENCODING", ["template", "encoding"], str),
        ("SIMPLETEMPLATE_DATA_PATH", ["data", "path"], str),
        ("SIMPLETEMPLATE_DATA_FORMAT", ["data", "format"], str),
        ("SIMPLETEMPLATE_OUTPUT_PATH", ["output", "path"], str),
        ("SIMPLETEMPLATE_LOG_LEVEL", ["logging", "level"], str),
    ]

    for env_var, key_path, cast_type in env_mappings:
        value = os.environ.get(env_var)
        if value is None:
            continue
        _set_dotted(raw, key_path, cast_type(value))

    return raw


def _apply_cli_overrides(raw: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    """Apply CLI overrides using dot-notation keys (e.g., 'output.path')."""
    for dotted_key, value in overrides.items():
        _set_dotted(raw, dotted_key.split("."), value)
    return raw


def _coerce_field(value: Any, field_type_str: str) -> Any:
    """Best-effort coercion of a value to match a dataclass field type string."""
    if value is None:
        return value
    # Handle stringified type annotations (from __future__ import annotations)
    if "bool" in field_type_str and not isinstance(value, bool):
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value)
    if field_type_str.startswith("str") and not isinstance(value, str):
        return str(value)
    return value


_T = TypeVar("_T")


_log = logging.getLogger(__name__)


def _build_with_coercion(cls: type[_T], data: dict[str, Any]) -> _T:
    """Build a dataclass from a raw dict, coercing types and warning on unknowns."""
    if not isinstance(data, dict):
        _log.warning("Config section for %s must be a mapping, got %s; using defaults",
                     cls.__name__, type(data).__name__)
        data = {}
    known = {f.name: f for f in dataclasses.fields(cls)}  # type: ignore[arg-type]
    filtered: dict[str, Any] = {}
    for k, v in data.items():
        if k in known:
            ft = known[k].type
            type_str = ft if isinstance(ft, str) else getattr(ft, "__name__", str(ft))
            filtered[k] = _coerce_field(v, type_str)
        else:
            _log.warning(
                "Unknown config key '%s' in %s (known: %s), ignored",
                k, cls.__name__, ", ".join(sorted(known)),
            )
    return cls(**filtered)


def _build_config(raw: dict[str, Any]) -> SimpleTemplateConfig:
    """Build a SimpleTemplateConfig from a raw dict."""
    sections = {f.name for f in dataclasses.fields(SimpleTemplateConfig)}
    for key in raw:
        if key not in sections:
            _log.warning("Unknown config section '%s', ignored", key)
    return SimpleTemplateConfig(
        template=_build_with_coercion(TemplateConfig, raw.get("template") or {}),
        data=_build_with_coercion(DataConfig, raw.get("data") or {}),
        output=_build_with_coercion(OutputConfig, raw.get("output") or {}),
        logging=_build_with_coercion(LoggingConfig, raw.get("logging") or {}),
    )


def load_config(
    yaml_path: Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> SimpleTemplateConfig:
    """Load configuration from YAML, environment variables, and CLI overrides.

    Priority (highest to lowest):
        1. CLI overrides (dot-notation keys, e.g., ``output.path``)
        2. Environment variables (``SIMPLETEMPLATE_*``)
        3. YAML file values
        4. Dataclass defaults

    Args:
        yaml_path: Path to the YAML configuration file.  If ``None``, the
            loader attempts ``simpletemplate.yaml`` in the current directory;
            if that does not exist, pure defaults are used.
        cli_overrides: Optional dict of dot-notation key/value overrides from
            the command line.

    Returns:
        A fully-populated :class:`SimpleTemplateConfig` instance.

    Raises:
        FileNotFoundError: If *yaml_path* is given but does not exist.
        ValueError: If the YAML top level is not a mapping.
    """
    raw: dict[str, Any] = {}

    if yaml_path is not None:
        if yaml_path.exists():
            raw = _load_yaml_file(yaml_path)
        else:
            raise FileNotFoundError(f"Config file not found: {yaml_path}")
    else:
        default_path = Path(DEFAULT_CONFIG_PATH)
        if default_path.exists():
            raw = _load_yaml_file(default_path)

    raw = _apply_env_overrides(raw)

    if cli_overrides:
        raw = _apply_cli_overrides(raw, cli_overrides)

    return _build_config(raw)
