"""Render ``{{ placeholder }}`` templates against JSON-shaped data."""
from __future__ import annotations

from simpletemplate.engine import Template, compile_template, format_value, is_falsy, render

__version__ = "0.1.0"

__all__ = ["render", "Template", "compile_template", "format_value", "is_falsy", "__version__"]
