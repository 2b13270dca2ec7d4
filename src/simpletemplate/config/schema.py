"""Configuration schema dataclasses for simpletemplate."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class TemplateConfig:
    """Where the template to render is read from."""

    path: str = "templates/index.html"
    encoding: str = "utf-8"


@dataclass
class DataConfig:
    """Data tree source."""

    path: str | None = None
    format: str = "auto"  # "auto" | "json" | "yaml"


@dataclass
class OutputConfig:
    """Rendered output settings."""

    path: str | None = None
    trailing_newline: bool = True


@dataclass
class LoggingConfig:
    """Logging settings."""

    level: str = "WARNING"


@dataclass
class SimpleTemplateConfig:
    """Top-level configuration for the simpletemplate CLI."""

    template: TemplateConfig = field(default_factory=TemplateConfig)
    data: DataConfig = field(default_factory=DataConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def create_default(cls) -> SimpleTemplateConfig:
        """Create a configuration with all default values."""
        return cls(
            template=TemplateConfig(),
            data=DataConfig(),
            output=OutputConfig(),
            logging=LoggingConfig(),
        )
