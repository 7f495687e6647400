"""Prompt configuration: templates and colors for each status segment."""

from __future__ import annotations

import logging
from pathlib import Path
from string import Formatter

import yaml
from pydantic import Field, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger(__name__)

# Arguments each template is formatted with by the formatter
TEMPLATE_FIELDS: dict[str, dict[str, object]] = {
    "name": {"value": "git", "symbol": "±"},
    "branch": {"value": "main"},
    "operation": {"value": "MERGING"},
    "behind": {"value": 0},
    "ahead": {"value": 0},
    "separator": {"value": ""},
    "staged": {"value": 0},
    "conflicts": {"value": 0},
    "changed": {"value": 0},
    "untracked": {"value": 0},
    "clean": {"value": ""},
}


class ConfigError(Exception):
    """The prompt configuration could not be loaded."""


class PromptConfig(BaseSettings):
    """Prompt configuration.

    Every field can be set through a ``VCP_`` environment variable, e.g.
    ``VCP_AHEAD="+{value}"`` or ``VCP_BRANCH_COLOR=cyan``. Templates use
    ``{value}`` for the segment value; the ``name`` template also accepts
    ``{symbol}``. Colors are rich color names, an empty string disables
    coloring for that segment.
    """

    model_config = SettingsConfigDict(env_prefix="VCP_", case_sensitive=False)

    color: bool = Field(default=True, description="Colorize the output")

    prefix: str = Field(default=" ", description="Text before the status")
    name: str = Field(default="{symbol}", description="VCS name or symbol")
    name_color: str = ""
    branch: str = "{value}"
    branch_color: str = "magenta"
    operation: str = Field(default="{value}", description="Ongoing operations, joined with '|'")
    operation_color: str = "red"
    behind: str = "↓{value}"
    behind_color: str = ""
    ahead: str = "↑{value}"
    ahead_color: str = ""
    separator: str = Field(default="|", description="Between branch and file counts")
    separator_color: str = ""
    staged: str = "●{value}"
    staged_color: str = "blue"
    conflicts: str = "✖{value}"
    conflicts_color: str = "red"
    changed: str = "✚{value}"
    changed_color: str = "yellow"
    untracked: str = "…{value}"
    untracked_color: str = ""
    clean: str = Field(default="✔", description="Shown when there are no file changes")
    clean_color: str = "green"
    suffix: str = Field(default="", description="Text after the status")

    @field_validator(
        "name_color",
        "branch_color",
        "operation_color",
        "behind_color",
        "ahead_color",
        "separator_color",
        "staged_color",
        "conflicts_color",
        "changed_color",
        "untracked_color",
        "clean_color",
    )
    @classmethod
    def _check_color(cls, value: str) -> str:
        value = value.strip()
        if value:
            try:
                Style.parse(value)
            except StyleSyntaxError as e:
                raise ValueError(f"invalid color {value!r}: {e}") from e
        return value

    @field_validator(*TEMPLATE_FIELDS)
    @classmethod
    def _check_template(cls, value: str, info: ValidationInfo) -> str:
        arguments = TEMPLATE_FIELDS[info.field_name]
        placeholders = " and ".join(f"{{{name}}}" for name in arguments)
        try:
            # Only bare placeholders, no attribute or index access
            for _, field_name, _, _ in Formatter().parse(value):
                if field_name is not None and field_name not in arguments:
                    raise ValueError(f"unsupported placeholder {{{field_name}}}")
            value.format(**arguments)
        except (AttributeError, IndexError, KeyError, ValueError) as e:
            raise ValueError(f"invalid template {value!r}, only {placeholders} supported: {e}") from e
        return value

    @classmethod
    def load(cls, config_path: Path | None = None) -> PromptConfig:
        """Load configuration from environment, overridden by an optional YAML file."""
        data: dict = {}
        if config_path is not None and config_path.exists():
            try:
                with config_path.open(encoding="utf-8") as f:
                    data = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                raise ConfigError(f"Cannot read {config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"{config_path} must contain a mapping")
            logger.debug(f"Loaded {len(data)} settings from {config_path}")

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
