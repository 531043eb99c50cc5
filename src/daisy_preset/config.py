"""
Preset options.

Options are a frozen pydantic model. Keys are accepted in either their
Python spelling (``dark_theme``) or the camelCase spelling used in
engine configs (``darkTheme``), from code or from a YAML/TOML file.
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import PresetConfigError

logger = logging.getLogger(__name__)

# Table read from pyproject-style TOML files
TOML_TABLE = "daisy-preset"


class PresetOptions(BaseModel):
    """
    Options controlling what a preset build includes.

    Immutable after creation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    styled: bool = Field(default=True, description="Include component rules and keyframes")
    themes: bool | list[str | dict[str, dict[str, Any]]] = Field(
        default=False,
        description=(
            "True for every built-in theme, or a list of theme names and "
            "{name: palette} custom themes; anything else means light and dark"
        ),
    )
    base: bool = Field(default=True, description="Include base (reset) styles")
    rtl: bool = Field(default=False, description="Accepted for compatibility; has no effect")
    dark_theme: str | Literal[False] | None = Field(
        default=None,
        alias="darkTheme",
        description="Theme bound to prefers-color-scheme: dark, or false to disable",
    )
    utils: bool = Field(default=True, description="Include utility styles")
    variable_prefix: str = Field(
        default="--un-",
        alias="variablePrefix",
        description="Replaces the --tw- prefix in every emitted custom property",
    )
    theme_root: str = Field(
        default=":root", alias="themeRoot", description="Selector of the root theme block"
    )


def options_from_dict(data: Any, source: Path | str | None = None) -> PresetOptions:
    """
    Validate raw option data.

    Raises:
        PresetConfigError: If the data is not a mapping or fails validation.
    """
    where = f" in {source}" if source else ""
    if not isinstance(data, dict):
        raise PresetConfigError(f"Preset options{where} must be a mapping")
    try:
        return PresetOptions.model_validate(data)
    except ValidationError as e:
        raise PresetConfigError(f"Invalid preset options{where}: {e}") from e


def load_options(path: Path) -> PresetOptions:
    """
    Load preset options from a YAML or TOML file.

    TOML files may hold the options at top level or in a
    ``[tool.daisy-preset]`` table (so ``pyproject.toml`` works).

    Raises:
        PresetConfigError: If the file is missing, unreadable or invalid.
    """
    if not path.is_file():
        raise PresetConfigError(f"Config file not found: {path}")

    text = path.read_text(encoding="utf-8")
    suffix = path.suffix.lower()
    try:
        if suffix in (".yaml", ".yml"):
            data = yaml.safe_load(text) or {}
        elif suffix == ".toml":
            data = tomllib.loads(text)
            if "tool" in data:
                data = data["tool"].get(TOML_TABLE, {})
        else:
            raise PresetConfigError(f"Unsupported config format {suffix or '(none)'}: {path}")
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise PresetConfigError(f"Cannot parse config file {path}: {e}") from e

    logger.debug("Loaded preset options from %s", path)
    return options_from_dict(data, source=path)
