"""
Built-in theme palettes.

Palettes live in ``builtin.yaml`` next to this module; the file order is
the default theme order used when every built-in theme is enabled.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from daisy_preset.errors import PresetConfigError

logger = logging.getLogger(__name__)

BUILTIN_THEMES_FILE = Path(__file__).parent / "builtin.yaml"

Palette = dict[str, str]


def load_palettes(path: Path = BUILTIN_THEMES_FILE) -> dict[str, Palette]:
    """
    Load named palettes from a YAML file.

    Args:
        path: YAML file mapping theme names to palettes.

    Returns:
        Theme name -> palette, in file order.

    Raises:
        PresetConfigError: If the file is not a mapping of mappings.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise PresetConfigError(f"Invalid theme file {path}: {e}") from e

    if not isinstance(data, dict):
        raise PresetConfigError(f"Theme file {path} must map theme names to palettes")

    palettes: dict[str, Palette] = {}
    for name, palette in data.items():
        if not isinstance(palette, dict):
            raise PresetConfigError(f"Theme {name!r} in {path} is not a mapping")
        palettes[str(name)] = {str(key): str(value) for key, value in palette.items()}

    logger.debug("Loaded %d theme palettes from %s", len(palettes), path)
    return palettes


def builtin_palettes() -> dict[str, Palette]:
    """Return a fresh copy of the built-in palettes."""
    return load_palettes(BUILTIN_THEMES_FILE)


def builtin_theme_order() -> list[str]:
    """Return built-in theme names in their default order."""
    return list(builtin_palettes())
