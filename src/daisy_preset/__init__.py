"""
daisy-preset: component styles and themes as a utility-engine preset.

Turns component-library style objects into preflights and per-class
rules, and synthesizes complete color themes from partial palettes.
"""

import re
from importlib.metadata import version as _metadata_version
from pathlib import Path as _Path

from .config import PresetOptions, load_options
from .errors import (
    DaisyPresetError,
    InvalidColorError,
    MissingStyleModuleError,
    NoClassInSelectorError,
    PresetConfigError,
    StructuralError,
)
from .preset import DynamicRule, Preflight, Preset, build_preset
from .sources import DirectoryStyleSource, InMemoryStyleSource, StyleSource


def _get_version() -> str:
    """Get version from pyproject.toml (editable) or importlib.metadata (installed)."""
    pyproject = _Path(__file__).parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        content = pyproject.read_text()
        if match := re.search(r'^version\s*=\s*["\']([^"\']+)["\']', content, re.MULTILINE):
            return match.group(1)

    try:
        return _metadata_version("daisy-preset")
    except Exception:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "DaisyPresetError",
    "DirectoryStyleSource",
    "DynamicRule",
    "InMemoryStyleSource",
    "InvalidColorError",
    "MissingStyleModuleError",
    "NoClassInSelectorError",
    "Preflight",
    "Preset",
    "PresetConfigError",
    "PresetOptions",
    "StructuralError",
    "StyleSource",
    "build_preset",
    "load_options",
]
