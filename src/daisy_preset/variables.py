"""
Theme variable tables.

Maps semantic color names (``primary``, ``base-100``) to the short custom
properties themes are emitted with (``--p``, ``--b1``), and holds the fixed
defaults the synthesizer falls back to.
"""

from __future__ import annotations

import re

# Semantic color name -> theme custom property
COLOR_VARIABLES: dict[str, str] = {
    "primary": "--p",
    "primary-content": "--pc",
    "secondary": "--s",
    "secondary-content": "--sc",
    "accent": "--a",
    "accent-content": "--ac",
    "neutral": "--n",
    "neutral-content": "--nc",
    "base-100": "--b1",
    "base-200": "--b2",
    "base-300": "--b3",
    "base-content": "--bc",
    "info": "--in",
    "info-content": "--inc",
    "success": "--su",
    "success-content": "--suc",
    "warning": "--wa",
    "warning-content": "--wac",
    "error": "--er",
    "error-content": "--erc",
}

# Base color used when a palette has no base-100
DEFAULT_BASE_100 = "100% 0 0"

# State colors used when a palette omits them
STATE_DEFAULTS: dict[str, str] = {
    "info": "72.06% 0.191 231.6",
    "success": "64.8% 0.150 160",
    "warning": "84.71% 0.199 83.87",
    "error": "71.76% 0.221 22.18",
}

# Layout and animation variables every theme carries
LAYOUT_DEFAULTS: dict[str, str] = {
    "--rounded-box": "1rem",
    "--rounded-btn": "0.5rem",
    "--rounded-badge": "1.9rem",
    "--animation-btn": "0.25s",
    "--animation-input": ".2s",
    "--btn-focus-scale": "0.95",
    "--border-btn": "1px",
    "--tab-border": "1px",
    "--tab-radius": "0.5rem",
}

# Colors whose -content variant is derived from the color itself
CONTENT_SOURCES: dict[str, str] = {
    "base-content": "base-100",
    "primary-content": "primary",
    "secondary-content": "secondary",
    "accent-content": "accent",
    "neutral-content": "neutral",
}

# State colors whose -content variant is derived only when the state was supplied
STATE_CONTENT_SOURCES: dict[str, str] = {
    "info-content": "info",
    "success-content": "success",
    "warning-content": "warning",
    "error-content": "error",
}


def camel_case(name: str) -> str:
    """Convert a dashed name to camelCase (``primary-content`` -> ``primaryContent``)."""
    head, *rest = re.split(r"[-_\s]+", name)
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def color_value(variable: str) -> str:
    """Engine color expression for a theme custom property."""
    return f"oklch(var({variable}) / <alpha-value>)"


def theme_colors() -> dict[str, object]:
    """
    Build the engine's ``theme.colors`` table.

    Non-base colors are keyed by their camelCase name; base colors live in
    a nested ``base`` mapping keyed by their suffix (``100``, ``content``).
    """
    colors: dict[str, object] = {}
    base: dict[str, str] = {}
    for name, variable in COLOR_VARIABLES.items():
        if name.startswith("base"):
            base[name.replace("base-", "", 1)] = color_value(variable)
        else:
            colors[camel_case(name)] = color_value(variable)
    colors["base"] = base
    return colors
