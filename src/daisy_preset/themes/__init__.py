"""
Theme synthesis and composition.

Public API:
- synthesize / synthesize_report: fill a partial palette into a full theme
- compose / compose_report: emit selector-scoped theme blocks in order
- builtin_palettes / builtin_theme_order: the bundled palette set
"""

from .builtin import builtin_palettes, builtin_theme_order, load_palettes
from .composer import (
    DARK_MEDIA_QUERY,
    ComposedThemes,
    auto_dark_theme,
    collect_palettes,
    compose,
    compose_report,
    controller_selector,
    resolve_theme_order,
    theme_selector,
)
from .synthesizer import ColorIssue, SynthesisResult, synthesize, synthesize_report

__all__ = [
    "DARK_MEDIA_QUERY",
    "ColorIssue",
    "ComposedThemes",
    "SynthesisResult",
    "auto_dark_theme",
    "builtin_palettes",
    "builtin_theme_order",
    "collect_palettes",
    "compose",
    "compose_report",
    "controller_selector",
    "load_palettes",
    "resolve_theme_order",
    "synthesize",
    "synthesize_report",
    "theme_selector",
]
