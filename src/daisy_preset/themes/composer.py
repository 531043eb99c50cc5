"""
Theme composer.

Decides which theme becomes the document root theme, which one is bound
to ``prefers-color-scheme: dark``, and emits selector-scoped custom
property blocks for every theme in the configured order:

- index 0: ``:root`` (the theme root selector)
- index 1: ``[data-theme="name"]``, the theme-controller ``:has()``
  selector, and optionally the dark-mode media block
- index 2+: the ``[data-theme]`` and ``:has()`` pair
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal

from daisy_preset.errors import PresetConfigError
from daisy_preset.themes.synthesizer import ColorIssue, synthesize_report

logger = logging.getLogger(__name__)

DARK_MEDIA_QUERY = "@media (prefers-color-scheme: dark)"

# Order used when the themes option is neither a list nor True
DEFAULT_THEME_ORDER: tuple[str, ...] = ("light", "dark")

Palette = Mapping[str, Any]
ThemesOption = bool | Sequence[str | Mapping[str, Palette]]
DarkThemeOption = str | Literal[False] | None


def theme_selector(name: str) -> str:
    """Attribute selector that activates a named theme."""
    return f'[data-theme="{name}"]'


def controller_selector(theme_root: str, name: str) -> str:
    """Selector that activates a theme when a theme-controller input is checked."""
    return f'{theme_root}:has(input.theme-controller[value="{name}"]:checked)'


def collect_palettes(
    themes_option: ThemesOption, builtin: Mapping[str, Palette]
) -> dict[str, dict[str, Any]]:
    """
    Merge built-in palettes with inline custom palettes from the themes option.

    Custom palettes replace built-in palettes of the same name.
    """
    palettes = {name: dict(palette) for name, palette in builtin.items()}
    if isinstance(themes_option, (list, tuple)):
        for item in themes_option:
            if isinstance(item, Mapping):
                for name, palette in item.items():
                    palettes[name] = dict(palette)
    return palettes


def resolve_theme_order(
    themes_option: ThemesOption,
    available: Mapping[str, Palette],
    builtin_order: Sequence[str],
) -> list[str]:
    """
    Derive the ordered, de-duplicated theme names from the themes option.

    Args:
        themes_option: ``True`` for every built-in theme, a list of theme
            names and/or ``{name: palette}`` mappings, or anything else for
            the light/dark default.
        available: Every palette that can be referenced by name.
        builtin_order: Built-in theme names in their default order.

    Returns:
        Theme names; position 0 is the root theme.
    """
    if isinstance(themes_option, (list, tuple)):
        order: list[str] = []
        for item in themes_option:
            if isinstance(item, Mapping):
                names = list(item)
            elif item in available:
                names = [item]
            else:
                logger.warning("Ignoring unknown theme %r", item)
                continue
            for name in names:
                if name not in order:
                    order.append(name)
        return order

    if themes_option is True:
        return list(builtin_order)

    return list(DEFAULT_THEME_ORDER)


def auto_dark_theme(order: Sequence[str], dark_theme: DarkThemeOption) -> str | None:
    """
    Pick the theme bound to ``prefers-color-scheme: dark``, if any.

    An explicit theme name is used when it is in the order and is not the
    root theme. When unset, a theme literally named ``dark`` is used under
    the same conditions. ``False`` disables the binding.
    """
    if dark_theme is False or not order:
        return None
    candidate = dark_theme if dark_theme else "dark"
    if candidate != order[0] and candidate in order:
        return candidate
    return None


@dataclass
class ComposedThemes:
    """Selector-keyed theme blocks plus any color issues met while building them."""

    blocks: dict[str, Any]
    issues: list[ColorIssue] = field(default_factory=list)


def compose_report(
    themes: Mapping[str, Palette],
    order: Sequence[str],
    dark_theme: DarkThemeOption = None,
    theme_root: str = ":root",
) -> ComposedThemes:
    """
    Compose theme blocks and collect invalid-color diagnostics.

    Raises:
        PresetConfigError: If the order names a theme with no palette.
    """
    synthesized: dict[str, dict[str, str]] = {}
    issues: list[ColorIssue] = []

    def variables(name: str) -> dict[str, str]:
        if name not in synthesized:
            if name not in themes:
                raise PresetConfigError(f"Unknown theme {name!r}")
            result = synthesize_report(themes[name], name)
            synthesized[name] = result.variables
            issues.extend(result.issues)
        return dict(synthesized[name])

    blocks: dict[str, Any] = {}
    for index, name in enumerate(order):
        if index == 0:
            blocks[theme_root] = variables(name)
            continue

        if index == 1:
            dark = auto_dark_theme(order, dark_theme)
            if dark is not None:
                blocks[DARK_MEDIA_QUERY] = {theme_root: variables(dark)}
            # The root theme also gets a named selector once there is a choice
            root_name = order[0]
            blocks[theme_selector(root_name)] = variables(root_name)
            blocks[controller_selector(theme_root, root_name)] = variables(root_name)

        blocks[theme_selector(name)] = variables(name)
        blocks[controller_selector(theme_root, name)] = variables(name)

    logger.debug("Composed %d theme block(s) for %s", len(blocks), ", ".join(order))
    return ComposedThemes(blocks=blocks, issues=issues)


def compose(
    themes: Mapping[str, Palette],
    order: Sequence[str],
    dark_theme: DarkThemeOption = None,
    theme_root: str = ":root",
) -> dict[str, Any]:
    """
    Compose selector-keyed theme blocks for the given theme order.

    Args:
        themes: Theme name -> palette.
        order: Theme names; index 0 is the root theme.
        dark_theme: Theme name for ``prefers-color-scheme: dark``, ``False``
            to disable the binding, or ``None`` to use a theme named "dark".
        theme_root: Selector for the document-root theme.

    Returns:
        Ordered mapping of selector (or media query) to synthesized variables
        (or, for the media query, a nested ``{theme_root: variables}``).
    """
    return compose_report(themes, order, dark_theme, theme_root).blocks
