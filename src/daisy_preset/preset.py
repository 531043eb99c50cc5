"""
Preset builder.

Assembles everything a utility engine needs from a style source:

- preflights: base styles, keyframes, theme blocks and utility styles,
  each a deferred CSS producer tagged with a layer
- rules: one exact-match rule per component class
- theme: the engine color table pointing at the theme custom properties

Every emitted piece of CSS has the ``--tw-`` custom property prefix
swapped for the configured variable prefix.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .config import PresetOptions
from .css.processor import CssProcessor, StyleProcessor
from .css.style_object import StyleObject
from .rules import (
    COMPONENTS_LAYER,
    COMPONENTS_POST_LAYER,
    UtilityRuleTable,
    collect_component_rules,
    layer_for,
)
from .sources import StyleSource
from .themes.builtin import builtin_palettes
from .themes.composer import Palette, collect_palettes, compose_report, resolve_theme_order
from .themes.synthesizer import ColorIssue
from .variables import theme_colors

logger = logging.getLogger(__name__)

PRESET_NAME = "daisy-preset"

BASE_LAYER = "daisy-base"
THEMES_LAYER = "daisy-themes"
UTILITIES_LAYER = "daisy-utilities"

# Order layers are rendered in by Preset.render
LAYER_ORDER: tuple[str, ...] = (
    BASE_LAYER,
    COMPONENTS_LAYER,
    COMPONENTS_POST_LAYER,
    THEMES_LAYER,
    UTILITIES_LAYER,
)

SOURCE_VARIABLE_PREFIX = "--tw-"


@dataclass(frozen=True)
class Preflight:
    """CSS emitted unconditionally, produced on demand."""

    get_css: Callable[[], str]
    layer: str


@dataclass(frozen=True)
class DynamicRule:
    """CSS emitted when markup uses a class matching ``pattern``."""

    name: str
    pattern: re.Pattern[str]
    get_css: Callable[[], str]
    meta: dict[str, str] = field(default_factory=dict)

    @property
    def layer(self) -> str:
        return self.meta.get("layer", COMPONENTS_LAYER)

    def matches(self, class_name: str) -> bool:
        return self.pattern.match(class_name) is not None


@dataclass
class Preset:
    """A built preset, ready to hand to a utility engine."""

    name: str = PRESET_NAME
    preflights: list[Preflight] = field(default_factory=list)
    theme: dict[str, Any] = field(default_factory=lambda: {"colors": theme_colors()})
    rules: list[DynamicRule] = field(default_factory=list)
    issues: list[ColorIssue] = field(default_factory=list)

    def rule_for(self, class_name: str) -> DynamicRule | None:
        for rule in self.rules:
            if rule.matches(class_name):
                return rule
        return None

    def render(self, classes: Iterable[str] | None = None) -> str:
        """
        Render the preset to a stylesheet.

        Preflights are always included. Rules are included for every class
        in *classes*, or all of them when *classes* is None. Output is
        grouped by layer in LAYER_ORDER.
        """
        if classes is None:
            rules = list(self.rules)
        else:
            wanted = list(classes)
            rules = [rule for rule in self.rules if any(rule.matches(name) for name in wanted)]

        chunks: list[str] = []
        for layer in LAYER_ORDER:
            chunks.extend(p.get_css() for p in self.preflights if p.layer == layer)
            chunks.extend(rule.get_css() for rule in rules if rule.layer == layer)
        return "\n".join(chunk.rstrip("\n") for chunk in chunks if chunk.strip()) + "\n"


def replace_prefix(css: str, prefix: str) -> str:
    """Swap the source custom property prefix for *prefix*."""
    return css.replace(SOURCE_VARIABLE_PREFIX, prefix)


def _deferred(
    processor: CssProcessor, style: StyleObject, prefix: str
) -> Callable[[], str]:
    def get_css() -> str:
        return replace_prefix(processor.process(style).css, prefix)

    return get_css


def _fixed(css: str, prefix: str) -> Callable[[], str]:
    def get_css() -> str:
        return replace_prefix(css, prefix)

    return get_css


def _joined(
    processor: CssProcessor, styles: list[StyleObject], prefix: str
) -> Callable[[], str]:
    def get_css() -> str:
        return replace_prefix(
            "\n".join(processor.process(style).css for style in styles), prefix
        )

    return get_css


async def build_preset(
    source: StyleSource,
    options: PresetOptions | None = None,
    *,
    processor: CssProcessor | None = None,
    palettes: Mapping[str, Palette] | None = None,
) -> Preset:
    """
    Build a preset from a style source.

    Component styles are processed and classified up front so structural
    problems surface here; base, theme and utility CSS is produced when a
    preflight's ``get_css`` is called.

    Args:
        source: Resolves the base, components and utilities categories.
        options: Preset options (defaults apply when omitted).
        processor: CSS processor (plain parse and serialize when omitted).
        palettes: Named palettes to use instead of the built-in set.

    Raises:
        MissingStyleModuleError: If a needed style category is missing.
        StructuralError: If a component rule nests rules or has no class.
        PresetConfigError: If the theme order names an unknown theme.
    """
    options = options or PresetOptions()
    processor = processor or StyleProcessor()
    prefix = options.variable_prefix

    preset = Preset()
    table = UtilityRuleTable()

    if options.rtl:
        logger.debug("rtl option is set; it has no effect on generated CSS")

    if options.base:
        base = await source.load("base")
        preset.preflights.append(
            Preflight(_joined(processor, list(base.values()), prefix), BASE_LAYER)
        )

    if options.styled:
        components = await source.load("components")
        roots = [processor.process(style).root for style in components.values()]
        collected = collect_component_rules(roots, table)
        for block in collected.passthrough:
            preset.preflights.append(Preflight(_fixed(block.css, prefix), COMPONENTS_LAYER))

    builtin = builtin_palettes() if palettes is None else dict(palettes)
    available = collect_palettes(options.themes, builtin)
    order = resolve_theme_order(options.themes, available, list(builtin))
    composed = compose_report(available, order, options.dark_theme, options.theme_root)
    preset.issues.extend(composed.issues)
    preset.preflights.append(Preflight(_deferred(processor, composed.blocks, prefix), THEMES_LAYER))

    if options.utils:
        utilities = await source.load("utilities")
        for style in utilities.values():
            preset.preflights.append(
                Preflight(_deferred(processor, style, prefix), UTILITIES_LAYER)
            )

    for name, css in table.items():
        preset.rules.append(
            DynamicRule(
                name=name,
                pattern=re.compile(f"^{re.escape(name)}$"),
                get_css=_fixed(css, prefix),
                meta={"layer": layer_for(name)},
            )
        )

    logger.info(
        "Built %s: %d preflight(s), %d rule(s), themes %s",
        preset.name,
        len(preset.preflights),
        len(preset.rules),
        ", ".join(order) or "(none)",
    )
    return preset
