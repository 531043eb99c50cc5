"""
Theme synthesizer.

Turns a partial palette (semantic color names plus optional raw custom
properties) into the complete custom-property set a theme block needs.
Missing base tiers, state colors, content colors and layout variables are
derived from the supplied colors or filled from fixed defaults.

Synthesis is one-way: the output is keyed by custom property names
(``--p``), not semantic names (``primary``), so feeding an output back in
is not expected to reproduce it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

from daisy_preset.color import NEUTRAL_FOREGROUND, darken, foreground, format_color, parse_color
from daisy_preset.errors import InvalidColorError
from daisy_preset.variables import (
    COLOR_VARIABLES,
    CONTENT_SOURCES,
    DEFAULT_BASE_100,
    LAYOUT_DEFAULTS,
    STATE_CONTENT_SOURCES,
    STATE_DEFAULTS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColorIssue:
    """A palette entry that could not be turned into a color.

    Attributes:
        theme: Theme the palette belongs to (empty when anonymous).
        key: Palette key or custom property that was skipped.
        value: The offending source value.
        reason: Why parsing failed.
    """

    theme: str
    key: str
    value: object
    reason: str

    def __str__(self) -> str:
        location = f"theme {self.theme!r}" if self.theme else "palette"
        return f"{location}: {self.key} = {self.value!r}: {self.reason}"


@dataclass
class SynthesisResult:
    """Output of a synthesis run: the variables plus any skipped colors."""

    variables: dict[str, str]
    issues: list[ColorIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def synthesize_report(palette: Mapping[str, object], theme: str = "") -> SynthesisResult:
    """
    Synthesize a full theme and report colors that failed to parse.

    Args:
        palette: Semantic color names and/or raw custom properties.
        theme: Theme name, used only for diagnostics.

    Returns:
        SynthesisResult with the custom-property mapping. Properties whose
        source color is invalid are left out and listed in ``issues``.
    """
    variables: dict[str, str] = {}
    issues: list[ColorIssue] = []

    def put(variable: str, key: str, source: object, produce: Callable[[], str]) -> None:
        if variable in variables:
            return
        try:
            variables[variable] = produce()
        except InvalidColorError as exc:
            issues.append(ColorIssue(theme, key, source, exc.message))
            logger.warning("Skipping %s for %s: %s", variable, theme or "palette", exc.message)

    # Supplied colors are converted, anything else is passed through
    for key, value in palette.items():
        variable = COLOR_VARIABLES.get(key)
        if variable is None:
            variables[key] = str(value)
        else:
            put(variable, key, value, lambda value=value: format_color(parse_color(value)))

    # Base tiers
    base_100 = palette.get("base-100")
    if base_100 is None:
        put("--b1", "base-100", None, lambda: DEFAULT_BASE_100)
        base_100 = DEFAULT_BASE_100
    if "base-200" not in palette:
        put("--b2", "base-200", base_100, lambda: darken(base_100, 0.07))
    if "base-300" not in palette:
        if "base-200" in palette:
            base_200 = palette["base-200"]
            put("--b3", "base-300", base_200, lambda: darken(base_200, 0.07))
        else:
            put("--b3", "base-300", base_100, lambda: darken(base_100, 0.14))

    # State colors
    for name, default in STATE_DEFAULTS.items():
        if name not in palette:
            put(COLOR_VARIABLES[name], name, None, lambda default=default: default)

    # Content colors
    for name, source_name in CONTENT_SOURCES.items():
        if name not in palette:
            source = palette.get(source_name)
            put(
                COLOR_VARIABLES[name],
                name,
                source,
                lambda source=source: foreground(source, 0.8),
            )

    for name, state in STATE_CONTENT_SOURCES.items():
        if name in palette:
            continue
        if state in palette:
            source = palette[state]
            put(COLOR_VARIABLES[name], name, source, lambda source=source: foreground(source, 0.8))
        else:
            put(COLOR_VARIABLES[name], name, None, lambda: NEUTRAL_FOREGROUND)

    # Layout and animation variables
    for variable, value in LAYOUT_DEFAULTS.items():
        if variable not in palette:
            variables.setdefault(variable, value)

    logger.debug(
        "Synthesized %d variables for %s (%d issue(s))",
        len(variables),
        theme or "palette",
        len(issues),
    )
    return SynthesisResult(variables=variables, issues=issues)


def synthesize(palette: Mapping[str, object], theme: str = "") -> dict[str, str]:
    """Synthesize a full custom-property set from a partial palette."""
    return synthesize_report(palette, theme).variables
