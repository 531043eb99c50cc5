"""
Error types for daisy-preset.

Structural and loading errors abort a preset build. Color errors are
recoverable: the theme synthesizer catches them and skips the property.
"""

from __future__ import annotations


class DaisyPresetError(Exception):
    """Base exception for all daisy-preset errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class StructuralError(DaisyPresetError):
    """
    Raised when a style source does not have the shape the pipeline expects.

    Examples:
    - A rule that mixes declarations with nested rules or at-rules
    - A retained rule whose selector has no class in it
    """

    pass


class NoClassInSelectorError(StructuralError):
    """Raised when a selector cannot be tied to any utility class."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Selector has no class token: {selector!r}")


class InvalidColorError(DaisyPresetError):
    """Raised when a color value cannot be parsed."""

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        message = f"Invalid color: {value!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class MissingStyleModuleError(DaisyPresetError):
    """Raised when a style category cannot be resolved by the style source."""

    def __init__(self, category: str, location: str | None = None):
        self.category = category
        self.location = location
        message = f"Style category not found: {category!r}"
        if location:
            message += f" (looked in {location})"
        super().__init__(message)


class PresetConfigError(DaisyPresetError):
    """Raised when preset options cannot be loaded or validated."""

    pass
