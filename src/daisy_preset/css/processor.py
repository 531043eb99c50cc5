"""
CSS processing step.

Every style object passes through a processor on its way to CSS text.
The default processor only parses and serializes; plugins can be added
to rewrite the node tree in between (vendor prefixing, minification).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .nodes import Root
from .style_object import StyleObject, parse_style_object

Plugin = Callable[[Root], None]


@dataclass(frozen=True)
class ProcessResult:
    """Processed node tree and its serialized CSS text."""

    root: Root

    @property
    def css(self) -> str:
        return self.root.to_css()


class CssProcessor(Protocol):
    """Anything that turns a style object into a processed node tree."""

    def process(self, style: StyleObject) -> ProcessResult: ...


class StyleProcessor:
    """
    Parse a style object and run it through a chain of plugins.

    Each plugin receives the root node and mutates it in place; plugins
    run in the order given.
    """

    def __init__(self, plugins: Sequence[Plugin] = ()):
        self.plugins = list(plugins)

    def process(self, style: StyleObject) -> ProcessResult:
        root = parse_style_object(style)
        for plugin in self.plugins:
            plugin(root)
        return ProcessResult(root=root)
