"""
Minimal CSS node model.

Just enough structure to carry style objects through the pipeline and
serialize them back to CSS text: declarations, comments, rules,
at-rules and a root container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

INDENT = "  "


def split_selector_list(selector: str) -> list[str]:
    """Split a selector list on top-level commas (ignoring commas in () and [])."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    current: list[str] = []
    for ch in selector:
        if quote:
            if ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]":
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
            continue
        current.append(ch)
    parts.append("".join(current).strip())
    return [part for part in parts if part]


@dataclass
class Declaration:
    """A ``property: value`` pair."""

    type: ClassVar[str] = "decl"

    prop: str
    value: str
    important: bool = False

    def to_css(self, depth: int = 0) -> str:
        important = " !important" if self.important else ""
        return f"{INDENT * depth}{self.prop}: {self.value}{important};"

    def __str__(self) -> str:
        return self.to_css()


@dataclass
class Comment:
    type: ClassVar[str] = "comment"

    text: str

    def to_css(self, depth: int = 0) -> str:
        return f"{INDENT * depth}/* {self.text} */"

    def __str__(self) -> str:
        return self.to_css()


@dataclass
class Rule:
    """A selector with a block of child nodes."""

    type: ClassVar[str] = "rule"

    selector: str
    nodes: list[Node] = field(default_factory=list)

    @property
    def selectors(self) -> list[str]:
        return split_selector_list(self.selector)

    def to_css(self, depth: int = 0) -> str:
        pad = INDENT * depth
        body = "\n".join(child.to_css(depth + 1) for child in self.nodes)
        return f"{pad}{self.selector} {{\n{body}\n{pad}}}"

    def __str__(self) -> str:
        return self.to_css()


@dataclass
class AtRule:
    """
    An at-rule such as ``@media`` or ``@keyframes``.

    ``nodes`` is None for statement at-rules (``@import url(...)``) and a
    list for block at-rules. ``after_name`` is the raw text between the
    name and the params, defaulting to a single space when there are params.
    """

    type: ClassVar[str] = "atrule"

    name: str
    params: str = ""
    nodes: list[Node] | None = None
    after_name: str | None = None

    @property
    def header(self) -> str:
        separator = self.after_name
        if separator is None:
            separator = " " if self.params else ""
        return f"@{self.name}{separator}{self.params}"

    def to_css(self, depth: int = 0) -> str:
        pad = INDENT * depth
        if self.nodes is None:
            return f"{pad}{self.header};"
        body = "\n".join(child.to_css(depth + 1) for child in self.nodes)
        return f"{pad}{self.header} {{\n{body}\n{pad}}}"

    def __str__(self) -> str:
        return self.to_css()


@dataclass
class Root:
    type: ClassVar[str] = "root"

    nodes: list[Node] = field(default_factory=list)

    def to_css(self, depth: int = 0) -> str:
        return "\n".join(child.to_css(depth) for child in self.nodes)

    def __str__(self) -> str:
        return self.to_css()


Node = Declaration | Comment | Rule | AtRule
