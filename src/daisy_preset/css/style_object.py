"""
Style object parsing.

A style object is a nested mapping in the CSS-in-JS shape component
libraries ship: selector and at-rule keys map to nested mappings,
property keys map to values. This module turns one into a node tree.

- ``"@media (min-width: 640px)": {...}`` becomes an at-rule with children
- ``"@import": "url(x.css)"`` (or ``True``) becomes a statement at-rule
- ``".btn": {...}`` becomes a rule
- ``"backgroundColor": "red"`` becomes ``background-color: red``
- a list value repeats the declaration (or at-rule) once per item
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from ..errors import StructuralError
from .nodes import AtRule, Declaration, Root, Rule

StyleObject = Mapping[str, Any]

_AT_RULE_RE = re.compile(r"^@(?P<name>\S+)(?:\s+(?P<params>.*?))?\s*$", re.DOTALL)
_IMPORTANT_RE = re.compile(r"\s*!important\s*$", re.IGNORECASE)
_UPPER_RE = re.compile(r"([A-Z])")

# Properties whose numeric values take no px unit
UNITLESS_PROPERTIES = frozenset(
    {
        "animation-iteration-count",
        "aspect-ratio",
        "border-image-outset",
        "border-image-slice",
        "border-image-width",
        "column-count",
        "columns",
        "fill-opacity",
        "flex",
        "flex-grow",
        "flex-shrink",
        "flood-opacity",
        "font-weight",
        "grid-area",
        "grid-column",
        "grid-column-end",
        "grid-column-start",
        "grid-row",
        "grid-row-end",
        "grid-row-start",
        "line-clamp",
        "line-height",
        "opacity",
        "order",
        "orphans",
        "scale",
        "stop-opacity",
        "stroke-dashoffset",
        "stroke-miterlimit",
        "stroke-opacity",
        "stroke-width",
        "tab-size",
        "widows",
        "z-index",
        "zoom",
    }
)


def dashify(name: str) -> str:
    """Convert a camelCase property name to CSS form; custom properties are kept as-is."""
    if name.startswith("--"):
        return name
    if name == "cssFloat":
        return "float"
    dashed = _UPPER_RE.sub(r"-\1", name).lower()
    if dashed.startswith("ms-"):
        dashed = "-" + dashed
    return dashed


def _declaration(prop: str, value: Any) -> Declaration:
    prop = dashify(prop)
    if isinstance(value, bool):
        raise StructuralError(f"Boolean value for property {prop!r}")
    if isinstance(value, (int, float)):
        if value == 0 or prop in UNITLESS_PROPERTIES or prop.startswith("--"):
            text = str(value)
        else:
            text = f"{value}px"
        return Declaration(prop, text)

    text = str(value)
    important = False
    if _IMPORTANT_RE.search(text):
        text = _IMPORTANT_RE.sub("", text)
        important = True
    return Declaration(prop, text, important)


def _at_rule(key: str, value: Any) -> AtRule:
    match = _AT_RULE_RE.match(key)
    if match is None:
        raise StructuralError(f"Malformed at-rule key {key!r}")
    node = AtRule(name=match.group("name"), params=match.group("params") or "")
    if isinstance(value, Mapping):
        node.nodes = []
        _parse_into(value, node.nodes)
    elif isinstance(value, str) and value:
        # "@import": "url(x.css)" style statements
        node.params = f"{node.params} {value}".strip()
    return node


def _parse_into(style: StyleObject, nodes: list) -> None:
    for key, value in style.items():
        if value is None:
            continue
        if key.startswith("@"):
            values = value if isinstance(value, list) else [value]
            nodes.extend(_at_rule(key, item) for item in values)
        elif isinstance(value, Mapping):
            rule = Rule(selector=key)
            _parse_into(value, rule.nodes)
            nodes.append(rule)
        elif isinstance(value, list):
            nodes.extend(_declaration(key, item) for item in value)
        else:
            nodes.append(_declaration(key, value))


def parse_style_object(style: StyleObject) -> Root:
    """
    Parse a style object into a node tree.

    Raises:
        StructuralError: For malformed at-rule keys or boolean declaration values.
    """
    root = Root()
    _parse_into(style, root.nodes)
    return root
