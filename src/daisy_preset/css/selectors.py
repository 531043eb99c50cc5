"""
Selector tokenizing and classification.

Every flattened component rule is filed under one class name, the
"utility" an engine user writes in markup to pull that rule in.
:func:`classify` picks that name from the rule's selector.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import NoClassInSelectorError, StructuralError
from .nodes import split_selector_list

__all__ = [
    "Token",
    "tokenize",
    "class_names",
    "classify",
]

# Functional pseudo-classes whose argument is itself a selector list
SELECTOR_PSEUDOS = frozenset(
    {
        "is",
        "where",
        "not",
        "has",
        "matches",
        "-webkit-any",
        "-moz-any",
        "host",
        "host-context",
        "slotted",
    }
)

_WHITESPACE = " \t\n\r\f"
_COMBINATORS = ">+~"


@dataclass(frozen=True)
class Token:
    """
    One selector token.

    Attributes:
        type: ``class``, ``id``, ``type``, ``universal``, ``attribute``,
            ``pseudo-class``, ``pseudo-element``, ``combinator`` or ``comma``.
        content: The exact source text of the token.
        name: Identifier without its sigil (class name, attribute name,
            pseudo name); empty for combinators and commas.
        argument: Text inside a functional pseudo's parentheses, if any.
    """

    type: str
    content: str
    name: str = ""
    argument: str | None = None


def _is_ident_char(ch: str) -> bool:
    return ch.isalnum() or ch in "-_" or ord(ch) >= 0x80


def _read_ident(text: str, start: int) -> int:
    """Return the index just past the identifier starting at *start*."""
    i = start
    while i < len(text):
        if text[i] == "\\" and i + 1 < len(text):
            i += 2
        elif _is_ident_char(text[i]):
            i += 1
        else:
            break
    return i


def _read_balanced(text: str, start: int, opening: str, closing: str) -> int:
    """Return the index just past the bracket group opened at *start*."""
    depth = 0
    quote: str | None = None
    i = start
    while i < len(text):
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 1
            elif ch == quote:
                quote = None
        elif ch in "\"'":
            quote = ch
        elif ch == opening:
            depth += 1
        elif ch == closing:
            depth -= 1
            if depth == 0:
                return i + 1
        i += 1
    raise StructuralError(f"Unbalanced {opening!r} in selector {text!r}")


def tokenize(selector: str) -> list[Token]:
    """
    Split a selector into tokens.

    Whitespace between compound selectors becomes a descendant combinator
    token with content ``" "``; whitespace around other combinators and
    commas is dropped.

    Raises:
        StructuralError: If the selector cannot be tokenized.
    """
    tokens: list[Token] = []
    text = selector.strip()
    i = 0
    while i < len(text):
        ch = text[i]

        if ch in _WHITESPACE:
            while i < len(text) and text[i] in _WHITESPACE:
                i += 1
            if i < len(text) and text[i] not in _COMBINATORS + "," and tokens:
                if tokens[-1].type not in ("combinator", "comma"):
                    tokens.append(Token("combinator", " "))
            continue

        if ch in _COMBINATORS:
            tokens.append(Token("combinator", ch))
            i += 1
            while i < len(text) and text[i] in _WHITESPACE:
                i += 1
            continue

        if ch == ",":
            tokens.append(Token("comma", ","))
            i += 1
            while i < len(text) and text[i] in _WHITESPACE:
                i += 1
            continue

        if ch in ".#":
            end = _read_ident(text, i + 1)
            if end == i + 1:
                raise StructuralError(f"Expected a name after {ch!r} in selector {selector!r}")
            kind = "class" if ch == "." else "id"
            tokens.append(Token(kind, text[i:end], text[i + 1 : end]))
            i = end
            continue

        if ch == "*":
            tokens.append(Token("universal", "*", "*"))
            i += 1
            continue

        if ch == "[":
            end = _read_balanced(text, i, "[", "]")
            content = text[i:end]
            name = re.split(r"[~|^$*]?=|\s", content[1:-1].strip(), maxsplit=1)[0]
            tokens.append(Token("attribute", content, name))
            i = end
            continue

        if ch == ":":
            element = text.startswith("::", i)
            start = i + (2 if element else 1)
            end = _read_ident(text, start)
            if end == start:
                raise StructuralError(f"Expected a pseudo name in selector {selector!r}")
            name = text[start:end]
            argument = None
            if end < len(text) and text[end] == "(":
                close = _read_balanced(text, end, "(", ")")
                argument = text[end + 1 : close - 1]
                end = close
            kind = "pseudo-element" if element else "pseudo-class"
            tokens.append(Token(kind, text[i:end], name, argument))
            i = end
            continue

        if _is_ident_char(ch) or ch == "\\":
            end = _read_ident(text, i)
            tokens.append(Token("type", text[i:end], text[i:end]))
            i = end
            continue

        raise StructuralError(f"Unexpected {ch!r} in selector {selector!r}")

    return tokens


def _token_classes(tokens: list[Token]) -> list[str]:
    names: list[str] = []
    for token in tokens:
        if token.type == "class":
            names.append(token.name)
        elif token.argument and token.name in SELECTOR_PSEUDOS:
            names.extend(class_names(token.argument))
    return names


def class_names(selector: str) -> list[str]:
    """
    Every class token in *selector*, in order.

    Arguments of selector-taking pseudo-classes (``:is()``, ``:where()``,
    ``:not()``, ``:has()``) are searched too. Text inside attribute values
    is never mistaken for a class.

    Raises:
        StructuralError: If the selector cannot be tokenized.
    """
    return _token_classes(tokenize(selector))


def _class_in(tokens: list[Token], index: int) -> str | None:
    if index < len(tokens) and tokens[index].type == "class":
        return tokens[index].name
    return None


def classify(selector: str) -> str:
    """
    Pick the utility name a component rule is filed under.

    Only the first selector of a list is examined. The first matching case wins:

    - starts with ``.link-``: ``link``
    - starts with ``.modal-open``: ``modal``
    - starts with a class: that class
    - starts with ``:where(...)``: the first class inside it
    - starts with ``[dir="rtl"]`` or ``:root``: ``modal`` when followed by
      ``.modal-open``, otherwise the class two tokens in
    - otherwise: the first class anywhere in the selector

    Raises:
        NoClassInSelectorError: If the selector has no class at all.
    """
    every_class = class_names(selector)
    if not every_class:
        raise NoClassInSelectorError(selector)

    first = split_selector_list(selector)[0]
    tokens = tokenize(first)
    head = tokens[0]
    name: str | None = None

    if head.type == "class":
        if first.startswith(".link-"):
            return "link"
        if first.startswith(".modal-open"):
            return "modal"
        return head.name

    if head.type == "pseudo-class" and head.name == "where" and head.argument:
        inner = class_names(head.argument)
        name = inner[0] if inner else None
    elif head.content in ('[dir="rtl"]', ":root"):
        if len(tokens) > 1 and ".modal-open" in tokens[1].content:
            return "modal"
        name = _class_in(tokens, 2)

    if name is None:
        in_first = _token_classes(tokens)
        name = in_first[0] if in_first else every_class[0]
    return name
