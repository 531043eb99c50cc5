"""
Rule flattening.

Walks a processed node tree and yields every rule that carries
declarations, together with the stack of enclosing at-rule headers.
Keyframes blocks are yielded whole; they are global and cannot be
attached to a single class.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..errors import StructuralError
from .nodes import INDENT, Declaration, Rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlatRule:
    """A rule's declarations plus the at-rule headers it was nested in (outermost first)."""

    context: tuple[str, ...]
    selector: str
    declarations: tuple[Declaration, ...]

    def to_css(self) -> str:
        """Serialize the rule re-wrapped in its at-rule context."""
        depth = len(self.context)
        lines = [f"{INDENT * level}{header} {{" for level, header in enumerate(self.context)]
        lines.append(Rule(self.selector, list(self.declarations)).to_css(depth))
        lines.extend(f"{INDENT * level}}}" for level in reversed(range(depth)))
        return "\n".join(lines)


@dataclass(frozen=True)
class PassthroughBlock:
    """An at-rule emitted verbatim instead of being split into rules."""

    name: str
    css: str


FlatItem = FlatRule | PassthroughBlock


def flatten_rules(nodes: Iterable, parents: tuple[str, ...] = ()) -> Iterator[FlatItem]:
    """
    Flatten a node list into rules and passthrough blocks, in document order.

    Comments are ignored, rules without declarations are dropped and empty
    at-rules are skipped. Unknown node kinds are logged and skipped.

    Raises:
        StructuralError: If a rule contains anything besides declarations
            and comments.
    """
    for node in nodes:
        kind = getattr(node, "type", None)

        if kind == "comment":
            continue

        if kind == "rule":
            declarations: list[Declaration] = []
            for child in node.nodes:
                child_kind = getattr(child, "type", None)
                if child_kind == "decl":
                    declarations.append(child)
                elif child_kind != "comment":
                    raise StructuralError(
                        f"Rule {node.selector!r} contains a nested "
                        f"{child_kind or type(child).__name__} node"
                    )
            if declarations:
                yield FlatRule(parents, node.selector, tuple(declarations))
            continue

        if kind == "atrule":
            if not node.nodes:
                continue
            if node.name == "keyframes":
                yield PassthroughBlock(node.name, node.to_css())
            else:
                yield from flatten_rules(node.nodes, (*parents, node.header))
            continue

        logger.warning("Skipping unsupported CSS node: %s", kind or type(node).__name__)
