"""
Component rule table.

Flattened component rules are grouped by the class name they are filed
under, so one engine rule per class emits every piece of CSS that class
needs (base rule, state variants, media-query variants).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .css.flatten import PassthroughBlock, flatten_rules
from .css.nodes import Root
from .css.selectors import classify

logger = logging.getLogger(__name__)

COMPONENTS_LAYER = "daisy-components"
COMPONENTS_POST_LAYER = "daisy-components-post"

# Rules for these classes must come after the regular component layer
_POST_LAYER_PREFIXES = ("checkbox-",)


def layer_for(name: str) -> str:
    """Layer a component rule is emitted in."""
    if name.startswith(_POST_LAYER_PREFIXES):
        return COMPONENTS_POST_LAYER
    return COMPONENTS_LAYER


class UtilityRuleTable:
    """Accumulated CSS text per utility name, in first-seen order."""

    def __init__(self) -> None:
        self._rules: dict[str, str] = {}

    def add(self, name: str, css: str) -> None:
        self._rules[name] = self._rules.get(name, "") + css + "\n"

    def get(self, name: str) -> str | None:
        return self._rules.get(name)

    def names(self) -> list[str]:
        return list(self._rules)

    def items(self) -> Iterator[tuple[str, str]]:
        return iter(self._rules.items())

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)


@dataclass
class ComponentRules:
    """Classified component rules plus blocks that bypass classification."""

    table: UtilityRuleTable = field(default_factory=UtilityRuleTable)
    passthrough: list[PassthroughBlock] = field(default_factory=list)


def collect_component_rules(
    roots: Iterable[Root], table: UtilityRuleTable | None = None
) -> ComponentRules:
    """
    Flatten and classify every rule in the given component trees.

    Raises:
        StructuralError: If a rule nests rules, or a selector has no class.
    """
    collected = ComponentRules(table=table if table is not None else UtilityRuleTable())
    for root in roots:
        for item in flatten_rules(root.nodes):
            if isinstance(item, PassthroughBlock):
                collected.passthrough.append(item)
                continue
            collected.table.add(classify(item.selector), item.to_css())

    logger.debug(
        "Collected %d utility rule(s) and %d passthrough block(s)",
        len(collected.table),
        len(collected.passthrough),
    )
    return collected
