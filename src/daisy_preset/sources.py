"""
Style sources.

A style source resolves a style category (``base``, ``components``,
``utilities``) to its modules: module name -> style object. Loading is
async so sources backed by disk or network can be awaited uniformly.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Protocol

import yaml

from .css.style_object import StyleObject
from .errors import MissingStyleModuleError, StructuralError

logger = logging.getLogger(__name__)

CATEGORIES: tuple[str, ...] = ("base", "components", "utilities")

# File names recognised as a style module's style object
MODULE_FILES: tuple[str, ...] = ("object.json", "object.yaml", "object.yml")


class StyleSource(Protocol):
    """Resolves a style category to its named style objects."""

    async def load(self, category: str) -> dict[str, StyleObject]: ...


class InMemoryStyleSource:
    """Style source over an in-memory ``{category: {module: style}}`` mapping."""

    def __init__(self, categories: Mapping[str, Mapping[str, StyleObject]]):
        self._categories = categories

    async def load(self, category: str) -> dict[str, StyleObject]:
        if category not in self._categories:
            raise MissingStyleModuleError(category)
        return dict(self._categories[category])


class DirectoryStyleSource:
    """
    Style source reading a directory tree of style modules.

    Layout::

        <root>/<category>/<module>/object.json   (or object.yaml)

    Modules are discovered recursively and returned sorted by path, each
    named after the directory holding its style object.
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)

    async def load(self, category: str) -> dict[str, StyleObject]:
        directory = self.root / category
        if not directory.is_dir():
            raise MissingStyleModuleError(category, str(directory))

        files = await asyncio.to_thread(self._discover, directory)
        modules: dict[str, StyleObject] = {}
        for path in files:
            name = path.parent.name
            if name in modules:
                logger.warning("Duplicate style module %r in %s, keeping the first", name, category)
                continue
            modules[name] = await asyncio.to_thread(self._read, path)

        logger.debug("Loaded %d %s module(s) from %s", len(modules), category, directory)
        return modules

    @staticmethod
    def _discover(directory: Path) -> list[Path]:
        return sorted(path for path in directory.rglob("*") if path.name in MODULE_FILES)

    @staticmethod
    def _read(path: Path) -> StyleObject:
        text = path.read_text(encoding="utf-8")
        try:
            if path.suffix == ".json":
                data: Any = json.loads(text)
            else:
                data = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise StructuralError(f"Cannot parse style module {path}: {e}") from e

        if not isinstance(data, dict):
            raise StructuralError(f"Style module {path} must contain a mapping")
        return data
