"""Shared pytest fixtures for daisy-preset tests."""

import json
from pathlib import Path

import pytest

from daisy_preset.sources import InMemoryStyleSource


@pytest.fixture
def base_styles() -> dict:
    """Return a base category with a single reset module."""
    return {
        "reset": {
            "*, ::before, ::after": {"boxSizing": "border-box", "--tw-ring-offset": "0px"},
            "html": {"lineHeight": 1.5},
        }
    }


@pytest.fixture
def component_styles() -> dict:
    """Return a components category with button, card and checkbox modules."""
    return {
        "button": {
            ".btn": {"display": "inline-flex", "--tw-text-opacity": "1"},
            ".btn:hover": {"opacity": 0.9},
            "@media (hover: hover)": {".btn-ghost:hover": {"backgroundColor": "transparent"}},
            "@keyframes button-pop": {
                "0%": {"transform": "scale(0.95)"},
                "100%": {"transform": "scale(1)"},
            },
        },
        "card": {
            ".card": {"position": "relative"},
            ":where(.card-body) > *": {"margin": 0},
        },
        "checkbox": {
            ".checkbox-primary": {"--chkbg": "var(--p)"},
        },
    }


@pytest.fixture
def utility_styles() -> dict:
    """Return a utilities category with one glass module."""
    return {
        "glass": {
            ".glass": {"backdropFilter": "blur(var(--tw-glass-blur, 40px))"},
        }
    }


@pytest.fixture
def style_source(base_styles, component_styles, utility_styles) -> InMemoryStyleSource:
    """Return an in-memory style source with all three categories."""
    return InMemoryStyleSource(
        {
            "base": base_styles,
            "components": component_styles,
            "utilities": utility_styles,
        }
    )


@pytest.fixture
def styles_dir(tmp_path: Path, base_styles, component_styles, utility_styles) -> Path:
    """Write the fixture categories to disk as <category>/<module>/object.json."""
    root = tmp_path / "styles"
    for category, modules in (
        ("base", base_styles),
        ("components", component_styles),
        ("utilities", utility_styles),
    ):
        for name, style in modules.items():
            module_dir = root / category / name
            module_dir.mkdir(parents=True)
            (module_dir / "object.json").write_text(json.dumps(style))
    return root
