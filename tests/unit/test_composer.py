"""
Unit tests for theme composition.

Tests theme ordering, dark-theme selection and the selector layout of
composed theme blocks.
"""

import pytest

from daisy_preset.errors import PresetConfigError
from daisy_preset.themes import (
    DARK_MEDIA_QUERY,
    auto_dark_theme,
    builtin_palettes,
    builtin_theme_order,
    collect_palettes,
    compose,
    compose_report,
    controller_selector,
    resolve_theme_order,
    theme_selector,
)

PALETTES = {
    "light": {"primary": "50% 0.1 120", "base-100": "100% 0 0"},
    "dark": {"primary": "70% 0.1 120", "base-100": "20% 0 0"},
    "retro": {"primary": "60% 0.1 60"},
}


class TestSelectors:
    """Tests for theme selector helpers."""

    def test_theme_selector(self):
        assert theme_selector("dark") == '[data-theme="dark"]'

    def test_controller_selector(self):
        assert (
            controller_selector(":root", "dark")
            == ':root:has(input.theme-controller[value="dark"]:checked)'
        )


class TestResolveThemeOrder:
    """Tests for resolve_theme_order."""

    def test_false_gives_light_dark(self):
        assert resolve_theme_order(False, PALETTES, list(PALETTES)) == ["light", "dark"]

    def test_true_gives_every_builtin(self):
        assert resolve_theme_order(True, PALETTES, ["light", "dark", "retro"]) == [
            "light",
            "dark",
            "retro",
        ]

    def test_list_keeps_order(self):
        assert resolve_theme_order(["retro", "light"], PALETTES, []) == ["retro", "light"]

    def test_list_deduplicates(self):
        assert resolve_theme_order(["dark", "dark", "light"], PALETTES, []) == ["dark", "light"]

    def test_unknown_names_are_skipped(self, caplog):
        assert resolve_theme_order(["nope", "light"], PALETTES, []) == ["light"]
        assert "nope" in caplog.text

    def test_custom_palette_entries(self):
        themes = ["light", {"brand": {"primary": "red"}}]
        available = collect_palettes(themes, PALETTES)
        assert resolve_theme_order(themes, available, []) == ["light", "brand"]

    def test_custom_palette_replaces_builtin(self):
        available = collect_palettes([{"light": {"primary": "blue"}}], PALETTES)
        assert available["light"] == {"primary": "blue"}
        assert PALETTES["light"]["primary"] == "50% 0.1 120"


class TestAutoDarkTheme:
    """Tests for auto_dark_theme."""

    def test_default_picks_dark(self):
        assert auto_dark_theme(["light", "dark"], None) == "dark"

    def test_disabled(self):
        assert auto_dark_theme(["light", "dark"], False) is None

    def test_explicit_name(self):
        assert auto_dark_theme(["light", "dark", "retro"], "retro") == "retro"

    def test_root_theme_is_never_dark(self):
        assert auto_dark_theme(["dark", "light"], None) is None
        assert auto_dark_theme(["retro", "light"], "retro") is None

    def test_name_must_be_in_order(self):
        assert auto_dark_theme(["light", "retro"], None) is None
        assert auto_dark_theme(["light", "retro"], "synthwave") is None

    def test_empty_order(self):
        assert auto_dark_theme([], "dark") is None


class TestCompose:
    """Tests for compose."""

    def test_single_theme_is_root_only(self):
        blocks = compose(PALETTES, ["light"])
        assert list(blocks) == [":root"]
        assert blocks[":root"]["--p"] == "50% 0.1 120"

    def test_light_dark_layout(self):
        blocks = compose(PALETTES, ["light", "dark"])
        assert list(blocks) == [
            ":root",
            DARK_MEDIA_QUERY,
            '[data-theme="light"]',
            ':root:has(input.theme-controller[value="light"]:checked)',
            '[data-theme="dark"]',
            ':root:has(input.theme-controller[value="dark"]:checked)',
        ]
        assert blocks[DARK_MEDIA_QUERY] == {":root": blocks['[data-theme="dark"]']}

    def test_dark_theme_disabled(self):
        blocks = compose(PALETTES, ["light", "dark"], dark_theme=False)
        assert DARK_MEDIA_QUERY not in blocks

    def test_dark_first_has_no_media_block(self):
        blocks = compose(PALETTES, ["dark", "light"])
        assert DARK_MEDIA_QUERY not in blocks
        assert blocks[":root"]["--p"] == "70% 0.1 120"

    def test_third_theme_gets_named_selectors(self):
        blocks = compose(PALETTES, ["light", "dark", "retro"])
        assert '[data-theme="retro"]' in blocks
        assert ':root:has(input.theme-controller[value="retro"]:checked)' in blocks

    def test_custom_theme_root(self):
        blocks = compose(PALETTES, ["light", "dark"], theme_root="html")
        assert "html" in blocks
        assert blocks[DARK_MEDIA_QUERY] == {"html": blocks['[data-theme="dark"]']}
        assert 'html:has(input.theme-controller[value="dark"]:checked)' in blocks

    def test_blocks_do_not_share_dicts(self):
        blocks = compose(PALETTES, ["light", "dark"])
        blocks[":root"]["--p"] = "changed"
        assert blocks['[data-theme="light"]']["--p"] == "50% 0.1 120"

    def test_empty_order(self):
        assert compose(PALETTES, []) == {}

    def test_unknown_theme_raises(self):
        with pytest.raises(PresetConfigError):
            compose(PALETTES, ["light", "missing"])

    def test_issues_are_collected(self):
        palettes = {"light": {"primary": "bogus"}}
        result = compose_report(palettes, ["light"])
        assert any(issue.theme == "light" for issue in result.issues)


class TestBuiltinThemes:
    """Tests for the bundled palettes."""

    def test_builtin_order_starts_with_light_dark(self):
        order = builtin_theme_order()
        assert order[:2] == ["light", "dark"]
        assert len(order) == 32

    def test_every_builtin_synthesizes_cleanly(self):
        palettes = builtin_palettes()
        result = compose_report(palettes, list(palettes))
        assert result.issues == []
