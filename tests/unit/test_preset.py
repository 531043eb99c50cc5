"""
Unit tests for the preset builder.

Builds presets from in-memory style sources and checks preflights,
rules, prefix replacement, theme output and rendering.
"""

import pytest

from daisy_preset import (
    InMemoryStyleSource,
    MissingStyleModuleError,
    PresetOptions,
    StructuralError,
    build_preset,
)
from daisy_preset.preset import (
    BASE_LAYER,
    THEMES_LAYER,
    UTILITIES_LAYER,
    replace_prefix,
)
from daisy_preset.rules import COMPONENTS_LAYER, COMPONENTS_POST_LAYER

PALETTES = {
    "light": {"primary": "50% 0.1 120", "color-scheme": "light"},
    "dark": {"primary": "70% 0.1 120", "base-100": "20% 0 0", "color-scheme": "dark"},
}


class TestBuildPreset:
    """Tests for build_preset."""

    @pytest.mark.asyncio
    async def test_preflight_layers_in_order(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        assert [p.layer for p in preset.preflights] == [
            BASE_LAYER,
            COMPONENTS_LAYER,
            THEMES_LAYER,
            UTILITIES_LAYER,
        ]

    @pytest.mark.asyncio
    async def test_one_rule_per_class(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        assert [rule.name for rule in preset.rules] == [
            "btn",
            "btn-ghost",
            "card",
            "card-body",
            "checkbox-primary",
        ]

    @pytest.mark.asyncio
    async def test_rule_layers(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        layers = {rule.name: rule.meta["layer"] for rule in preset.rules}
        assert layers["btn"] == COMPONENTS_LAYER
        assert layers["checkbox-primary"] == COMPONENTS_POST_LAYER

    @pytest.mark.asyncio
    async def test_rule_patterns_match_exactly(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        btn = preset.rule_for("btn")
        assert btn is not None
        assert btn.matches("btn")
        assert not btn.matches("btn-x")
        assert not btn.matches("xbtn")
        assert preset.rule_for("btn-ghost").name == "btn-ghost"

    @pytest.mark.asyncio
    async def test_variable_prefix_replaced(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        base_css = preset.preflights[0].get_css()
        assert "--un-ring-offset" in base_css
        assert "--tw-" not in base_css
        assert "--un-text-opacity" in preset.rule_for("btn").get_css()
        assert "--un-glass-blur" in preset.preflights[-1].get_css()

    @pytest.mark.asyncio
    async def test_custom_variable_prefix(self, style_source):
        options = PresetOptions(variable_prefix="--acme-")
        preset = await build_preset(style_source, options, palettes=PALETTES)
        assert "--acme-ring-offset" in preset.preflights[0].get_css()

    @pytest.mark.asyncio
    async def test_keyframes_preflight(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        keyframes = preset.preflights[1]
        assert keyframes.layer == COMPONENTS_LAYER
        assert keyframes.get_css().startswith("@keyframes button-pop {")

    @pytest.mark.asyncio
    async def test_theme_preflight(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        css = next(p for p in preset.preflights if p.layer == THEMES_LAYER).get_css()
        assert css.startswith(":root {")
        assert "--p: 50% 0.1 120;" in css
        assert "@media (prefers-color-scheme: dark) {" in css
        assert '[data-theme="dark"] {' in css
        assert "color-scheme: dark;" in css

    @pytest.mark.asyncio
    async def test_theme_root_option(self, style_source):
        options = PresetOptions(theme_root="html", dark_theme=False)
        preset = await build_preset(style_source, options, palettes=PALETTES)
        css = next(p for p in preset.preflights if p.layer == THEMES_LAYER).get_css()
        assert css.startswith("html {")
        assert "prefers-color-scheme" not in css

    @pytest.mark.asyncio
    async def test_theme_colors(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        colors = preset.theme["colors"]
        assert colors["primary"] == "oklch(var(--p) / <alpha-value>)"
        assert colors["primaryContent"] == "oklch(var(--pc) / <alpha-value>)"
        assert colors["base"]["100"] == "oklch(var(--b1) / <alpha-value>)"
        assert colors["base"]["content"] == "oklch(var(--bc) / <alpha-value>)"

    @pytest.mark.asyncio
    async def test_builtin_palettes_by_default(self, style_source):
        preset = await build_preset(style_source, PresetOptions(themes=["cupcake"]))
        css = next(p for p in preset.preflights if p.layer == THEMES_LAYER).get_css()
        assert css.startswith(":root {")
        assert "[data-theme" not in css

    @pytest.mark.asyncio
    async def test_color_issues_reported(self, style_source):
        options = PresetOptions(themes=[{"broken": {"primary": "bogus"}}])
        preset = await build_preset(style_source, options, palettes=PALETTES)
        assert any(issue.theme == "broken" for issue in preset.issues)

    @pytest.mark.asyncio
    async def test_disabled_categories_not_loaded(self):
        source = InMemoryStyleSource({})
        options = PresetOptions(base=False, styled=False, utils=False)
        preset = await build_preset(source, options, palettes=PALETTES)
        assert [p.layer for p in preset.preflights] == [THEMES_LAYER]
        assert preset.rules == []

    @pytest.mark.asyncio
    async def test_utility_modules_each_get_a_preflight(self, base_styles):
        source = InMemoryStyleSource(
            {
                "base": base_styles,
                "utilities": {"a": {".a": {"top": "0"}}, "b": {".b": {"top": "0"}}},
            }
        )
        preset = await build_preset(source, PresetOptions(styled=False), palettes=PALETTES)
        utilities = [p for p in preset.preflights if p.layer == UTILITIES_LAYER]
        assert [p.get_css() for p in utilities] == [".a {\n  top: 0;\n}", ".b {\n  top: 0;\n}"]

    @pytest.mark.asyncio
    async def test_missing_category_raises(self):
        with pytest.raises(MissingStyleModuleError):
            await build_preset(InMemoryStyleSource({"base": {}}), palettes=PALETTES)

    @pytest.mark.asyncio
    async def test_nested_component_rule_raises(self):
        source = InMemoryStyleSource({"components": {"bad": {".a": {".b": {"top": "0"}}}}})
        options = PresetOptions(base=False, utils=False)
        with pytest.raises(StructuralError):
            await build_preset(source, options, palettes=PALETTES)

    @pytest.mark.asyncio
    async def test_custom_processor(self, style_source):
        calls = []

        class RecordingProcessor:
            def process(self, style):
                from daisy_preset.css import StyleProcessor

                calls.append(style)
                return StyleProcessor().process(style)

        await build_preset(style_source, processor=RecordingProcessor(), palettes=PALETTES)
        # Components are processed eagerly, one call per module
        assert len(calls) == 3


class TestRender:
    """Tests for Preset.render."""

    @pytest.mark.asyncio
    async def test_render_everything(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        css = preset.render()
        assert css.index("box-sizing") < css.index(".btn {") < css.index(":root {")
        assert ".card {" in css
        assert css.endswith("\n")

    @pytest.mark.asyncio
    async def test_render_selected_classes(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        css = preset.render(["btn"])
        assert ".btn {" in css
        assert ".btn:hover {" in css
        assert ".card {" not in css
        assert ".glass {" in css

    @pytest.mark.asyncio
    async def test_post_layer_after_components(self, style_source):
        preset = await build_preset(style_source, palettes=PALETTES)
        css = preset.render(["checkbox-primary", "card"])
        assert css.index(".card {") < css.index(".checkbox-primary {")


class TestReplacePrefix:
    """Tests for replace_prefix."""

    def test_replaces_every_occurrence(self):
        css = "a { --tw-x: 1; top: var(--tw-x); }"
        assert replace_prefix(css, "--un-") == "a { --un-x: 1; top: var(--un-x); }"

    def test_same_prefix_is_noop(self):
        assert replace_prefix("--tw-x", "--tw-") == "--tw-x"
