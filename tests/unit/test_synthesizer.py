"""
Unit tests for theme synthesis.

Tests that partial palettes are filled out with derived base tiers,
state colors, content colors and layout variables.
"""

import logging

import pytest

from daisy_preset.themes import synthesize, synthesize_report
from daisy_preset.variables import COLOR_VARIABLES, LAYOUT_DEFAULTS, STATE_DEFAULTS


class TestSynthesizeDefaults:
    """Tests for values filled in when a palette is sparse."""

    @pytest.fixture
    def variables(self):
        return synthesize({"primary": "50% 0.1 120"})

    def test_supplied_color_is_formatted(self, variables):
        assert variables["--p"] == "50% 0.1 120"

    def test_base_tiers_default_from_white(self, variables):
        assert variables["--b1"] == "100% 0 0"
        assert variables["--b2"] == "93% 0 0"
        assert variables["--b3"] == "86% 0 0"

    def test_state_defaults(self, variables):
        for name, value in STATE_DEFAULTS.items():
            assert variables[COLOR_VARIABLES[name]] == value

    def test_state_content_defaults_to_neutral(self, variables):
        assert variables["--inc"] == "0% 0 0"
        assert variables["--erc"] == "0% 0 0"

    def test_content_derived_from_supplied_color(self, variables):
        assert variables["--pc"] == "90% 0.02 120"

    def test_content_without_source_is_neutral(self, variables):
        assert variables["--sc"] == "0% 0 0"
        assert variables["--ac"] == "0% 0 0"

    def test_layout_defaults(self, variables):
        for name, value in LAYOUT_DEFAULTS.items():
            assert variables[name] == value

    def test_every_color_variable_present(self, variables):
        for variable in COLOR_VARIABLES.values():
            assert variable in variables


class TestSynthesizeOverrides:
    """Tests for palette entries that take precedence over derived values."""

    def test_base_300_derives_from_base_200(self):
        variables = synthesize({"base-200": "90% 0 0"})
        assert variables["--b2"] == "90% 0 0"
        assert variables["--b3"] == "83.7% 0 0"

    def test_supplied_state_content_derivation(self):
        variables = synthesize({"success": "40% 0.1 150"})
        assert variables["--su"] == "40% 0.1 150"
        assert variables["--suc"] == "8% 0.02 150"

    def test_supplied_content_color_wins(self):
        variables = synthesize({"primary": "50% 0.1 120", "primary-content": "10% 0 0"})
        assert variables["--pc"] == "10% 0 0"

    def test_raw_custom_property_wins(self):
        variables = synthesize({"primary": "50% 0.1 120", "--p": "1% 2 3"})
        assert variables["--p"] == "1% 2 3"

    def test_raw_custom_property_wins_regardless_of_order(self):
        variables = synthesize({"--p": "1% 2 3", "primary": "50% 0.1 120"})
        assert variables["--p"] == "1% 2 3"

    def test_layout_override(self):
        variables = synthesize({"--rounded-box": "0"})
        assert variables["--rounded-box"] == "0"

    def test_unknown_keys_pass_through(self):
        variables = synthesize({"color-scheme": "dark"})
        assert variables["color-scheme"] == "dark"

    def test_complete_palette_uses_no_defaults(self):
        palette = {name: "40% 0.1 200" for name in COLOR_VARIABLES}
        palette.update(LAYOUT_DEFAULTS)
        palette["--rounded-box"] = "2rem"
        variables = synthesize(palette)
        for variable in COLOR_VARIABLES.values():
            assert variables[variable] == "40% 0.1 200"
        assert variables["--rounded-box"] == "2rem"

    def test_empty_palette(self):
        variables = synthesize({})
        assert variables["--b1"] == "100% 0 0"
        assert variables["--bc"] == "0% 0 0"


class TestSynthesizeInvalidColors:
    """Tests that invalid colors are skipped and reported."""

    def test_invalid_color_is_skipped(self):
        result = synthesize_report({"primary": "bogus"}, "broken")
        assert "--p" not in result.variables
        assert "--pc" not in result.variables
        assert not result.ok

    def test_issue_details(self):
        result = synthesize_report({"primary": "bogus"}, "broken")
        issue = next(i for i in result.issues if i.key == "primary")
        assert issue.theme == "broken"
        assert issue.value == "bogus"
        assert "broken" in str(issue)

    def test_other_variables_still_synthesized(self):
        result = synthesize_report({"primary": "bogus", "secondary": "50% 0.1 10"})
        assert result.variables["--s"] == "50% 0.1 10"
        assert result.variables["--b1"] == "100% 0 0"

    def test_invalid_color_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="daisy_preset.themes.synthesizer"):
            synthesize_report({"accent": "nope"}, "broken")
        assert "--a" in caplog.text

    def test_valid_palette_is_ok(self):
        assert synthesize_report({"primary": "red"}).ok
