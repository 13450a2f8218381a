"""Tests for named theme presets."""

import pytest

from shallot.core.design_tokens import DesignTokens
from shallot.core.errors import ThemeSpecError
from shallot.core.hsl import HSLColor
from shallot.core.palette import ColorMode, ColorScheme
from shallot.core.presets import (
    MIDNIGHT,
    OCEAN,
    get_theme_preset,
    iter_presets,
    list_presets,
)


class TestPresetRegistry:
    """Tests for preset lookup."""

    def test_list_presets(self):
        presets = list_presets()
        assert presets == ["obsidian", "frost", "ember", "ocean", "forest", "midnight"]

    def test_get_preset(self):
        preset = get_theme_preset("ocean")
        assert preset is OCEAN
        assert preset.seed == HSLColor(200, 90, 50)
        assert preset.mode is ColorMode.DARK

    def test_get_unknown_preset(self):
        assert get_theme_preset("nonexistent") is None

    def test_iter_matches_names(self):
        assert [p.name for p in iter_presets()] == list_presets()

    def test_only_frost_is_light(self):
        light = [p.name for p in iter_presets() if p.mode is ColorMode.LIGHT]
        assert light == ["frost"]

    def test_with_mode(self):
        light = MIDNIGHT.with_mode(ColorMode.LIGHT)
        assert light.mode is ColorMode.LIGHT
        assert light.seed == MIDNIGHT.seed
        assert light.scheme is ColorScheme.TRIADIC
        assert MIDNIGHT.mode is ColorMode.DARK


class TestPresetTokens:
    """Tests for DesignTokens.preset."""

    @pytest.mark.parametrize("name", list_presets())
    def test_every_preset_builds(self, name: str):
        tokens = DesignTokens.preset(name)
        preset = get_theme_preset(name)
        assert preset is not None
        assert tokens.palette.primary == preset.seed
        assert tokens.palette.scheme is preset.scheme
        assert tokens.palette.mode is preset.mode
        assert tokens.palette.primary != tokens.palette.secondary

    def test_same_as_seed_construction(self):
        assert DesignTokens.preset("ocean") == DesignTokens.new(
            OCEAN.seed, OCEAN.scheme, OCEAN.mode
        )

    def test_mode_override(self):
        tokens = DesignTokens.preset("ember", mode=ColorMode.LIGHT)
        assert tokens.palette.mode is ColorMode.LIGHT
        assert tokens.palette.background.l == 98.0

    def test_dark_presets_have_light_text(self):
        tokens = DesignTokens.preset("obsidian")
        assert tokens.palette.text.l > tokens.palette.background.l

    def test_unknown_preset(self):
        with pytest.raises(ThemeSpecError, match="Unknown theme preset 'neon'"):
            DesignTokens.preset("neon")
