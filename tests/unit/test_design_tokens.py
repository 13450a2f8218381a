"""Tests for DesignTokens construction and serialization."""

from __future__ import annotations

import re

import pytest
from pydantic import ValidationError

from shallot.core.design_tokens import DesignTokens, tokens_to_css
from shallot.core.errors import TokenCollisionError
from shallot.core.hsl import HSLColor
from shallot.core.ir.themespec import SeedColorSpec, ThemeSpecYAML, TypographySpec
from shallot.core.palette import ColorMode, ColorPalette, ColorScheme

_DECLARATION = re.compile(r"^  --[a-z0-9-]+: .+;$")


class TestConstruction:
    """new / default / from_themespec."""

    def test_default_seed_and_scheme(self, default_tokens: DesignTokens):
        assert default_tokens.palette.primary == HSLColor(312, 35, 33)
        assert default_tokens.palette.scheme == ColorScheme.MONOCHROMATIC
        assert default_tokens.palette.mode == ColorMode.LIGHT

    def test_new_uses_scheme(self, seed: HSLColor):
        tokens = DesignTokens.new(seed, ColorScheme.COMPLEMENTARY)
        assert tokens.palette.secondary.h == 30.0

    def test_frozen(self, default_tokens: DesignTokens):
        with pytest.raises(ValidationError):
            default_tokens.prefix = "other"  # type: ignore[misc]

    def test_from_themespec(self):
        spec = ThemeSpecYAML(
            seed=SeedColorSpec(hex="#3b82f6"),
            scheme=ColorScheme.TRIADIC,
            mode=ColorMode.DARK,
            prefix="brand",
            typography=TypographySpec(base_size_px=18),
        )
        tokens = DesignTokens.from_themespec(spec)
        variables = tokens.to_css_variables()
        assert tokens.palette.primary.to_hex() == "#3b82f6"
        assert tokens.palette.mode == ColorMode.DARK
        assert all(key.startswith("brand-") for key in variables)
        assert variables["brand-font-size-base"] == "1.1250rem"

    def test_default_themespec_matches_default(self, default_tokens: DesignTokens):
        assert DesignTokens.from_themespec(ThemeSpecYAML()) == default_tokens


class TestCssVariables:
    """Flattened variable map."""

    def test_palette_roles_present(self, default_tokens: DesignTokens):
        variables = default_tokens.to_css_variables()
        assert variables["sh-color-primary"] == "hsl(312.0, 35.0%, 33.0%)"
        assert "sh-color-secondary" in variables
        assert "sh-color-accent" in variables

    def test_no_key_collisions(self, default_tokens: DesignTokens):
        groups = default_tokens.token_groups()
        variables = default_tokens.to_css_variables()
        assert sum(len(tokens) for tokens in groups.values()) == len(variables)

    def test_group_names(self, default_tokens: DesignTokens):
        assert list(default_tokens.token_groups()) == [
            "color",
            "typography",
            "spacing",
            "radius",
            "shadow",
            "breakpoint",
        ]

    def test_static_scale_values(self, default_tokens: DesignTokens):
        variables = default_tokens.to_css_variables()
        assert variables["sh-spacing-0"] == "4px"
        assert variables["sh-spacing-1"] == "6px"
        assert variables["sh-spacing-2"] == "9px"
        assert variables["sh-radius-none"] == "0px"
        assert variables["sh-radius-sm"] == "4px"
        assert variables["sh-radius-base"] == "5.66px"
        assert variables["sh-radius-full"] == "9999px"
        assert variables["sh-font-size-base"] == "1.0000rem"
        assert variables["sh-font-size-lg"] == "1.2500rem"
        assert variables["sh-line-height-normal"] == "1.5"
        assert variables["sh-shadow-none"] == "none"
        assert variables["sh-shadow-sm"] == "0 1px 2px 0 rgba(0, 0, 0, 0.1)"
        assert variables["sh-breakpoint-md"] == "768px"

    def test_scales_independent_of_seed(self):
        a = DesignTokens.new(HSLColor(10, 90, 40), ColorScheme.TRIADIC).to_css_variables()
        b = DesignTokens.new(HSLColor(250, 20, 70)).to_css_variables()
        assert a["sh-color-primary"] != b["sh-color-primary"]
        static_a = {k: v for k, v in a.items() if "color" not in k and "gradient" not in k}
        static_b = {k: v for k, v in b.items() if "color" not in k and "gradient" not in k}
        assert static_a == static_b

    def test_keys_sorted(self, default_tokens: DesignTokens):
        keys = list(default_tokens.to_css_variables())
        assert keys == sorted(keys)

    def test_collision_detected(self, default_tokens: DesignTokens):
        class CollidingTokens(DesignTokens):
            def token_groups(self) -> dict[str, dict[str, str]]:
                return {"a": {"x": "1"}, "b": {"x": "2"}}

        tokens = CollidingTokens(palette=default_tokens.palette)
        with pytest.raises(TokenCollisionError, match="sh-x"):
            tokens.to_css_variables()


class TestCssString:
    """Root-scoped declaration block."""

    def test_two_defaults_identical(self):
        assert DesignTokens.default().to_css_string() == DesignTokens.default().to_css_string()

    def test_block_shape(self, default_tokens: DesignTokens):
        lines = default_tokens.to_css_string().split("\n")
        assert lines[0] == ":root {"
        assert lines[-1] == "}"
        body = lines[1:-1]
        assert len(body) == len(default_tokens.to_css_variables())
        assert all(_DECLARATION.match(line) for line in body)

    def test_contains_primary_declaration(self, default_tokens: DesignTokens):
        assert "  --sh-color-primary: hsl(312.0, 35.0%, 33.0%);" in default_tokens.to_css_string()

    def test_custom_selector(self, default_tokens: DesignTokens):
        css = default_tokens.to_css_string('[data-theme="dark"]')
        assert css.startswith('[data-theme="dark"] {\n')

    def test_tokens_to_css(self):
        assert tokens_to_css({"b": "2", "a": "1"}) == ":root {\n  --a: 1;\n  --b: 2;\n}"


class TestPrefix:
    """The variable namespace must form valid custom property names."""

    @pytest.mark.parametrize("prefix", ["Brand", "1x", "sh-", "my prefix", ""])
    def test_invalid_prefix_rejected(self, seed: HSLColor, prefix: str):
        palette = ColorPalette.from_primary(seed)
        with pytest.raises(ValidationError):
            DesignTokens(palette=palette, prefix=prefix)

    @pytest.mark.parametrize("prefix", ["x", "brand", "my-app2"])
    def test_valid_prefix(self, seed: HSLColor, prefix: str):
        tokens = DesignTokens(palette=ColorPalette.from_primary(seed), prefix=prefix)
        assert f"{prefix}-color-primary" in tokens.to_css_variables()
