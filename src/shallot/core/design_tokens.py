"""
Design token set: a derived color palette plus static scale tokens.

DesignTokens is built once per theme and never changes afterwards; switching
themes means building a new instance. Serialization is deterministic: keys
are emitted in sorted order, so equal themes produce byte-identical CSS.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from .errors import ThemeSpecError, TokenCollisionError
from .hsl import HSLColor
from .ir.themespec import (
    DEFAULT_SEED_HUE,
    DEFAULT_SEED_LIGHTNESS,
    DEFAULT_SEED_SATURATION,
    PREFIX_PATTERN,
    RadiusSpec,
    ShadowSpec,
    SpacingSpec,
    ThemeSpecYAML,
    TypographySpec,
)
from .palette import ColorMode, ColorPalette, ColorScheme
from .presets import get_theme_preset, list_presets
from .theme_generators import (
    generate_breakpoint_tokens,
    generate_radius_scale,
    generate_shadow_scale,
    generate_spacing_scale,
    generate_type_scale,
)

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = ColorScheme.MONOCHROMATIC


def default_seed() -> HSLColor:
    return HSLColor(DEFAULT_SEED_HUE, DEFAULT_SEED_SATURATION, DEFAULT_SEED_LIGHTNESS)


def tokens_to_css(tokens: dict[str, str], selector: str = ":root") -> str:
    """
    Convert a token dict to a CSS custom property block.

    Args:
        tokens: Variable name (without leading ``--``) -> value mapping.
        selector: Selector that scopes the declarations.

    Returns:
        CSS string, one declaration per line, keys sorted.
    """
    lines = [f"{selector} {{"]
    for key, value in sorted(tokens.items()):
        lines.append(f"  --{key}: {value};")
    lines.append("}")
    return "\n".join(lines)


class DesignTokens(BaseModel):
    """A complete, immutable theme token set."""

    model_config = ConfigDict(frozen=True)

    palette: ColorPalette
    typography: TypographySpec = Field(default_factory=TypographySpec)
    spacing: SpacingSpec = Field(default_factory=SpacingSpec)
    radius: RadiusSpec = Field(default_factory=RadiusSpec)
    shadow: ShadowSpec = Field(default_factory=ShadowSpec)
    prefix: str = Field(
        default="sh", pattern=PREFIX_PATTERN, description="Namespace for variable names"
    )

    @classmethod
    def new(
        cls,
        seed: HSLColor,
        scheme: ColorScheme = DEFAULT_SCHEME,
        mode: ColorMode = ColorMode.LIGHT,
    ) -> DesignTokens:
        """Build tokens from a seed color with default scales."""
        return cls(palette=ColorPalette.from_primary(seed, scheme, mode))

    @classmethod
    def default(cls) -> DesignTokens:
        """The library theme: hsl(312, 35%, 33%), monochromatic, light."""
        return cls.new(default_seed(), DEFAULT_SCHEME)

    @classmethod
    def preset(cls, name: str, mode: ColorMode | None = None) -> DesignTokens:
        """Build tokens from a named preset, optionally forcing light or dark.

        Raises:
            ThemeSpecError: If no preset has that name.
        """
        preset = get_theme_preset(name)
        if preset is None:
            raise ThemeSpecError(
                f"Unknown theme preset '{name}'. Available: {', '.join(list_presets())}"
            )
        if mode is not None:
            preset = preset.with_mode(mode)
        return cls.new(preset.seed, preset.scheme, preset.mode)

    @classmethod
    def from_themespec(cls, spec: ThemeSpecYAML) -> DesignTokens:
        """Build tokens from a loaded theme configuration."""
        seed, scheme, mode = spec.palette_inputs()
        logger.debug(f"Building design tokens (preset={spec.preset}, scheme={scheme}, mode={mode})")
        return cls(
            palette=ColorPalette.from_primary(seed, scheme, mode),
            typography=spec.typography,
            spacing=spec.spacing,
            radius=spec.radius,
            shadow=spec.shadow,
            prefix=spec.prefix,
        )

    def token_groups(self) -> dict[str, dict[str, str]]:
        """Return tokens grouped by kind, keys without the namespace prefix."""
        colors = {
            key.removeprefix(f"{self.prefix}-"): value
            for key, value in self.palette.to_css_variables(self.prefix).items()
        }
        return {
            "color": colors,
            "typography": generate_type_scale(
                self.typography.base_size_px,
                self.typography.ratio,
                self.typography.line_height,
            ),
            "spacing": generate_spacing_scale(self.spacing.base_unit_px, self.spacing.ratio),
            "radius": generate_radius_scale(self.radius.base_radius_px, self.radius.factor),
            "shadow": generate_shadow_scale(self.shadow.intensity),
            "breakpoint": generate_breakpoint_tokens(),
        }

    def to_css_variables(self) -> dict[str, str]:
        """Flatten every group into ``{prefix}-<name>`` -> CSS value.

        Raises:
            TokenCollisionError: If two groups emit the same name.
        """
        variables: dict[str, str] = {}
        for group, tokens in self.token_groups().items():
            for name, value in tokens.items():
                key = f"{self.prefix}-{name}"
                if key in variables:
                    raise TokenCollisionError(f"Token '{key}' from group '{group}' is already defined")
                variables[key] = value
        return dict(sorted(variables.items()))

    def to_css_string(self, selector: str = ":root") -> str:
        return tokens_to_css(self.to_css_variables(), selector)
