"""
ThemeSpec YAML IR types for declarative theme configuration.

Defines the structure of themespec.yaml. A ThemeSpecYAML holds the seed
color, scheme and scale settings that DesignTokens is built from.

Sections: preset, seed, typography, spacing, radius, shadow.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..hsl import HSLColor
from ..palette import ColorMode, ColorScheme
from ..presets import get_theme_preset, list_presets

# =============================================================================
# Seed color
# =============================================================================

# Default brand seed: hsl(312, 35%, 33%)
DEFAULT_SEED_HUE = 312.0
DEFAULT_SEED_SATURATION = 35.0
DEFAULT_SEED_LIGHTNESS = 33.0


class SeedColorSpec(BaseModel):
    """Seed color, given either as HSL components or as a hex string."""

    model_config = ConfigDict(frozen=True)

    h: float = Field(default=DEFAULT_SEED_HUE, description="Hue in degrees")
    s: float = Field(default=DEFAULT_SEED_SATURATION, ge=0.0, le=100.0, description="Saturation %")
    l: float = Field(  # noqa: E741
        default=DEFAULT_SEED_LIGHTNESS, ge=0.0, le=100.0, description="Lightness %"
    )
    hex: str | None = Field(
        default=None,
        pattern=r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$",
        description="Hex color; takes precedence over h/s/l when set",
    )

    def to_color(self) -> HSLColor:
        if self.hex:
            return HSLColor.from_hex(self.hex)
        return HSLColor(self.h, self.s, self.l)


# =============================================================================
# Scales
# =============================================================================


class TypographySpec(BaseModel):
    """Typography specification using a modular scale."""

    model_config = ConfigDict(frozen=True)

    base_size_px: float = Field(default=16.0, ge=8.0, le=32.0, description="Base font size")
    ratio: float = Field(default=1.25, ge=1.0, le=2.0, description="Modular scale ratio")
    line_height: float = Field(default=1.5, ge=1.0, le=3.0, description="Body line height")


class SpacingSpec(BaseModel):
    """Geometric spacing scale."""

    model_config = ConfigDict(frozen=True)

    base_unit_px: float = Field(default=4.0, ge=1.0, le=16.0, description="Step 0 size")
    ratio: float = Field(default=1.5, ge=1.0, le=3.0, description="Growth factor per step")


class RadiusSpec(BaseModel):
    """Border radius scale."""

    model_config = ConfigDict(frozen=True)

    base_radius_px: float = Field(default=4.0, ge=0.0, le=32.0, description="The sm radius")
    factor: float = Field(default=1.414, ge=1.0, le=3.0, description="Growth factor per step")


class ShadowSpec(BaseModel):
    """Shadow depth."""

    model_config = ConfigDict(frozen=True)

    intensity: float = Field(default=0.1, ge=0.0, le=0.25, description="Base shadow alpha")


# =============================================================================
# Root Model
# =============================================================================

# Lowercase namespace for CSS variable names, no leading digit or trailing dash
PREFIX_PATTERN = r"^[a-z]([a-z0-9-]*[a-z0-9])?$"


class ThemeSpecYAML(BaseModel):
    """Root ThemeSpec YAML configuration.

    Drives deterministic token generation: the same file always produces
    the same CSS. When ``preset`` is set it supplies the seed, scheme and
    mode; any of those written out explicitly still wins over the preset.
    """

    model_config = ConfigDict(frozen=True)

    preset: str | None = Field(default=None, description="Named theme preset")
    seed: SeedColorSpec = Field(default_factory=SeedColorSpec, description="Seed color")
    scheme: ColorScheme = Field(default=ColorScheme.MONOCHROMATIC, description="Color scheme")
    mode: ColorMode = Field(default=ColorMode.LIGHT, description="Light or dark surfaces")
    prefix: str = Field(
        default="sh",
        pattern=PREFIX_PATTERN,
        description="Namespace for CSS variable names",
    )
    typography: TypographySpec = Field(default_factory=TypographySpec)
    spacing: SpacingSpec = Field(default_factory=SpacingSpec)
    radius: RadiusSpec = Field(default_factory=RadiusSpec)
    shadow: ShadowSpec = Field(default_factory=ShadowSpec)

    @field_validator("preset")
    @classmethod
    def _preset_is_known(cls, value: str | None) -> str | None:
        if value is not None and get_theme_preset(value) is None:
            raise ValueError(
                f"Unknown theme preset '{value}'. Available: {', '.join(list_presets())}"
            )
        return value

    def palette_inputs(self) -> tuple[HSLColor, ColorScheme, ColorMode]:
        """Resolve (seed, scheme, mode), layering explicit fields over the preset."""
        preset = get_theme_preset(self.preset) if self.preset else None
        if preset is None:
            return self.seed.to_color(), self.scheme, self.mode

        explicit = self.model_fields_set
        seed = self.seed.to_color() if "seed" in explicit else preset.seed
        scheme = self.scheme if "scheme" in explicit else preset.scheme
        mode = self.mode if "mode" in explicit else preset.mode
        return seed, scheme, mode
