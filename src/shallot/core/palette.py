"""
Palette derivation from a single seed color.

A ColorScheme picks which hues the secondary and accent roles take; every
scheme yields the same set of roles. Semantic roles (success, warning,
error, info) sit on fixed hues and only borrow the seed's saturation, so a
theme stays recognisable whatever the brand color is.

Derived lightness values are heuristics. Callers needing guaranteed
legibility should check pairs with ``contrast_report`` or
``HSLColor.meets_wcag_aa``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .hsl import HSLColor

logger = logging.getLogger(__name__)

# =============================================================================
# Enums
# =============================================================================


class ColorScheme(StrEnum):
    """Color-theory strategy used to place secondary and accent hues."""

    MONOCHROMATIC = "monochromatic"
    COMPLEMENTARY = "complementary"
    ANALOGOUS = "analogous"
    TRIADIC = "triadic"
    TETRADIC = "tetradic"
    SPLIT_COMPLEMENTARY = "split_complementary"


class ColorMode(StrEnum):
    """Surface polarity of the palette."""

    LIGHT = "light"
    DARK = "dark"


# =============================================================================
# Semantic role rules
# =============================================================================

# role -> (target hue, baseline saturation, lightness)
_SEMANTIC_ROLES: dict[str, tuple[float, float, float]] = {
    "success": (142.0, 63.0, 40.0),
    "warning": (38.0, 92.0, 50.0),
    "error": (0.0, 78.0, 45.0),
    "info": (217.0, 75.0, 48.0),
}

# Keeps semantic roles readable as "green"/"red" when the seed is near grey
_MIN_SEMANTIC_SATURATION = 35.0

# role -> (saturation cap, lightness) per mode
_SURFACE_TONES: dict[ColorMode, dict[str, tuple[float, float]]] = {
    ColorMode.LIGHT: {
        "neutral": (10.0, 50.0),
        "background": (20.0, 98.0),
        "surface": (10.0, 100.0),
        "border": (10.0, 88.0),
        "text": (10.0, 12.0),
        "text_muted": (6.0, 40.0),
    },
    ColorMode.DARK: {
        "neutral": (10.0, 50.0),
        "background": (15.0, 6.0),
        "surface": (10.0, 12.0),
        "border": (10.0, 22.0),
        "text": (5.0, 96.0),
        "text_muted": (6.0, 70.0),
    },
}

# Roles checked for legibility against a surface
_FOREGROUND_ROLES: tuple[str, ...] = (
    "primary",
    "secondary",
    "accent",
    "success",
    "warning",
    "error",
    "info",
    "text",
    "text_muted",
)

# Roles that also get -light / -dark variants and gradients
_SHADED_ROLES: tuple[str, ...] = ("primary", "secondary", "accent")
_GRADIENT_ROLES: tuple[str, ...] = ("primary", "secondary")


def _scheme_pair(seed: HSLColor, scheme: ColorScheme) -> tuple[HSLColor, HSLColor]:
    """Return (secondary, accent) for a scheme."""
    if scheme == ColorScheme.COMPLEMENTARY:
        return seed.complement(), seed.lighten(20.0)
    if scheme == ColorScheme.ANALOGOUS:
        return seed.analogous(30.0)
    if scheme == ColorScheme.TRIADIC:
        return seed.triadic()
    if scheme == ColorScheme.TETRADIC:
        secondary, accent, _ = seed.tetradic()
        return secondary, accent
    if scheme == ColorScheme.SPLIT_COMPLEMENTARY:
        return seed.split_complementary(30.0)
    # Monochromatic: same hue, vary saturation and lightness only
    return seed.desaturate(20.0), seed.lighten(15.0)


def _semantic_color(seed: HSLColor, role: str) -> HSLColor:
    hue, baseline, lightness = _SEMANTIC_ROLES[role]
    saturation = max((seed.s + baseline) / 2.0, _MIN_SEMANTIC_SATURATION)
    return HSLColor(hue, saturation, lightness)


def _surface_color(seed: HSLColor, role: str, mode: ColorMode) -> HSLColor:
    saturation_cap, lightness = _SURFACE_TONES[mode][role]
    return HSLColor(seed.h, min(seed.s, saturation_cap), lightness)


@dataclass(frozen=True)
class ContrastCheck:
    """Result of checking one palette role against a surface role."""

    role: str
    against: str
    ratio: float
    passes_aa: bool
    passes_aaa: bool


# =============================================================================
# Palette
# =============================================================================


class ColorPalette(BaseModel):
    """Every semantic color role of a theme, derived from one seed."""

    model_config = ConfigDict(frozen=True)

    primary: HSLColor
    secondary: HSLColor
    accent: HSLColor
    success: HSLColor
    warning: HSLColor
    error: HSLColor
    info: HSLColor
    neutral: HSLColor
    background: HSLColor
    surface: HSLColor
    border: HSLColor
    text: HSLColor
    text_muted: HSLColor
    scheme: ColorScheme = Field(default=ColorScheme.MONOCHROMATIC)
    mode: ColorMode = Field(default=ColorMode.LIGHT)

    @classmethod
    def from_primary(
        cls,
        seed: HSLColor,
        scheme: ColorScheme = ColorScheme.MONOCHROMATIC,
        mode: ColorMode = ColorMode.LIGHT,
    ) -> ColorPalette:
        """Derive a full palette from a seed color.

        Args:
            seed: Brand color; becomes the primary role unchanged.
            scheme: Strategy for the secondary and accent hues.
            mode: Light or dark surfaces.

        Returns:
            ColorPalette with every role populated.
        """
        logger.debug(f"Deriving {mode} {scheme} palette from {seed.to_css()}")
        secondary, accent = _scheme_pair(seed, scheme)

        roles: dict[str, HSLColor] = {
            "primary": seed,
            "secondary": secondary,
            "accent": accent,
        }
        for role in _SEMANTIC_ROLES:
            roles[role] = _semantic_color(seed, role)
        for role in _SURFACE_TONES[mode]:
            roles[role] = _surface_color(seed, role, mode)

        return cls(**roles, scheme=scheme, mode=mode)

    def roles(self) -> dict[str, HSLColor]:
        """Return every color role in declaration order."""
        return {
            name: value for name, value in self if isinstance(value, HSLColor)
        }

    def to_css_variables(self, prefix: str = "sh") -> dict[str, str]:
        """Flatten the palette into variable name -> CSS value.

        Keys carry no leading ``--``; ``tokens_to_css`` adds it.
        """
        variables: dict[str, str] = {}

        for role, color in self.roles().items():
            name = role.replace("_", "-")
            variables[f"{prefix}-color-{name}"] = color.to_css()
            if role in _SHADED_ROLES:
                variables[f"{prefix}-color-{name}-light"] = color.lighten(10.0).to_css()
                variables[f"{prefix}-color-{name}-dark"] = color.darken(10.0).to_css()

        for role in _GRADIENT_ROLES:
            color = getattr(self, role)
            variables[f"{prefix}-gradient-{role}"] = (
                f"linear-gradient(135deg, {color.to_css()}, {color.lighten(15.0).to_css()})"
            )

        return variables

    def contrast_report(self, against: str = "surface") -> list[ContrastCheck]:
        """Check each foreground role against a surface role.

        Args:
            against: Name of the role acting as background.

        Returns:
            One ContrastCheck per foreground role (the surface itself excluded).
        """
        background = self.roles()[against]
        checks: list[ContrastCheck] = []
        for role in _FOREGROUND_ROLES:
            if role == against:
                continue
            color: HSLColor = getattr(self, role)
            ratio = color.contrast_ratio(background)
            checks.append(
                ContrastCheck(
                    role=role,
                    against=against,
                    ratio=ratio,
                    passes_aa=color.meets_wcag_aa(background),
                    passes_aaa=color.meets_wcag_aaa(background),
                )
            )
        return checks
