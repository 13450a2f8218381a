"""Core shallot functionality: color math, palettes, responsive values, token serialization."""

from . import ir
from .design_tokens import DesignTokens, tokens_to_css
from .errors import (
    ErrorContext,
    InvalidColorError,
    ShallotError,
    ThemeSpecError,
    TokenCollisionError,
)
from .hsl import HSLColor, contrast_ratio, meets_wcag_aa, meets_wcag_aaa
from .palette import ColorMode, ColorPalette, ColorScheme, ContrastCheck
from .presets import ThemePreset, get_theme_preset, list_presets
from .responsive import (
    AlignItems,
    Breakpoint,
    ContainerConfig,
    FlexConfig,
    FlexDirection,
    FlexWrap,
    GridConfig,
    JustifyContent,
    ResponsiveValue,
)

__all__ = [
    "ir",
    # Errors
    "ShallotError",
    "InvalidColorError",
    "ThemeSpecError",
    "TokenCollisionError",
    "ErrorContext",
    # Color
    "HSLColor",
    "contrast_ratio",
    "meets_wcag_aa",
    "meets_wcag_aaa",
    "ColorScheme",
    "ColorMode",
    "ColorPalette",
    "ContrastCheck",
    # Tokens
    "DesignTokens",
    "tokens_to_css",
    # Presets
    "ThemePreset",
    "get_theme_preset",
    "list_presets",
    # Responsive
    "Breakpoint",
    "ResponsiveValue",
    "ContainerConfig",
    "GridConfig",
    "FlexConfig",
    "FlexDirection",
    "FlexWrap",
    "JustifyContent",
    "AlignItems",
]
