"""
shallot - design tokens for server-rendered UI.

Derives a complete, contrast-checked color palette from one seed color,
merges it with static typography/spacing/radius/shadow scales, and
serializes the result as CSS custom properties. Responsive values resolve
per breakpoint with mobile-first fallback.
"""

from __future__ import annotations

from ._version import get_version
from .core import (
    Breakpoint,
    ColorMode,
    ColorPalette,
    ColorScheme,
    DesignTokens,
    HSLColor,
    InvalidColorError,
    ResponsiveValue,
    ShallotError,
    ThemeSpecError,
    contrast_ratio,
    meets_wcag_aa,
    meets_wcag_aaa,
)

__version__ = get_version()

__all__ = [
    "__version__",
    "Breakpoint",
    "ColorMode",
    "ColorPalette",
    "ColorScheme",
    "DesignTokens",
    "HSLColor",
    "InvalidColorError",
    "ResponsiveValue",
    "ShallotError",
    "ThemeSpecError",
    "contrast_ratio",
    "meets_wcag_aa",
    "meets_wcag_aaa",
]
