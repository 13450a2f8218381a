"""
Theme configuration IR types.

All types are re-exported from this package.
"""

from .themespec import (
    RadiusSpec,
    SeedColorSpec,
    ShadowSpec,
    SpacingSpec,
    ThemeSpecYAML,
    TypographySpec,
)

__all__ = [
    "RadiusSpec",
    "SeedColorSpec",
    "ShadowSpec",
    "SpacingSpec",
    "ThemeSpecYAML",
    "TypographySpec",
]
