"""
Named theme presets.

A preset is a seed color plus the scheme and mode it reads best in. Presets
are plain palette inputs: they go through the same derivation as any other
seed, so a preset theme and a hand-configured theme with the same seed are
identical.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, replace

from .hsl import HSLColor
from .palette import ColorMode, ColorScheme


@dataclass(frozen=True)
class ThemePreset:
    """Palette inputs for a named theme."""

    name: str
    seed: HSLColor
    scheme: ColorScheme
    mode: ColorMode
    description: str = ""

    def with_mode(self, mode: ColorMode) -> ThemePreset:
        """Same seed and scheme on light or dark surfaces."""
        return replace(self, mode=mode)


# =============================================================================
# Presets
# =============================================================================

OBSIDIAN = ThemePreset(
    name="obsidian",
    seed=HSLColor(263, 70, 55),
    scheme=ColorScheme.SPLIT_COMPLEMENTARY,
    mode=ColorMode.DARK,
    description="Violet on near-black",
)

FROST = ThemePreset(
    name="frost",
    seed=HSLColor(210, 100, 50),
    scheme=ColorScheme.ANALOGOUS,
    mode=ColorMode.LIGHT,
    description="Saturated blue on cool white",
)

EMBER = ThemePreset(
    name="ember",
    seed=HSLColor(15, 85, 55),
    scheme=ColorScheme.ANALOGOUS,
    mode=ColorMode.DARK,
    description="Orange-red on warm black",
)

OCEAN = ThemePreset(
    name="ocean",
    seed=HSLColor(200, 90, 50),
    scheme=ColorScheme.ANALOGOUS,
    mode=ColorMode.DARK,
    description="Cyan-blue with teal accents",
)

FOREST = ThemePreset(
    name="forest",
    seed=HSLColor(145, 60, 45),
    scheme=ColorScheme.ANALOGOUS,
    mode=ColorMode.DARK,
    description="Green with teal accents",
)

MIDNIGHT = ThemePreset(
    name="midnight",
    seed=HSLColor(270, 60, 60),
    scheme=ColorScheme.TRIADIC,
    mode=ColorMode.DARK,
    description="Soft purple on deep navy",
)


# =============================================================================
# Theme Registry
# =============================================================================

_THEME_PRESETS: dict[str, ThemePreset] = {
    preset.name: preset for preset in (OBSIDIAN, FROST, EMBER, OCEAN, FOREST, MIDNIGHT)
}


def get_theme_preset(name: str) -> ThemePreset | None:
    """
    Get a theme preset by name.

    Args:
        name: Preset name ("obsidian", "ocean", ...)

    Returns:
        ThemePreset if found, None otherwise
    """
    return _THEME_PRESETS.get(name)


def list_presets() -> list[str]:
    """List available preset names in registration order."""
    return list(_THEME_PRESETS.keys())


def iter_presets() -> Iterator[ThemePreset]:
    return iter(_THEME_PRESETS.values())
