"""
Static scale token generators for typography, spacing, radius and shadow.

These scales are not derived from the seed color. Defaults are fixed, so two
themes built with default settings always share the same scale tokens.
All outputs are flat dicts of token name -> CSS value string, each group
under its own name prefix so groups can be merged without collisions.
"""

from __future__ import annotations

from .responsive import Breakpoint


def _fmt(value: float, digits: int = 4) -> str:
    """Format a number without trailing zeros (16.0 -> "16", 0.8 -> "0.8")."""
    text = f"{value:.{digits}f}".rstrip("0").rstrip(".")
    return text or "0"


# =============================================================================
# Typography
# =============================================================================

# Type scale step names and their positions relative to base (0)
_TYPE_STEPS: list[tuple[str, int]] = [
    ("xs", -3),
    ("sm", -2),
    ("base", 0),
    ("lg", 1),
    ("xl", 2),
    ("2xl", 3),
    ("3xl", 4),
    ("4xl", 5),
    ("5xl", 6),
]

FONT_FAMILY_BASE = "'Inter', system-ui, -apple-system, sans-serif"
FONT_FAMILY_HEADING = "'Outfit', system-ui, -apple-system, sans-serif"
FONT_FAMILY_MONO = "'JetBrains Mono', 'Fira Code', monospace"


def generate_type_scale(
    base_size_px: float = 16.0,
    ratio: float = 1.25,
    line_height: float = 1.5,
) -> dict[str, str]:
    """Generate a modular type scale.

    Args:
        base_size_px: Base font size in pixels.
        ratio: Modular scale ratio between adjacent steps.
        line_height: Line height for body text.

    Returns:
        Dict of token names to CSS values (families, rem sizes, line
        heights, letter spacing).
    """
    tokens: dict[str, str] = {
        "font-family-base": FONT_FAMILY_BASE,
        "font-family-heading": FONT_FAMILY_HEADING,
        "font-family-mono": FONT_FAMILY_MONO,
    }

    for name, step in _TYPE_STEPS:
        size_px = base_size_px * (ratio**step)
        size_rem = size_px / 16  # rem relative to the 16px browser default
        tokens[f"font-size-{name}"] = f"{size_rem:.4f}rem"

    tokens["line-height-tight"] = "1.25"
    tokens["line-height-normal"] = _fmt(line_height)
    tokens["line-height-relaxed"] = "1.75"

    tokens["letter-spacing-tight"] = "-0.025em"
    tokens["letter-spacing-normal"] = "0em"
    tokens["letter-spacing-wide"] = "0.025em"

    return tokens


# =============================================================================
# Spacing
# =============================================================================


def generate_spacing_scale(
    base_unit_px: float = 4.0,
    ratio: float = 1.5,
    steps: int = 12,
) -> dict[str, str]:
    """Generate a geometric spacing scale.

    Args:
        base_unit_px: Size of step 0 in pixels.
        ratio: Growth factor between steps.
        steps: Number of steps (spacing-0 .. spacing-{steps-1}).

    Returns:
        Dict of token names to CSS values (px).
    """
    tokens: dict[str, str] = {}
    for i in range(steps):
        px = base_unit_px * (ratio**i)
        tokens[f"spacing-{i}"] = f"{_fmt(px, 2)}px"
    return tokens


# =============================================================================
# Shape
# =============================================================================

_RADIUS_STEPS: list[tuple[str, int]] = [
    ("base", 1),
    ("md", 2),
    ("lg", 3),
    ("xl", 4),
    ("2xl", 5),
    ("3xl", 6),
]


def generate_radius_scale(
    base_radius_px: float = 4.0,
    factor: float = 1.414,
) -> dict[str, str]:
    """Generate border radius tokens.

    Args:
        base_radius_px: The ``sm`` radius in pixels.
        factor: Growth factor between radius steps.

    Returns:
        Dict of token names to CSS values (px).
    """
    tokens: dict[str, str] = {
        "radius-none": "0px",
        "radius-sm": f"{_fmt(base_radius_px, 2)}px",
    }
    for name, power in _RADIUS_STEPS:
        tokens[f"radius-{name}"] = f"{_fmt(base_radius_px * factor**power, 2)}px"
    tokens["radius-full"] = "9999px"
    return tokens


def generate_shadow_scale(intensity: float = 0.1) -> dict[str, str]:
    """Generate box-shadow tokens.

    Args:
        intensity: Base shadow alpha; larger steps multiply it.

    Returns:
        Dict of token names to CSS values.
    """

    def alpha(mult: float) -> str:
        return _fmt(intensity * mult, 3)

    return {
        "shadow-sm": f"0 1px 2px 0 rgba(0, 0, 0, {alpha(1)})",
        "shadow-base": (
            f"0 1px 3px 0 rgba(0, 0, 0, {alpha(1.5)}), 0 1px 2px -1px rgba(0, 0, 0, {alpha(1)})"
        ),
        "shadow-md": (
            f"0 4px 6px -1px rgba(0, 0, 0, {alpha(2)}), "
            f"0 2px 4px -2px rgba(0, 0, 0, {alpha(1.5)})"
        ),
        "shadow-lg": (
            f"0 10px 15px -3px rgba(0, 0, 0, {alpha(2.5)}), "
            f"0 4px 6px -4px rgba(0, 0, 0, {alpha(2)})"
        ),
        "shadow-xl": (
            f"0 20px 25px -5px rgba(0, 0, 0, {alpha(3)}), "
            f"0 8px 10px -6px rgba(0, 0, 0, {alpha(2.5)})"
        ),
        "shadow-2xl": f"0 25px 50px -12px rgba(0, 0, 0, {alpha(4)})",
        "shadow-inner": f"inset 0 2px 4px 0 rgba(0, 0, 0, {alpha(2)})",
        "shadow-none": "none",
    }


# =============================================================================
# Breakpoints
# =============================================================================


def generate_breakpoint_tokens() -> dict[str, str]:
    """Expose breakpoint min widths as tokens (breakpoint-md -> 768px)."""
    return {f"breakpoint-{bp.label}": f"{bp.min_width()}px" for bp in Breakpoint}
