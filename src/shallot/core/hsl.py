"""
HSL color values and WCAG contrast math.

HSLColor is an immutable value: every transform returns a new color and
out-of-range input is normalized rather than rejected. Hue wraps into
[0, 360); saturation and lightness clamp into [0, 100].
"""

from __future__ import annotations

import colorsys
import math
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidColorError

RGB = tuple[int, int, int]

# WCAG 2.x thresholds (normal text / large text)
WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0
WCAG_AAA_NORMAL = 7.0
WCAG_AAA_LARGE = 4.5

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _wrap_hue(value: float) -> float:
    if not math.isfinite(value):
        return 0.0
    wrapped = value % 360.0
    # -1e-20 % 360.0 rounds to 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


def _clamp(value: float, low: float, high: float) -> float:
    if math.isnan(value):
        return low
    return max(low, min(high, value))


class HSLColor(BaseModel):
    """A hue/saturation/lightness color.

    Accepts positional arguments, ``HSLColor(312, 35, 33)``, as well as
    keywords. Hue is in degrees, saturation and lightness in percent.
    """

    model_config = ConfigDict(frozen=True)

    h: float = Field(default=0.0, description="Hue in degrees, normalized into [0, 360)")
    s: float = Field(default=0.0, description="Saturation percent, clamped into [0, 100]")
    l: float = Field(default=0.0, description="Lightness percent, clamped into [0, 100]")  # noqa: E741

    def __init__(self, h: float = 0.0, s: float = 0.0, l: float = 0.0) -> None:  # noqa: E741
        super().__init__(h=h, s=s, l=l)

    @field_validator("h")
    @classmethod
    def _normalize_hue(cls, value: float) -> float:
        return _wrap_hue(value)

    @field_validator("s", "l")
    @classmethod
    def _clamp_percent(cls, value: float) -> float:
        return _clamp(value, 0.0, 100.0)

    # -------------------------------------------------------------------------
    # Construction from other notations
    # -------------------------------------------------------------------------

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> HSLColor:
        """Build a color from 0-255 RGB channels (clamped)."""
        rf, gf, bf = (_clamp(float(c), 0.0, 255.0) / 255.0 for c in (r, g, b))
        h, lightness, s = colorsys.rgb_to_hls(rf, gf, bf)
        return cls(h * 360.0, s * 100.0, lightness * 100.0)

    @classmethod
    def from_hex(cls, text: str) -> HSLColor:
        """Parse ``#rgb`` or ``#rrggbb`` (the ``#`` is optional).

        Raises:
            InvalidColorError: If the text is not a hex color.
        """
        match = _HEX_PATTERN.match(text.strip())
        if not match:
            raise InvalidColorError(f"Invalid hex color: {text!r}. Expected #RGB or #RRGGBB")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return cls.from_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def lighten(self, amount: float) -> HSLColor:
        return HSLColor(self.h, self.s, self.l + amount)

    def darken(self, amount: float) -> HSLColor:
        return HSLColor(self.h, self.s, self.l - amount)

    def saturate(self, amount: float) -> HSLColor:
        return HSLColor(self.h, self.s + amount, self.l)

    def desaturate(self, amount: float) -> HSLColor:
        return HSLColor(self.h, self.s - amount, self.l)

    def rotate(self, degrees: float) -> HSLColor:
        """Rotate the hue; negative degrees turn the wheel backwards."""
        return HSLColor(self.h + degrees, self.s, self.l)

    def complement(self) -> HSLColor:
        return self.rotate(180.0)

    def analogous(self, offset: float = 30.0) -> tuple[HSLColor, HSLColor]:
        return self.rotate(-offset), self.rotate(offset)

    def triadic(self) -> tuple[HSLColor, HSLColor]:
        return self.rotate(120.0), self.rotate(240.0)

    def tetradic(self) -> tuple[HSLColor, HSLColor, HSLColor]:
        return self.rotate(90.0), self.rotate(180.0), self.rotate(270.0)

    def split_complementary(self, offset: float = 30.0) -> tuple[HSLColor, HSLColor]:
        return self.rotate(180.0 - offset), self.rotate(180.0 + offset)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_rgb(self) -> RGB:
        """Convert to 0-255 RGB channels."""
        r, g, b = colorsys.hls_to_rgb(self.h / 360.0, self.l / 100.0, self.s / 100.0)
        return round(r * 255), round(g * 255), round(b * 255)

    def to_hex(self) -> str:
        r, g, b = self.to_rgb()
        return f"#{r:02x}{g:02x}{b:02x}"

    def to_css(self) -> str:
        return f"hsl({self.h:.1f}, {self.s:.1f}%, {self.l:.1f}%)"

    def __str__(self) -> str:
        return self.to_css()

    # -------------------------------------------------------------------------
    # Contrast
    # -------------------------------------------------------------------------

    def relative_luminance(self) -> float:
        return relative_luminance(*self.to_rgb())

    def contrast_ratio(self, other: HSLColor) -> float:
        """WCAG contrast ratio against another color (1.0 to 21.0)."""
        l1 = self.relative_luminance()
        l2 = other.relative_luminance()
        lighter = max(l1, l2)
        darker = min(l1, l2)
        return (lighter + 0.05) / (darker + 0.05)

    def meets_wcag_aa(self, other: HSLColor, large_text: bool = False) -> bool:
        threshold = WCAG_AA_LARGE if large_text else WCAG_AA_NORMAL
        return self.contrast_ratio(other) >= threshold

    def meets_wcag_aaa(self, other: HSLColor, large_text: bool = False) -> bool:
        threshold = WCAG_AAA_LARGE if large_text else WCAG_AAA_NORMAL
        return self.contrast_ratio(other) >= threshold


ColorLike = HSLColor | str


def relative_luminance(r: int, g: int, b: int) -> float:
    """
    Calculate relative luminance per WCAG.

    Formula: L = 0.2126 * R + 0.7152 * G + 0.0722 * B
    Where R, G, B are sRGB channels normalized and linearized.
    """

    def linearize(c: int) -> float:
        c_srgb = c / 255
        if c_srgb <= 0.03928:
            return c_srgb / 12.92
        return float(((c_srgb + 0.055) / 1.055) ** 2.4)

    return 0.2126 * linearize(r) + 0.7152 * linearize(g) + 0.0722 * linearize(b)


def to_color(value: ColorLike) -> HSLColor:
    """Coerce a hex string or HSLColor into an HSLColor."""
    if isinstance(value, HSLColor):
        return value
    return HSLColor.from_hex(value)


def contrast_ratio(fg: ColorLike, bg: ColorLike) -> float:
    """
    Calculate WCAG contrast ratio between two colors.

    Args:
        fg: Foreground color (HSLColor or hex string)
        bg: Background color (HSLColor or hex string)

    Returns:
        Contrast ratio (1.0 to 21.0)
    """
    return to_color(fg).contrast_ratio(to_color(bg))


def meets_wcag_aa(fg: ColorLike, bg: ColorLike, large_text: bool = False) -> bool:
    """Check WCAG AA: 4.5:1 for normal text, 3:1 for large text."""
    return to_color(fg).meets_wcag_aa(to_color(bg), large_text=large_text)


def meets_wcag_aaa(fg: ColorLike, bg: ColorLike, large_text: bool = False) -> bool:
    """Check WCAG AAA: 7:1 for normal text, 4.5:1 for large text."""
    return to_color(fg).meets_wcag_aaa(to_color(bg), large_text=large_text)
