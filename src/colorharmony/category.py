from __future__ import annotations

"""Palette categories controlling saturation and lightness bands.

This module defines :class:`PaletteCategory` and helper functions that
remap colors into the saturation/lightness band of a category while
keeping their hue.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from .color_types import Color
from .engine import contrast_ratio

# WCAG AA for normal text, measured against white.
ACCESSIBLE_MIN_CONTRAST = 4.5

Band = Tuple[float, float]


class PaletteCategory(Enum):
    """Stylistic constraint applied to generated or existing palettes."""

    STANDARD = "Balanced"
    PASTEL = "Pastel"
    EARTHY = "Earthy"
    VIBRANT = "Vibrant"
    NEON = "Neon"
    DARK = "Dark"
    LIGHT = "Light"
    NEUTRAL = "Neutral"
    VINTAGE = "Vintage"
    MONOCHROME = "Monochrome"
    ACCESSIBLE = "Accessible"
    # Scheme hints: midrange bands, the generator picks the matching hue scheme.
    MONOCHROMATIC = "Monochromatic"
    ANALOGOUS = "Analogous"
    COMPLEMENTARY = "Complementary"
    TRIADIC = "Triadic"
    SPLIT_COMPLEMENTARY = "Split Complementary"

    @property
    def saturation_range(self) -> Band:
        """Saturation band in percent."""
        return _BANDS.get(self, _MIDRANGE).saturation

    @property
    def lightness_range(self) -> Band:
        """Lightness band in percent."""
        return _BANDS.get(self, _MIDRANGE).lightness


@dataclass(frozen=True)
class _CategoryBand:
    saturation: Band
    lightness: Band


_MIDRANGE = _CategoryBand(saturation=(30.0, 80.0), lightness=(30.0, 80.0))

_BANDS = {
    PaletteCategory.PASTEL: _CategoryBand((20.0, 40.0), (70.0, 90.0)),
    PaletteCategory.EARTHY: _CategoryBand((20.0, 55.0), (30.0, 60.0)),
    PaletteCategory.VIBRANT: _CategoryBand((70.0, 100.0), (40.0, 60.0)),
    PaletteCategory.NEON: _CategoryBand((80.0, 100.0), (60.0, 80.0)),
    PaletteCategory.DARK: _CategoryBand((40.0, 80.0), (5.0, 40.0)),
    PaletteCategory.LIGHT: _CategoryBand((30.0, 70.0), (75.0, 95.0)),
    PaletteCategory.NEUTRAL: _CategoryBand((5.0, 30.0), (40.0, 70.0)),
    PaletteCategory.VINTAGE: _CategoryBand((0.0, 100.0), (20.0, 80.0)),
    PaletteCategory.MONOCHROME: _CategoryBand((0.0, 0.0), (0.0, 100.0)),
    PaletteCategory.ACCESSIBLE: _CategoryBand((30.0, 90.0), (10.0, 90.0)),
}


def _constrain(value: float, band: Band) -> float:
    lo, hi = band
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def adjust_color_to_category(color: Color, category: PaletteCategory) -> Color:
    """Remap one color into the category band, keeping its hue and alpha."""
    if category == PaletteCategory.STANDARD:
        return color

    h, s, l = color.hsl
    s_new = _constrain(s, category.saturation_range)
    l_new = _constrain(l, category.lightness_range)
    if category == PaletteCategory.ACCESSIBLE:
        l_new = _darken_until_readable(h, s_new, l_new)
    return Color.from_hsl(h, s_new, l_new, color.alpha)


def apply_category(colors: Iterable[Color], category: PaletteCategory) -> List[Color]:
    """Apply a category to every color; order and count are preserved.

    Parameters
    ----------
    colors:
        Colors to remap.
    category:
        PaletteCategory whose bands the colors are clamped into.
        ``STANDARD`` is the identity.
    """
    return [adjust_color_to_category(c, category) for c in colors]


def _darken_until_readable(h: float, s: float, l: float) -> float:
    # Lower lightness in 1% steps until white text on the color passes AA.
    while l > 0.0:
        if contrast_ratio(1.0, Color.from_hsl(h, s, l).luminance) >= ACCESSIBLE_MIN_CONTRAST:
            break
        l = max(0.0, l - 1.0)
    return l


__all__ = [
    "PaletteCategory",
    "ACCESSIBLE_MIN_CONTRAST",
    "adjust_color_to_category",
    "apply_category",
]
