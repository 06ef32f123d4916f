from __future__ import annotations

"""Hue schemes and harmonious palette sampling.

This module defines :class:`HarmonyScheme`, the hue offsets used to derive
key colors from a first key, and the sampling routine that fills a palette
with colors from the HSL envelope spanned by three key colors.
"""

import math
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .category import PaletteCategory
from .color_types import Color
from .errors import DegenerateRequestError


class HarmonyScheme(Enum):
    """Hue relationships used to derive the second and third key colors."""

    COMPLEMENTARY = auto()
    ANALOGOUS = auto()
    TRIADIC = auto()
    SPLIT_COMPLEMENTARY = auto()
    MONOCHROMATIC = auto()


_CATEGORY_SCHEMES = {
    PaletteCategory.MONOCHROMATIC: HarmonyScheme.MONOCHROMATIC,
    PaletteCategory.ANALOGOUS: HarmonyScheme.ANALOGOUS,
    PaletteCategory.COMPLEMENTARY: HarmonyScheme.COMPLEMENTARY,
    PaletteCategory.TRIADIC: HarmonyScheme.TRIADIC,
    PaletteCategory.SPLIT_COMPLEMENTARY: HarmonyScheme.SPLIT_COMPLEMENTARY,
}


def compute_key_offsets(scheme: HarmonyScheme) -> Tuple[float, float]:
    """Hue offsets (in degrees) of key colors 2 and 3 relative to key color 1."""
    if scheme == HarmonyScheme.COMPLEMENTARY:
        # Third key shares the base hue with a different saturation/lightness.
        return (180.0, 0.0)
    if scheme == HarmonyScheme.ANALOGOUS:
        return (30.0, -30.0)
    if scheme == HarmonyScheme.TRIADIC:
        return (120.0, 240.0)
    if scheme == HarmonyScheme.SPLIT_COMPLEMENTARY:
        return (150.0, 210.0)
    if scheme == HarmonyScheme.MONOCHROMATIC:
        return (0.0, 0.0)

    raise ValueError(f"Unsupported HarmonyScheme: {scheme}")


def scheme_for_category(category: PaletteCategory, rng: np.random.Generator) -> HarmonyScheme:
    """Scheme hinted by ``category``, else one drawn uniformly from all schemes."""
    hinted = _CATEGORY_SCHEMES.get(category)
    if hinted is not None:
        return hinted
    schemes = list(HarmonyScheme)
    return schemes[int(rng.integers(len(schemes)))]


def random_color_in_band(
    rng: np.random.Generator,
    saturation_range: Tuple[float, float],
    lightness_range: Tuple[float, float],
    hue_range: Tuple[float, float] = (0.0, 360.0),
) -> Color:
    """Draw a color with uniform hue, saturation and lightness in the given bands."""
    h = float(rng.uniform(*hue_range))
    s = float(rng.uniform(*saturation_range))
    l = float(rng.uniform(*lightness_range))
    return Color.from_hsl(h, s, l)


def signed_hue_delta(h_from: float, h_to: float) -> float:
    """Shortest signed rotation from ``h_from`` to ``h_to`` in (-180, 180]."""
    d = (h_to - h_from) % 360.0
    return d - 360.0 if d > 180.0 else d


def sample_from_color_scheme(
    r1: float,
    r2: float,
    color1: Color,
    color2: Color,
    color3: Color,
) -> Color:
    """Sample a color from the HSL triangle spanned by three key colors.

    ``r1`` and ``r2`` are independent fractions in [0, 1]. The barycentric
    weights ``(1 - sqrt(r1), sqrt(r1) * (1 - r2), r2 * sqrt(r1))`` are applied
    to saturation, lightness, alpha and to the hues of keys 2 and 3 unwrapped
    relative to key 1, so the result stays inside the keys' envelope.
    """
    r1 = min(max(float(r1), 0.0), 1.0)
    r2 = min(max(float(r2), 0.0), 1.0)
    sr = math.sqrt(r1)
    w1 = 1.0 - sr
    w2 = sr * (1.0 - r2)
    w3 = r2 * sr

    h1, s1, l1 = color1.hsl
    h2, s2, l2 = color2.hsl
    h3, s3, l3 = color3.hsl

    h = h1 + w2 * signed_hue_delta(h1, h2) + w3 * signed_hue_delta(h1, h3)
    s = w1 * s1 + w2 * s2 + w3 * s3
    l = w1 * l1 + w2 * l2 + w3 * l3
    alpha = w1 * color1.alpha + w2 * color2.alpha + w3 * color3.alpha
    return Color.from_hsl(h, s, l, min(max(alpha, 0.0), 1.0))


def generate_harmonious_palette(
    key_colors: Sequence[Color] = (),
    count: int = 5,
    category: PaletteCategory = PaletteCategory.STANDARD,
    rng: Optional[np.random.Generator] = None,
    scheme: Optional[HarmonyScheme] = None,
) -> List[Color]:
    """Generate ``count`` raw palette colors around up to three key colors.

    Parameters
    ----------
    key_colors:
        Zero or more seed colors. The first three act as key colors; any
        further seeds are kept in order right after the keys.
    count:
        Number of colors to return. ``1`` yields just the first key.
    category:
        PaletteCategory whose bands govern random and derived keys and whose
        scheme hint (if any) selects the hue relationship.
    rng:
        Random source. If None, a fresh unseeded generator is used.
    scheme:
        Explicit hue scheme; overrides the category hint.

    Returns
    -------
    list of Color
        Exactly ``count`` colors; keys first, sampled colors after.
    """
    if count <= 0:
        raise DegenerateRequestError("count must be positive.")
    if rng is None:
        rng = np.random.default_rng()

    seeds = list(key_colors)
    sat_range = category.saturation_range
    light_range = category.lightness_range

    key1 = seeds[0] if seeds else random_color_in_band(rng, sat_range, light_range)
    if count == 1:
        return [key1]

    if scheme is None:
        scheme = scheme_for_category(category, rng)
    offsets = compute_key_offsets(scheme)
    base_hue = key1.hsl[0]

    keys = [key1]
    for idx, offset in enumerate(offsets, start=1):
        if idx < len(seeds):
            keys.append(seeds[idx])
        else:
            hue = base_hue + offset
            keys.append(random_color_in_band(rng, sat_range, light_range, (hue, hue)))

    palette = (keys + seeds[3:])[:count]
    while len(palette) < count:
        r1 = float(rng.random())
        r2 = float(rng.random())
        palette.append(sample_from_color_scheme(r1, r2, keys[0], keys[1], keys[2]))
    return palette


__all__ = [
    "HarmonyScheme",
    "compute_key_offsets",
    "scheme_for_category",
    "random_color_in_band",
    "signed_hue_delta",
    "sample_from_color_scheme",
    "generate_harmonious_palette",
]
