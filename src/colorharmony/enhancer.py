from __future__ import annotations

"""Nudge an existing palette toward stronger internal harmony.

The first chromatic color is the anchor. Every other chromatic color keeps
its side of the wheel but has its hue moved toward the nearest canonical
:class:`~colorharmony.classifier.HarmonyType` angle relative to the anchor,
and its saturation pulled toward the anchor's.
"""

import math
from typing import Iterable, List, Optional

from .classifier import HarmonyType, is_achromatic
from .color_types import Color
from .harmony import signed_hue_delta

# Fraction of the saturation gap closed at strength 1.
SATURATION_PULL = 0.25


def nearest_canonical_angle(delta: float) -> float:
    """Signed canonical harmony angle closest to a signed hue delta."""
    magnitude = abs(delta)
    best = min(HarmonyType, key=lambda t: abs(magnitude - t.degrees))
    return math.copysign(best.degrees, delta)


def enhance_colors(colors: Iterable[Color], strength: float = 0.5) -> List[Color]:
    """Return colors nudged toward harmonic hue angles.

    Parameters
    ----------
    colors:
        Palette to enhance. Order and count are preserved.
    strength:
        0 returns the colors unchanged, 1 snaps hues onto the canonical
        angles.

    Raises
    ------
    ValueError
        When ``strength`` is outside [0, 1].
    """
    if not (0.0 <= strength <= 1.0):
        raise ValueError("strength must be in [0, 1].")

    palette = list(colors)
    if strength == 0.0 or len(palette) < 2:
        return palette

    anchor_idx = _find_anchor(palette)
    if anchor_idx is None:
        return palette

    a_h, a_s, _ = palette[anchor_idx].hsl
    enhanced: List[Color] = []
    for i, color in enumerate(palette):
        hsl = color.hsl
        if i == anchor_idx or is_achromatic(hsl):
            enhanced.append(color)
            continue
        h, s, l = hsl
        delta = signed_hue_delta(a_h, h)
        target = nearest_canonical_angle(delta)
        new_delta = delta + strength * (target - delta)
        new_s = s + SATURATION_PULL * strength * (a_s - s)
        enhanced.append(Color.from_hsl(a_h + new_delta, new_s, l, color.alpha))
    return enhanced


def _find_anchor(colors: List[Color]) -> Optional[int]:
    for i, color in enumerate(colors):
        if not is_achromatic(color.hsl):
            return i
    return None


__all__ = ["SATURATION_PULL", "enhance_colors", "nearest_canonical_angle"]
