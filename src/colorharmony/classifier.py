from __future__ import annotations

"""Pairwise harmony classification.

This module defines :class:`HarmonyType`, :class:`HarmonyQuality` and
:class:`HarmonyResult`, and the deterministic :func:`calculate_harmony`
that scores how well two colors relate on the hue wheel.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .color_types import Color


# Below this many percent saturation a color has no meaningful hue.
ACHROMATIC_SATURATION = 10.0
# Two colors this dark read as the same near-black whatever their hue.
NEAR_BLACK_LIGHTNESS = (5.0, 10.0)
# A type is only reported when the score clears this value.
MIN_CONFIDENCE = 0.5


class HarmonyType(Enum):
    """Geometric hue relationship between two colors."""

    MONOCHROMATIC = "Monochromatic"
    ANALOGOUS = "Analogous"
    TRIADIC = "Triadic"
    SPLIT_COMPLEMENTARY = "Split-Complementary"
    COMPLEMENTARY = "Complementary"

    @property
    def degrees(self) -> float:
        """Canonical hue delta of the relationship."""
        return _CANONICAL[self][0]

    @property
    def tolerance(self) -> float:
        """Half-width of the window around :attr:`degrees` that still matches."""
        return _CANONICAL[self][1]

    @property
    def description(self) -> str:
        return _CANONICAL[self][2]


_CANONICAL = {
    HarmonyType.MONOCHROMATIC: (
        0.0,
        15.0,
        "Colors with the same hue but different saturation/lightness",
    ),
    HarmonyType.ANALOGOUS: (30.0, 15.0, "Colors adjacent on the color wheel"),
    HarmonyType.TRIADIC: (120.0, 15.0, "Three colors equally spaced around the color wheel"),
    HarmonyType.SPLIT_COMPLEMENTARY: (
        150.0,
        10.0,
        "A color and the two neighbors of its complement",
    ),
    HarmonyType.COMPLEMENTARY: (180.0, 20.0, "Colors opposite on the color wheel"),
}


class HarmonyQuality(Enum):
    """Coarse verbal grade of a harmony score."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    DECENT = "Decent"
    POOR = "Poor"
    CLASH = "Clash"

    @classmethod
    def for_score(cls, score: float) -> "HarmonyQuality":
        if score >= 0.8:
            return cls.EXCELLENT
        if score >= 0.65:
            return cls.GOOD
        if score >= 0.5:
            return cls.DECENT
        if score >= 0.3:
            return cls.POOR
        return cls.CLASH


_QUALITY_PHRASES = {
    HarmonyQuality.EXCELLENT: "These colors create an excellent harmony",
    HarmonyQuality.GOOD: "These colors work well together",
    HarmonyQuality.DECENT: "These colors create a decent combination",
    HarmonyQuality.POOR: "These colors may create visual tension",
    HarmonyQuality.CLASH: "These colors create significant visual conflict",
}


@dataclass(frozen=True)
class HarmonyResult:
    """Outcome of :func:`calculate_harmony`.

    Attributes
    ----------
    score:
        Value in [0, 1]; 1 is a perfect harmonic relationship.
    type:
        Recognized relationship, or ``None`` when no pattern clears
        :data:`MIN_CONFIDENCE`.
    description:
        Human readable summary. Not part of equality.
    """

    score: float
    type: Optional[HarmonyType]
    description: str = field(default="", compare=False)

    @property
    def quality(self) -> HarmonyQuality:
        return HarmonyQuality.for_score(self.score)


def hue_delta(h1: float, h2: float) -> float:
    """Absolute circular hue difference folded to [0, 180]."""
    d = abs(h1 - h2) % 360.0
    return 360.0 - d if d > 180.0 else d


def calculate_harmony(color1: Color, color2: Color) -> HarmonyResult:
    """Score and classify the relationship between two colors.

    Identical inputs always yield identical results; nothing here is random.
    """
    if color1.rgb == color2.rgb:
        return HarmonyResult(
            1.0, HarmonyType.MONOCHROMATIC, "Identical colors create perfect harmony."
        )

    hsl1 = color1.hsl
    hsl2 = color2.hsl
    if _near_black_pair(hsl1[2], hsl2[2]):
        return HarmonyResult(
            0.95,
            HarmonyType.MONOCHROMATIC,
            "Very similar dark colors form a very close monochromatic pair.",
        )

    achromatic1 = is_achromatic(hsl1)
    achromatic2 = is_achromatic(hsl2)

    if achromatic1 and achromatic2:
        score, text = _neutral_pair_score(hsl1[2], hsl2[2])
        return HarmonyResult(score, HarmonyType.MONOCHROMATIC, text)
    if achromatic1 or achromatic2:
        return HarmonyResult(
            0.7,
            None,
            "Pairing a color with a neutral creates a subtle, sophisticated look.",
        )

    d = hue_delta(hsl1[0], hsl2[0])
    matched = _match_window(d)
    if matched is not None:
        harmony_type, deviation = matched
        angular = 1.0 - 0.3 * deviation
        compat = 1.0 - (abs(hsl1[1] - hsl2[1]) + abs(hsl1[2] - hsl2[2])) / 200.0
        score = angular * (0.9 + 0.1 * compat)
    else:
        harmony_type = None
        score = 0.5 * (1.0 - min(_window_excess(d), 45.0) / 45.0)
        score -= _clash_penalty(hsl1, hsl2, d)

    score = min(max(score, 0.0), 1.0)
    final_type = harmony_type if score >= MIN_CONFIDENCE else None
    return HarmonyResult(score, final_type, _describe(score, final_type))


def is_achromatic(hsl: Tuple[float, float, float]) -> bool:
    """True when an HSL triple is too gray to carry a hue."""
    return hsl[1] < ACHROMATIC_SATURATION


def _near_black_pair(l1: float, l2: float) -> bool:
    darkest, limit = NEAR_BLACK_LIGHTNESS
    return min(l1, l2) < darkest and max(l1, l2) < limit


def _neutral_pair_score(l1: float, l2: float) -> Tuple[float, str]:
    lo, hi = min(l1, l2), max(l1, l2)
    if lo < 5.0 and hi > 90.0:
        return 0.85, "High contrast black and white create a classic monochromatic pair."
    if lo < 25.0 and hi > 75.0:
        return 0.8, "These contrasting grays form a subtle monochromatic palette."
    if hi - lo < 30.0:
        return 0.6, "Similar grays provide a subtle monochromatic scheme but have limited contrast."
    return 0.7, "These neutrals form a quiet monochromatic palette."


def _match_window(d: float) -> Optional[Tuple[HarmonyType, float]]:
    """Closest type whose window contains ``d`` and its normalized deviation."""
    candidates: List[Tuple[float, HarmonyType]] = []
    for t in HarmonyType:
        dev = abs(d - t.degrees)
        if dev <= t.tolerance:
            candidates.append((dev / t.tolerance, t))
    if not candidates:
        return None
    best_dev, best_type = min(candidates, key=lambda c: c[0])
    return best_type, best_dev


def _window_excess(d: float) -> float:
    return min(abs(d - t.degrees) - t.tolerance for t in HarmonyType)


def _clash_penalty(
    hsl1: Tuple[float, float, float],
    hsl2: Tuple[float, float, float],
    d: float,
) -> float:
    h1, s1, l1 = hsl1
    h2, s2, l2 = hsl2
    penalty = 0.0

    # neon against neon
    if s1 > 85 and l1 > 60 and s2 > 85 and l2 > 60:
        penalty += 0.2
    # two heavy darks
    if l1 < 30 and s1 > 20 and l2 < 30 and s2 > 20:
        penalty += 0.2
    # equal intensity with clashing hues vibrates
    if abs(l1 - l2) < 20 and abs(s1 - s2) < 20 and s1 > 50 and s2 > 50 and 70 < d < 160:
        penalty += 0.3
    # cool against warm outside the complementary range
    cool1 = 180 < h1 < 300 and s1 > 30
    warm1 = (h1 < 60 or h1 > 300) and s1 > 30
    cool2 = 180 < h2 < 300 and s2 > 30
    warm2 = (h2 < 60 or h2 > 300) and s2 > 30
    if ((cool1 and warm2) or (warm1 and cool2)) and not 150 < d <= 180:
        penalty += 0.15
    # washed out and close in lightness
    if abs(l1 - l2) < 30 and s1 < 20 and s2 < 20:
        penalty += 0.1
    return penalty


def _describe(score: float, harmony_type: Optional[HarmonyType]) -> str:
    phrase = _QUALITY_PHRASES[HarmonyQuality.for_score(score)]
    if harmony_type is None:
        return phrase + "."
    return (
        f"{phrase} using a {harmony_type.value.lower()} relationship. "
        f"{harmony_type.description}."
    )


__all__ = [
    "HarmonyType",
    "HarmonyQuality",
    "HarmonyResult",
    "MIN_CONFIDENCE",
    "calculate_harmony",
    "hue_delta",
    "is_achromatic",
]
