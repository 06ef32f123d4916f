from __future__ import annotations

"""High-level palette service.

:class:`PaletteService` is the public entrypoint used by application code.
It coordinates the harmony generator, the category modifier and the
harmony enhancer, and owns the bounded loop that keeps generated palettes
perceptually distinct.

The service holds two pieces of state: an immutable :class:`ServiceConfig`
and the injected ``numpy.random.Generator``. Construct one per caller (or
per thread) and pass it around explicitly.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import numpy as np

from common.settings import get as _get_settings

from .category import PaletteCategory, apply_category
from .color_types import Color
from .difference import delta_e_2000
from .enhancer import enhance_colors
from .errors import DegenerateRequestError, DistinctnessUnsatisfiableError
from .harmony import (
    HarmonyScheme,
    generate_harmonious_palette,
    random_color_in_band,
    sample_from_color_scheme,
)

logger = logging.getLogger(__name__)

_FULL_RANGE = (0.0, 100.0)
_PLEASANT_RANGE = (30.0, 80.0)
_VARIATION_HUE_STEP = 15.0
_VARIATION_SL_JITTER = 10.0


@dataclass(frozen=True)
class ServiceConfig:
    """Tunable parameters of :class:`PaletteService`.

    Attributes
    ----------
    min_difference:
        Minimum CIEDE2000 difference between any two generated colors.
    attempts_per_color:
        Refill attempts allowed per requested color.
    min_attempts:
        Lower bound on refill attempts regardless of the requested count.
    """

    min_difference: float = 15.0
    attempts_per_color: int = 50
    min_attempts: int = 200

    def __post_init__(self) -> None:
        if self.min_difference < 0.0:
            raise ValueError("min_difference must be non-negative.")
        if self.attempts_per_color < 1 or self.min_attempts < 1:
            raise ValueError("attempt limits must be positive.")

    @classmethod
    def from_settings(cls) -> "ServiceConfig":
        """Build a config from the environment-backed settings snapshot."""
        s = _get_settings()
        return cls(
            min_difference=s.MIN_DIFFERENCE,
            attempts_per_color=s.ATTEMPTS_PER_COLOR,
            min_attempts=s.MIN_ATTEMPTS,
        )

    def max_attempts(self, count: int) -> int:
        return max(self.min_attempts, self.attempts_per_color * count)


class PaletteService:
    """Generate, restyle and vary palettes.

    Parameters
    ----------
    rng:
        Random source shared by every stochastic operation of this service.
        If None, a fresh unseeded ``numpy.random.default_rng()`` is used.
    config:
        ServiceConfig to use. If None, :meth:`ServiceConfig.from_settings`.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        config: Optional[ServiceConfig] = None,
    ) -> None:
        self._rng = rng if rng is not None else np.random.default_rng()
        self.config = config if config is not None else ServiceConfig.from_settings()

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    # --- generation ---
    def generate_random_palette(
        self,
        count: int = 5,
        category: PaletteCategory = PaletteCategory.STANDARD,
        scheme: Optional[HarmonyScheme] = None,
    ) -> List[Color]:
        """Generate ``count`` mutually distinct colors from random key colors.

        Raises
        ------
        DegenerateRequestError
            When ``count`` is not positive.
        DistinctnessUnsatisfiableError
            When the refill loop runs out of attempts.
        """
        raw = generate_harmonious_palette((), count, category, self._rng, scheme)
        return self.ensure_distinct(raw, count)

    def generate_palette_from_seed(
        self,
        seed: Color,
        count: int = 5,
        category: PaletteCategory = PaletteCategory.STANDARD,
        scheme: Optional[HarmonyScheme] = None,
    ) -> List[Color]:
        """Like :meth:`generate_random_palette` with ``seed`` as the first key.

        The seed is always the first color of the result.
        """
        raw = generate_harmonious_palette([seed], count, category, self._rng, scheme)
        return self.ensure_distinct(raw, count)

    # --- transformation ---
    def convert_colors_to_category(
        self, colors: Iterable[Color], category: PaletteCategory
    ) -> List[Color]:
        return apply_category(colors, category)

    def enhance_colors_harmony(
        self, colors: Iterable[Color], strength: float = 0.5
    ) -> List[Color]:
        return enhance_colors(colors, strength)

    def generate_variations(
        self, from_colors: Sequence[Color], number_of_variations: int = 3
    ) -> List[List[Color]]:
        """Return the input followed by ``number_of_variations`` re-sampled palettes.

        Up to three leading input colors act as key colors (padded with random
        midrange keys when fewer are given). Variation ``i`` jitters every key
        hue by up to ±15°·i and its saturation/lightness by up to ±10, then
        samples ``len(from_colors)`` colors from the jittered keys.
        """
        if number_of_variations < 0:
            raise DegenerateRequestError("number_of_variations must be non-negative.")

        base = list(from_colors)
        variations: List[List[Color]] = [list(base)]
        if not base:
            return variations + [[] for _ in range(number_of_variations)]

        keys = base[:3]
        while len(keys) < 3:
            keys.append(random_color_in_band(self._rng, _PLEASANT_RANGE, _PLEASANT_RANGE))

        for i in range(1, number_of_variations + 1):
            adjusted = [self._jitter(k, _VARIATION_HUE_STEP * i) for k in keys]
            variation = [
                sample_from_color_scheme(
                    float(self._rng.random()),
                    float(self._rng.random()),
                    adjusted[0],
                    adjusted[1],
                    adjusted[2],
                )
                for _ in base
            ]
            variations.append(variation)
        return variations

    # --- distinctness ---
    def ensure_distinct(self, candidates: Iterable[Color], count: int) -> List[Color]:
        """Filter ``candidates`` for distinctness and refill up to ``count``.

        Candidates are scanned in order; the first is kept unconditionally and
        every later one only if its difference to all kept colors is at least
        ``config.min_difference``. Missing slots are refilled with full-range
        random colors under the same rule, for at most
        ``config.max_attempts(count)`` draws.

        Raises
        ------
        DegenerateRequestError
            When ``count`` is not positive.
        DistinctnessUnsatisfiableError
            When the attempts run out; ``partial`` holds the colors kept.
        """
        if count <= 0:
            raise DegenerateRequestError("count must be positive.")

        kept: List[Color] = []
        kept_labs: List[tuple] = []
        for color in candidates:
            if len(kept) >= count:
                break
            lab = color.to_lab()
            if not kept or self._is_distinct(lab, kept_labs):
                kept.append(color)
                kept_labs.append(lab)

        if len(kept) < count:
            logger.debug("refilling %d of %d palette colors", count - len(kept), count)

        limit = self.config.max_attempts(count)
        attempts = 0
        while len(kept) < count:
            if attempts >= limit:
                logger.warning(
                    "distinctness unsatisfied: %d of %d colors after %d attempts (min ΔE %.1f)",
                    len(kept),
                    count,
                    attempts,
                    self.config.min_difference,
                )
                raise DistinctnessUnsatisfiableError(kept, count, attempts)
            attempts += 1
            candidate = random_color_in_band(self._rng, _FULL_RANGE, _FULL_RANGE)
            lab = candidate.to_lab()
            if self._is_distinct(lab, kept_labs):
                kept.append(candidate)
                kept_labs.append(lab)

        return kept

    def _is_distinct(self, lab: tuple, kept_labs: List[tuple]) -> bool:
        if not kept_labs:
            return True
        diffs = delta_e_2000(lab, np.asarray(kept_labs, dtype=np.float64))
        return bool(np.all(diffs >= self.config.min_difference))

    def _jitter(self, color: Color, max_hue_shift: float) -> Color:
        h, s, l = color.hsl
        h += float(self._rng.uniform(-max_hue_shift, max_hue_shift))
        s = min(100.0, max(0.0, s + float(self._rng.uniform(-_VARIATION_SL_JITTER, _VARIATION_SL_JITTER))))
        l = min(100.0, max(0.0, l + float(self._rng.uniform(-_VARIATION_SL_JITTER, _VARIATION_SL_JITTER))))
        return Color.from_hsl(h, s, l, color.alpha)


__all__ = ["PaletteService", "ServiceConfig"]
