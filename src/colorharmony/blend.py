from __future__ import annotations

"""Lookup of named two-color blends for concrete colors.

A :class:`BlendTable` maps normalized hex keys to :class:`ColorBlend`
records. The mapping is validated once when the table is built, so lookups
never have to deal with malformed entries. No dataset ships with the
package; callers load their own.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

from .color_types import Color
from .difference import delta_e_2000
from .errors import InvalidFormatError

logger = logging.getLogger(__name__)

# Largest CIEDE2000 distance at which the closest entry still counts as a match.
CLOSEST_MATCH_THRESHOLD = 30.0


@dataclass(frozen=True)
class ColorBlend:
    """Two named source colors and the ratio that mixes them."""

    color1: str
    color2: str
    ratio: float

    def describe(self) -> str:
        return f"blend({self.color1}, {self.color2}, ratio={self.ratio:g})"


def _parse_entry(key: str, value: Any) -> Tuple[Color, ColorBlend]:
    color = Color.from_hex(key)
    if not isinstance(value, Mapping):
        raise InvalidFormatError(f"blend entry {key!r} must be a mapping")
    c1 = value.get("color1")
    c2 = value.get("color2")
    ratio = value.get("ratio")
    if not isinstance(c1, str) or not isinstance(c2, str):
        raise InvalidFormatError(f"blend entry {key!r} needs string 'color1' and 'color2'")
    if isinstance(ratio, bool) or not isinstance(ratio, (int, float)):
        raise InvalidFormatError(f"blend entry {key!r} needs a numeric 'ratio'")
    if not (0.0 <= float(ratio) <= 1.0):
        raise InvalidFormatError(f"blend entry {key!r} ratio must be in [0, 1]")
    return color, ColorBlend(c1, c2, float(ratio))


class BlendTable:
    """Validated blend records keyed by uppercase ``RRGGBB``."""

    def __init__(self, entries: Optional[Dict[str, ColorBlend]] = None) -> None:
        self._entries: Dict[str, ColorBlend] = dict(entries or {})
        self._keys: List[str] = list(self._entries)
        if self._keys:
            self._labs = np.asarray(
                [Color.from_hex(k).to_lab() for k in self._keys], dtype=np.float64
            )
        else:
            self._labs = np.empty((0, 3), dtype=np.float64)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "BlendTable":
        """Build a table from ``{hex: {"color1", "color2", "ratio"}}``.

        The mapping may also be wrapped as ``{"colorBlends": {...}}`` next to
        other metadata keys.

        Raises
        ------
        InvalidFormatError
            When any key is not a hex color or any entry is malformed.
        """
        if not isinstance(data, Mapping):
            raise InvalidFormatError("blend data must be a mapping")
        blends = data.get("colorBlends", data)
        if not isinstance(blends, Mapping):
            raise InvalidFormatError("'colorBlends' must be a mapping")

        entries: Dict[str, ColorBlend] = {}
        for key, value in blends.items():
            color, blend = _parse_entry(key, value)
            entries[color.to_hex()] = blend
        logger.debug("loaded %d blend entries", len(entries))
        return cls(entries)

    @classmethod
    def from_json(cls, text: str) -> "BlendTable":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidFormatError(f"blend data is not valid JSON: {e}") from e
        return cls.from_mapping(data)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, color: object) -> bool:
        return isinstance(color, Color) and color.to_hex() in self._entries

    def exact(self, color: Color) -> Optional[ColorBlend]:
        return self._entries.get(color.to_hex())

    def closest(
        self, color: Color, threshold: float = CLOSEST_MATCH_THRESHOLD
    ) -> Optional[ColorBlend]:
        """Nearest entry by CIEDE2000, if it lies strictly within ``threshold``."""
        if not self._keys:
            return None
        dists = np.atleast_1d(delta_e_2000(color.to_lab(), self._labs))
        idx = int(np.argmin(dists))
        if dists[idx] < threshold:
            return self._entries[self._keys[idx]]
        return None

    def describe(self, color: Color, threshold: float = CLOSEST_MATCH_THRESHOLD) -> str:
        """Blend description of ``color``: exact match, closest match, else RGB."""
        blend = self.exact(color)
        if blend is None:
            blend = self.closest(color, threshold)
        if blend is not None:
            return blend.describe()
        return rgb_literal(color)


def rgb_literal(color: Color) -> str:
    r, g, b = color.rgb
    return f"rgb({r:.3f}, {g:.3f}, {b:.3f})"


__all__ = ["CLOSEST_MATCH_THRESHOLD", "BlendTable", "ColorBlend", "rgb_literal"]
