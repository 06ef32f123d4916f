from __future__ import annotations

"""Core color type used by the colorharmony engine.

:class:`Color` is an immutable value holding normalized sRGB channels and
an alpha. Every other representation (HSL, CMYK, hex, 8-bit RGB, CIE Lab)
is a view computed on demand through a :class:`~colorharmony.engine.ColorEngine`.
"""

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .difference import delta_e_2000
from .engine import ColorEngine, DefaultColorEngine
from .errors import InvalidFormatError


_HEX_DIGITS = re.compile(r"[0-9a-fA-F]+")
_ENGINE = DefaultColorEngine()


@dataclass(frozen=True)
class Color:
    """Concrete color in normalized sRGB.

    Attributes
    ----------
    r, g, b:
        sRGB channels in [0, 1].
    alpha:
        Opacity in [0, 1]. Ignored by every color-space view except the
        alpha slot of :meth:`to_hsl` / :meth:`to_cmyk`.
    """

    r: float
    g: float
    b: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "alpha"):
            v = float(getattr(self, name))
            if not math.isfinite(v) or not (0.0 <= v <= 1.0):
                raise ValueError(f"{name} must be in [0, 1], got {v!r}.")
            object.__setattr__(self, name, v)

    # --- constructors ---
    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Create a Color from ``RGB``, ``RRGGBB`` or ``AARRGGBB`` hex digits.

        A leading ``#`` and surrounding whitespace are accepted.

        Raises
        ------
        InvalidFormatError
            When ``text`` is not a string of 3, 6 or 8 hex digits.
        """
        if not isinstance(text, str):
            raise InvalidFormatError(f"hex color must be a string, got {type(text).__name__}")
        t = text.strip()
        if t.startswith("#"):
            t = t[1:]
        if len(t) not in (3, 6, 8) or _HEX_DIGITS.fullmatch(t) is None:
            raise InvalidFormatError(
                f"invalid hex color: {text!r} (expected RGB, RRGGBB or AARRGGBB)"
            )
        if len(t) == 3:
            r, g, b = (int(ch, 16) * 17 for ch in t)
            a = 255
        elif len(t) == 6:
            r, g, b = int(t[0:2], 16), int(t[2:4], 16), int(t[4:6], 16)
            a = 255
        else:
            a = int(t[0:2], 16)
            r, g, b = int(t[2:4], 16), int(t[4:6], 16), int(t[6:8], 16)
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int, alpha: float = 1.0) -> "Color":
        """Create a Color from 8-bit channels."""
        return cls(r / 255.0, g / 255.0, b / 255.0, alpha)

    @classmethod
    def from_hsl(
        cls,
        h: float,
        s: float,
        l: float,
        alpha: float = 1.0,
        engine: Optional[ColorEngine] = None,
    ) -> "Color":
        """Create a Color from HSL.

        Parameters
        ----------
        h:
            Hue in degrees; normalized into [0, 360).
        s, l:
            Saturation and lightness in percent, clamped into [0, 100].
        """
        if engine is None:
            engine = _ENGINE
        r, g, b = engine.hsl_to_srgb(h, s, l)
        return cls(r, g, b, alpha)

    @classmethod
    def from_cmyk(
        cls,
        c: float,
        m: float,
        y: float,
        k: float,
        alpha: float = 1.0,
        engine: Optional[ColorEngine] = None,
    ) -> "Color":
        """Create a Color from CMYK percentages."""
        if engine is None:
            engine = _ENGINE
        r, g, b = engine.cmyk_to_srgb(c, m, y, k)
        return cls(r, g, b, alpha)

    # --- views ---
    @property
    def rgb(self) -> Tuple[float, float, float]:
        return (self.r, self.g, self.b)

    @property
    def hsl(self) -> Tuple[float, float, float]:
        """Unrounded HSL as (h, s, l); h in [0, 360), s/l in [0, 100]."""
        return _ENGINE.srgb_to_hsl(self.r, self.g, self.b)

    def to_hsl(self) -> Tuple[int, int, int, int]:
        """Return (hue 0-359, saturation 0-100, lightness 0-100, alpha 0-100)."""
        h, s, l = self.hsl
        return (int(round(h)) % 360, int(round(s)), int(round(l)), int(round(self.alpha * 100)))

    def to_cmyk(self) -> Tuple[int, int, int, int, int]:
        """Return (cyan, magenta, yellow, key, alpha), each 0-100."""
        c, m, y, k = _ENGINE.srgb_to_cmyk(self.r, self.g, self.b)
        return (
            int(round(c)),
            int(round(m)),
            int(round(y)),
            int(round(k)),
            int(round(self.alpha * 100)),
        )

    def to_rgb(self) -> Tuple[int, int, int]:
        """Return 8-bit (red, green, blue)."""
        return (
            int(round(self.r * 255)),
            int(round(self.g * 255)),
            int(round(self.b * 255)),
        )

    def to_hex(self) -> str:
        """Return ``RRGGBB`` in uppercase, without ``#``."""
        r, g, b = self.to_rgb()
        return f"{r:02X}{g:02X}{b:02X}"

    def to_lab(self) -> Tuple[float, float, float]:
        """Return CIE L*a*b* (D65)."""
        return _ENGINE.srgb_to_lab(self.r, self.g, self.b)

    @property
    def luminance(self) -> float:
        """WCAG relative luminance in [0, 1]."""
        return _ENGINE.relative_luminance(self.r, self.g, self.b)

    # --- helpers ---
    def difference(self, other: "Color") -> float:
        """CIEDE2000 difference to ``other`` (alpha is ignored)."""
        a, b = (self, other) if self.rgb <= other.rgb else (other, self)
        if a.rgb == b.rgb:
            return 0.0
        return float(delta_e_2000(a.to_lab(), b.to_lab()))

    def is_dark(self) -> bool:
        """True when the perceived brightness (Rec. 601 luma) is below 0.5."""
        return 0.299 * self.r + 0.587 * self.g + 0.114 * self.b < 0.5

    def complementary_colors(self) -> List["Color"]:
        """Six colors 60° apart starting at this hue, keeping S/L and alpha."""
        h, s, l = self.hsl
        return [Color.from_hsl(h + 60.0 * i, s, l, self.alpha) for i in range(6)]


def difference(a: Color, b: Color) -> float:
    """Symmetric perceptual difference between two colors."""
    return a.difference(b)


__all__ = ["Color", "difference"]
