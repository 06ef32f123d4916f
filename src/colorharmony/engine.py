from __future__ import annotations

"""Color conversion engine for sRGB, HSL, CMYK and CIE Lab.

This module defines the :class:`ColorEngine` protocol and a default
implementation. All conversions are pure functions of their arguments;
sRGB channels are floats in [0, 1], HSL saturation/lightness and CMYK
components are percentages in [0, 100], hue is in degrees [0, 360).
"""

import math
from typing import Protocol, Tuple


SRGB = Tuple[float, float, float]
HSL = Tuple[float, float, float]
CMYK = Tuple[float, float, float, float]
LAB = Tuple[float, float, float]

# D65 reference white for XYZ -> Lab (XYZ scaled to 0..100)
_REF_X, _REF_Y, _REF_Z = 95.047, 100.0, 108.883
_LAB_EPSILON = 0.008856
_LAB_KAPPA = 7.787


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def normalize_hue(self, h: float) -> float: ...

    def srgb_to_hsl(self, r: float, g: float, b: float) -> HSL: ...

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB: ...

    def srgb_to_cmyk(self, r: float, g: float, b: float) -> CMYK: ...

    def cmyk_to_srgb(self, c: float, m: float, y: float, k: float) -> SRGB: ...

    def srgb_to_lab(self, r: float, g: float, b: float) -> LAB: ...

    def relative_luminance(self, r: float, g: float, b: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on sRGB (D65)."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        h_norm = (h % 360.0 + 360.0) % 360.0
        # -1e-17 % 360.0 rounds up to exactly 360.0
        return 0.0 if h_norm >= 360.0 else h_norm

    def srgb_to_hsl(self, r: float, g: float, b: float) -> HSL:
        """Convert sRGB in [0, 1] to HSL (h in degrees, s/l in percent).

        Hue is undefined for achromatic colors and reported as 0.
        """
        cmax = max(r, g, b)
        cmin = min(r, g, b)
        delta = cmax - cmin
        l = (cmax + cmin) / 2.0
        if delta < 1e-12:
            return (0.0, 0.0, l * 100.0)

        denom = 1.0 - abs(2.0 * l - 1.0)
        s = 0.0 if denom < 1e-12 else min(1.0, delta / denom)
        if cmax == r:
            h = 60.0 * (((g - b) / delta) % 6.0)
        elif cmax == g:
            h = 60.0 * ((b - r) / delta + 2.0)
        else:
            h = 60.0 * ((r - g) / delta + 4.0)
        return (self.normalize_hue(h), s * 100.0, l * 100.0)

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB:
        """Convert HSL (h in degrees, s/l in percent) to sRGB in [0, 1]."""
        h = self.normalize_hue(h)
        s = _clamp(s, 0.0, 100.0) / 100.0
        l = _clamp(l, 0.0, 100.0) / 100.0
        if s == 0.0:
            return (l, l, l)

        c = (1.0 - abs(2.0 * l - 1.0)) * s
        x = c * (1.0 - abs((h / 60.0) % 2.0 - 1.0))
        m = l - c / 2.0
        sector = int(h // 60.0) % 6
        if sector == 0:
            r_p, g_p, b_p = c, x, 0.0
        elif sector == 1:
            r_p, g_p, b_p = x, c, 0.0
        elif sector == 2:
            r_p, g_p, b_p = 0.0, c, x
        elif sector == 3:
            r_p, g_p, b_p = 0.0, x, c
        elif sector == 4:
            r_p, g_p, b_p = x, 0.0, c
        else:
            r_p, g_p, b_p = c, 0.0, x
        return (_clamp01(r_p + m), _clamp01(g_p + m), _clamp01(b_p + m))

    def srgb_to_cmyk(self, r: float, g: float, b: float) -> CMYK:
        """Convert sRGB in [0, 1] to CMYK percentages.

        Pure black maps to (0, 0, 0, 100).
        """
        k = 1.0 - max(r, g, b)
        if k >= 1.0 - 1e-12:
            return (0.0, 0.0, 0.0, 100.0)
        c = (1.0 - r - k) / (1.0 - k)
        m = (1.0 - g - k) / (1.0 - k)
        y = (1.0 - b - k) / (1.0 - k)
        return (c * 100.0, m * 100.0, y * 100.0, k * 100.0)

    def cmyk_to_srgb(self, c: float, m: float, y: float, k: float) -> SRGB:
        """Convert CMYK percentages to sRGB in [0, 1]."""
        k_n = _clamp(k, 0.0, 100.0) / 100.0
        r = (1.0 - _clamp(c, 0.0, 100.0) / 100.0) * (1.0 - k_n)
        g = (1.0 - _clamp(m, 0.0, 100.0) / 100.0) * (1.0 - k_n)
        b = (1.0 - _clamp(y, 0.0, 100.0) / 100.0) * (1.0 - k_n)
        return (r, g, b)

    def srgb_to_lab(self, r: float, g: float, b: float) -> LAB:
        """Convert sRGB in [0, 1] to CIE L*a*b* (D65)."""
        rl, gl, bl = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)

        x = (rl * 0.4124564 + gl * 0.3575761 + bl * 0.1804375) * 100.0
        y = (rl * 0.2126729 + gl * 0.7151522 + bl * 0.0721750) * 100.0
        z = (rl * 0.0193339 + gl * 0.1191920 + bl * 0.9503041) * 100.0

        fx = _lab_f(x / _REF_X)
        fy = _lab_f(y / _REF_Y)
        fz = _lab_f(z / _REF_Z)
        return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))

    def relative_luminance(self, r: float, g: float, b: float) -> float:
        """WCAG relative luminance of an sRGB color."""
        return (
            0.2126 * _srgb_to_linear(r)
            + 0.7152 * _srgb_to_linear(g)
            + 0.0722 * _srgb_to_linear(b)
        )


def contrast_ratio(lum1: float, lum2: float) -> float:
    """WCAG contrast ratio between two relative luminances (1..21)."""
    hi, lo = (lum1, lum2) if lum1 >= lum2 else (lum2, lum1)
    return (hi + 0.05) / (lo + 0.05)


def _srgb_to_linear(c: float) -> float:
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _lab_f(t: float) -> float:
    if t > _LAB_EPSILON:
        return math.copysign(abs(t) ** (1.0 / 3.0), t)
    return _LAB_KAPPA * t + 16.0 / 116.0


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))
