from __future__ import annotations

"""カテゴリ（彩度/明度バンド）への写像テスト。"""

import pytest

from colorharmony import Color, PaletteCategory, adjust_color_to_category, apply_category
from colorharmony.category import ACCESSIBLE_MIN_CONTRAST
from colorharmony.engine import contrast_ratio

SAMPLE = [
    Color.from_hex(h)
    for h in ("FF0000", "808080", "FFEB3B", "1A237E", "00BCD4", "FFFFFF", "000000", "8D6E63")
]
EPS = 1e-6


def test_standard_is_identity() -> None:
    assert apply_category(SAMPLE, PaletteCategory.STANDARD) == SAMPLE


def test_gray_becomes_pastel() -> None:
    out = adjust_color_to_category(Color.from_hex("808080"), PaletteCategory.PASTEL)
    h, s, l, _ = out.to_hsl()
    assert 20 <= s <= 40
    assert 70 <= l <= 90
    assert h == Color.from_hex("808080").to_hsl()[0]


def test_pastel_keeps_hue_of_chromatic_color() -> None:
    src = Color.from_hsl(210.0, 90.0, 40.0)
    out = adjust_color_to_category(src, PaletteCategory.PASTEL)
    assert out.hsl[0] == pytest.approx(210.0, abs=1e-6)
    assert out.to_hsl()[1:3] == (40, 70)


@pytest.mark.parametrize(
    "category",
    [c for c in PaletteCategory if c not in (PaletteCategory.STANDARD, PaletteCategory.ACCESSIBLE)],
)
def test_results_land_in_band(category: PaletteCategory) -> None:
    lo_s, hi_s = category.saturation_range
    lo_l, hi_l = category.lightness_range
    out = apply_category(SAMPLE, category)
    assert len(out) == len(SAMPLE)
    for c in out:
        _, s, l = c.hsl
        assert lo_l - EPS <= l <= hi_l + EPS
        # 明度 0/100 では彩度が表現できないため検査しない
        if 0.0 < l < 100.0:
            assert lo_s - EPS <= s <= hi_s + EPS


def test_hue_and_alpha_preserved() -> None:
    src = Color.from_hsl(200.0, 90.0, 50.0, alpha=0.4)
    out = adjust_color_to_category(src, PaletteCategory.DARK)
    h, s, l = out.hsl
    assert h == pytest.approx(200.0, abs=1e-6)
    assert s == pytest.approx(80.0, abs=1e-6)
    assert l == pytest.approx(40.0, abs=1e-6)
    assert out.alpha == pytest.approx(0.4)


def test_monochrome_strips_saturation(red: Color) -> None:
    out = adjust_color_to_category(red, PaletteCategory.MONOCHROME)
    assert out.to_hsl()[1] == 0


def test_accessible_colors_carry_white_text() -> None:
    for c in apply_category(SAMPLE, PaletteCategory.ACCESSIBLE):
        assert contrast_ratio(1.0, c.luminance) >= ACCESSIBLE_MIN_CONTRAST


def test_category_labels() -> None:
    assert PaletteCategory.STANDARD.value == "Balanced"
    assert PaletteCategory.PASTEL.saturation_range == (20.0, 40.0)
    assert PaletteCategory.TRIADIC.lightness_range == (30.0, 80.0)
