from __future__ import annotations

"""表示用エクスポートのテスト。"""

import pytest

from colorharmony import EXPORT_FORMAT_OPTIONS, Color, ExportFormat, PaletteCategory, export_colors
from colorharmony.export import CATEGORY_LABEL_MAP


def _palette():
    return [Color.from_hex("FF0000"), Color.from_hex("3366CC")]


def test_hex_export() -> None:
    assert export_colors(_palette(), "hex") == ["#FF0000", "#3366CC"]


def test_rgb_exports() -> None:
    assert export_colors(_palette(), ExportFormat.RGB_255) == [(255, 0, 0), (51, 102, 204)]
    rgb01 = export_colors(_palette(), ExportFormat.RGB_01)
    assert rgb01[0] == (1.0, 0.0, 0.0)
    assert all(0.0 <= v <= 1.0 for c in rgb01 for v in c)


def test_hsl_and_cmyk_exports() -> None:
    assert export_colors(_palette()[:1], "hsl") == [(0, 100, 50)]
    assert export_colors(_palette()[:1], "cmyk") == [(0, 100, 100, 0)]


def test_unknown_format_raises() -> None:
    with pytest.raises(ValueError):
        export_colors(_palette(), "oklch")


def test_options_cover_every_format() -> None:
    assert {fmt for _, fmt in EXPORT_FORMAT_OPTIONS} == set(ExportFormat)
    assert CATEGORY_LABEL_MAP["Balanced"] is PaletteCategory.STANDARD
