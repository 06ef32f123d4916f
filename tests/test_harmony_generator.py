from __future__ import annotations

"""調和パレット生成（キー色導出とバリセントリック補間）のテスト。"""

import numpy as np
import pytest

from colorharmony import (
    Color,
    DegenerateRequestError,
    HarmonyScheme,
    PaletteCategory,
    generate_harmonious_palette,
    sample_from_color_scheme,
)
from colorharmony.harmony import (
    compute_key_offsets,
    random_color_in_band,
    scheme_for_category,
    signed_hue_delta,
)

EPS = 1e-6


@pytest.mark.parametrize(
    "scheme, offsets",
    [
        (HarmonyScheme.COMPLEMENTARY, (180.0, 0.0)),
        (HarmonyScheme.ANALOGOUS, (30.0, -30.0)),
        (HarmonyScheme.TRIADIC, (120.0, 240.0)),
        (HarmonyScheme.SPLIT_COMPLEMENTARY, (150.0, 210.0)),
        (HarmonyScheme.MONOCHROMATIC, (0.0, 0.0)),
    ],
)
def test_key_offsets(scheme: HarmonyScheme, offsets) -> None:
    assert compute_key_offsets(scheme) == offsets


def test_signed_hue_delta_takes_short_way() -> None:
    assert signed_hue_delta(350.0, 10.0) == pytest.approx(20.0)
    assert signed_hue_delta(10.0, 350.0) == pytest.approx(-20.0)
    assert signed_hue_delta(0.0, 180.0) == pytest.approx(180.0)


@pytest.mark.parametrize("count", list(range(1, 11)))
def test_count_is_honored(rng: np.random.Generator, count: int) -> None:
    palette = generate_harmonious_palette(count=count, rng=rng)
    assert len(palette) == count
    assert all(isinstance(c, Color) for c in palette)


@pytest.mark.parametrize("count", [0, -3])
def test_non_positive_count_raises(rng: np.random.Generator, count: int) -> None:
    with pytest.raises(DegenerateRequestError):
        generate_harmonious_palette(count=count, rng=rng)


def test_single_color_request_returns_first_key(rng: np.random.Generator, red: Color) -> None:
    assert generate_harmonious_palette([red], count=1, rng=rng) == [red]


def test_seeds_lead_the_palette(rng: np.random.Generator) -> None:
    seeds = [Color.from_hex(h) for h in ("3366CC", "CC6633", "66CC33", "993399")]
    palette = generate_harmonious_palette(seeds, count=6, rng=rng)
    assert palette[:4] == seeds
    assert len(palette) == 6


def test_more_seeds_than_count_truncates(rng: np.random.Generator) -> None:
    seeds = [Color.from_hex(h) for h in ("3366CC", "CC6633", "66CC33", "993399")]
    assert generate_harmonious_palette(seeds, count=2, rng=rng) == seeds[:2]


def test_scheme_derives_key_hues(rng: np.random.Generator, red: Color) -> None:
    palette = generate_harmonious_palette(
        [red], count=3, rng=rng, scheme=HarmonyScheme.TRIADIC
    )
    assert palette[1].hsl[0] == pytest.approx(120.0, abs=1e-6)
    assert palette[2].hsl[0] == pytest.approx(240.0, abs=1e-6)


def test_category_hint_selects_scheme(rng: np.random.Generator, red: Color) -> None:
    palette = generate_harmonious_palette(
        [red], count=2, category=PaletteCategory.COMPLEMENTARY, rng=rng
    )
    assert palette[1].hsl[0] == pytest.approx(180.0, abs=1e-6)
    assert scheme_for_category(PaletteCategory.ANALOGOUS, rng) is HarmonyScheme.ANALOGOUS


def test_unhinted_category_draws_some_scheme(rng: np.random.Generator) -> None:
    drawn = {scheme_for_category(PaletteCategory.STANDARD, rng) for _ in range(200)}
    assert drawn <= set(HarmonyScheme)
    assert len(drawn) > 1


def test_category_band_is_respected(rng: np.random.Generator) -> None:
    lo_s, hi_s = PaletteCategory.PASTEL.saturation_range
    lo_l, hi_l = PaletteCategory.PASTEL.lightness_range
    for _ in range(20):
        for c in generate_harmonious_palette(count=8, category=PaletteCategory.PASTEL, rng=rng):
            _, s, l = c.hsl
            assert lo_s - EPS <= s <= hi_s + EPS
            assert lo_l - EPS <= l <= hi_l + EPS


def test_same_seed_same_palette(red: Color) -> None:
    a = generate_harmonious_palette([red], count=6, rng=np.random.default_rng(7))
    b = generate_harmonious_palette([red], count=6, rng=np.random.default_rng(7))
    assert [c.to_hex() for c in a] == [c.to_hex() for c in b]


def test_sample_corners_reproduce_keys() -> None:
    k1 = Color.from_hsl(10.0, 40.0, 30.0)
    k2 = Color.from_hsl(40.0, 60.0, 50.0)
    k3 = Color.from_hsl(70.0, 80.0, 70.0)
    assert sample_from_color_scheme(0.0, 0.0, k1, k2, k3).to_hex() == k1.to_hex()
    assert sample_from_color_scheme(1.0, 0.0, k1, k2, k3).to_hex() == k2.to_hex()
    assert sample_from_color_scheme(1.0, 1.0, k1, k2, k3).to_hex() == k3.to_hex()


def test_samples_stay_inside_key_envelope(rng: np.random.Generator) -> None:
    """色相が 0° をまたぐキー色でも補間結果が包絡内に収まる。"""
    k1 = Color.from_hsl(350.0, 40.0, 30.0)
    k2 = Color.from_hsl(10.0, 60.0, 50.0)
    k3 = Color.from_hsl(20.0, 80.0, 70.0)
    for _ in range(200):
        c = sample_from_color_scheme(rng.random(), rng.random(), k1, k2, k3)
        h, s, l = c.hsl
        assert -EPS <= signed_hue_delta(350.0, h) <= 30.0 + EPS
        assert 40.0 - EPS <= s <= 80.0 + EPS
        assert 30.0 - EPS <= l <= 70.0 + EPS


def test_random_color_in_band(rng: np.random.Generator) -> None:
    for _ in range(50):
        _, s, l = random_color_in_band(rng, (20.0, 40.0), (60.0, 80.0)).hsl
        assert 20.0 - EPS <= s <= 40.0 + EPS
        assert 60.0 - EPS <= l <= 80.0 + EPS
