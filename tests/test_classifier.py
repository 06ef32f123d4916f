from __future__ import annotations

"""2 色間の調和判定（calculate_harmony）のテスト。"""

import pytest

from colorharmony import (
    Color,
    HarmonyQuality,
    HarmonyType,
    calculate_harmony,
)
from colorharmony.classifier import MIN_CONFIDENCE, hue_delta, is_achromatic


def test_complementary_pair_scores_high(red: Color, cyan: Color) -> None:
    res = calculate_harmony(red, cyan)
    assert res.type is HarmonyType.COMPLEMENTARY
    assert res.score >= 0.9
    assert res.quality is HarmonyQuality.EXCELLENT
    assert "complementary" in res.description


def test_identical_colors_are_perfect(red: Color) -> None:
    res = calculate_harmony(red, Color.from_hex("#ff0000"))
    assert res.score == 1.0
    assert res.type is HarmonyType.MONOCHROMATIC


@pytest.mark.parametrize(
    "hex2, expected",
    [
        ("FF8000", HarmonyType.ANALOGOUS),
        ("00FF00", HarmonyType.TRIADIC),
        ("0000FF", HarmonyType.TRIADIC),
    ],
)
def test_canonical_relationships(red: Color, hex2: str, expected: HarmonyType) -> None:
    res = calculate_harmony(red, Color.from_hex(hex2))
    assert res.type is expected
    assert res.score >= 0.9


def test_split_complementary_window(red: Color) -> None:
    res = calculate_harmony(red, Color.from_hsl(150.0, 100.0, 50.0))
    assert res.type is HarmonyType.SPLIT_COMPLEMENTARY


def test_monochromatic_window() -> None:
    a = Color.from_hsl(200.0, 70.0, 40.0)
    b = Color.from_hsl(205.0, 50.0, 70.0)
    res = calculate_harmony(a, b)
    assert res.type is HarmonyType.MONOCHROMATIC
    assert MIN_CONFIDENCE <= res.score <= 1.0


def test_unmatched_angle_has_no_type(red: Color) -> None:
    res = calculate_harmony(red, Color.from_hsl(75.0, 100.0, 50.0))
    assert res.type is None
    assert 0.0 <= res.score < MIN_CONFIDENCE


def test_deterministic_and_symmetric(red: Color) -> None:
    other = Color.from_hex("6A1B9A")
    assert calculate_harmony(red, other) == calculate_harmony(red, other)
    assert calculate_harmony(red, other).score == calculate_harmony(other, red).score


def test_black_and_white() -> None:
    res = calculate_harmony(Color.from_hex("000000"), Color.from_hex("FFFFFF"))
    assert res.type is HarmonyType.MONOCHROMATIC
    assert res.score == pytest.approx(0.85)


def test_color_with_neutral(red: Color) -> None:
    res = calculate_harmony(red, Color.from_hex("808080"))
    assert res.type is None
    assert res.score == pytest.approx(0.7)
    assert "neutral" in res.description


def test_hue_delta_folds_to_half_circle() -> None:
    assert hue_delta(350.0, 10.0) == pytest.approx(20.0)
    assert hue_delta(0.0, 180.0) == pytest.approx(180.0)
    assert hue_delta(90.0, 300.0) == pytest.approx(150.0)


def test_is_achromatic_thresholds() -> None:
    """無彩色判定は彩度のみで決まり、明度の極端さには依存しない。"""
    assert is_achromatic((120.0, 5.0, 50.0))
    assert is_achromatic((0.0, 0.0, 100.0))
    assert not is_achromatic((120.0, 80.0, 3.0))
    assert not is_achromatic((120.0, 80.0, 97.0))
    assert not is_achromatic((120.0, 80.0, 50.0))


def test_pale_complementary_pair() -> None:
    res = calculate_harmony(Color.from_hsl(0.0, 100.0, 96.0), Color.from_hsl(180.0, 100.0, 96.0))
    assert res.type is HarmonyType.COMPLEMENTARY
    assert res.score >= 0.9


def test_pale_tint_keeps_its_hue() -> None:
    res = calculate_harmony(Color.from_hsl(0.0, 100.0, 96.0), Color.from_hsl(0.0, 100.0, 50.0))
    assert res.type is HarmonyType.MONOCHROMATIC
    assert "neutral" not in res.description


def test_near_black_pair() -> None:
    res = calculate_harmony(Color.from_hsl(0.0, 100.0, 3.0), Color.from_hsl(200.0, 80.0, 8.0))
    assert res.type is HarmonyType.MONOCHROMATIC
    assert res.score == pytest.approx(0.95)


@pytest.mark.parametrize(
    "score, quality",
    [
        (0.95, HarmonyQuality.EXCELLENT),
        (0.7, HarmonyQuality.GOOD),
        (0.55, HarmonyQuality.DECENT),
        (0.4, HarmonyQuality.POOR),
        (0.1, HarmonyQuality.CLASH),
    ],
)
def test_quality_grades(score: float, quality: HarmonyQuality) -> None:
    assert HarmonyQuality.for_score(score) is quality


def test_harmony_type_windows_are_exposed() -> None:
    assert HarmonyType.COMPLEMENTARY.degrees == 180.0
    assert HarmonyType.COMPLEMENTARY.tolerance == 20.0
    assert HarmonyType.SPLIT_COMPLEMENTARY.value == "Split-Complementary"
