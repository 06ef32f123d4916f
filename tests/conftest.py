"""共通フィクスチャ。

- 乱数シード固定
- 注入用の `numpy.random.Generator`
- 小さな Color 試料
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
import pytest

from colorharmony import Color, PaletteService, ServiceConfig
from common import settings


@pytest.fixture(scope="session", autouse=True)
def np_seed() -> None:
    """NumPy のグローバル乱数を固定。"""
    np.random.seed(12345)


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture()
def service(rng: np.random.Generator) -> PaletteService:
    return PaletteService(rng=rng, config=ServiceConfig())


@pytest.fixture()
def red() -> Color:
    return Color.from_hex("FF0000")


@pytest.fixture()
def cyan() -> Color:
    return Color.from_hex("00FFFF")


@pytest.fixture()
def settings_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    """環境変数を差し替えた後、テスト終了時に設定を既定へ戻す。"""
    yield monkeypatch
    monkeypatch.undo()
    settings.reload_from_env()
