"""
どこで: `common.settings`
何を: ライブラリの環境変数を型付きで一元管理し、import 時に読み込む。
なぜ: `os.getenv` の散在を解消し、既定値/型の一貫性とテスト容易性を高めるため。
"""

from __future__ import annotations

from dataclasses import dataclass

from .env import env_float, env_int, env_str


@dataclass
class _Settings:
    # 生成パレットの色差しきい値（CIEDE2000）
    MIN_DIFFERENCE: float = 15.0

    # 補充ループの試行上限 = max(MIN_ATTEMPTS, ATTEMPTS_PER_COLOR * count)
    ATTEMPTS_PER_COLOR: int = 50
    MIN_ATTEMPTS: int = 200

    # Misc
    LOG_LEVEL: str = "INFO"


_settings = _Settings()


def reload_from_env() -> None:
    """環境変数から設定を再読込。

    - float は `env_float`、int は `env_int` を使用。
    - 試行回数は下限 1 に丸める。
    """
    _settings.MIN_DIFFERENCE = env_float("CHROMA_MIN_DIFFERENCE", 15.0, min_value=0.0)

    _settings.ATTEMPTS_PER_COLOR = env_int("CHROMA_ATTEMPTS_PER_COLOR", 50, min_value=1) or 50
    _settings.MIN_ATTEMPTS = env_int("CHROMA_MIN_ATTEMPTS", 200, min_value=1) or 200

    _settings.LOG_LEVEL = env_str("CHROMA_LOG_LEVEL", "INFO")


def get() -> _Settings:
    """現在の設定スナップショットを返す。"""
    return _settings


# 初期ロード
reload_from_env()


__all__ = ["get", "reload_from_env", "_Settings"]
