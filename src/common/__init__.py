"""
どこで: `common` パッケージ。
何を: 設定/環境変数/ロギングの軽量ユーティリティ。
なぜ: `colorharmony` 本体から環境依存の処理を分離し、依存の向きを単純化するため。
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
