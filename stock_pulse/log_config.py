"""
ログ設定モジュール
ダッシュボード全体で共通のロガー設定を提供します。
"""
import logging
import os
import sys

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _resolve_level() -> int:
    """環境変数 STOCK_PULSE_LOG_LEVEL からログレベルを決定（既定: INFO）"""
    name = os.getenv("STOCK_PULSE_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """
    名前付きロガーを取得します。

    Streamlit は再実行のたびにモジュールを評価し直すため、
    ハンドラーは一度だけ追加します。

    Args:
        name: ロガー名（通常は ``__name__``）

    Returns:
        設定済み logging.Logger インスタンス
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_resolve_level())
    return logger
