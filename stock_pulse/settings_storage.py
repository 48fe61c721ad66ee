"""
Settings Storage Module
Gemini APIキーやモデル名をローカルに永続化・解決します。
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from stock_pulse.constants import GEMINI_MODEL_NAME
from stock_pulse.log_config import get_logger

logger = get_logger(__name__)

load_dotenv()

# 設定ファイルのパス（プロジェクト内のdataディレクトリ）
SETTINGS_DIR = Path(__file__).parent.parent / "data"
SETTINGS_FILE = SETTINGS_DIR / "settings.json"

# APIキーとして参照するキー名（優先順）
API_KEY_NAMES = ("GEMINI_API_KEY", "API_KEY")

# メモリキャッシュ（ファイルI/O削減用）
_settings_cache: Optional[dict] = None


def load_settings(force_reload: bool = False) -> dict:
    """
    保存された設定を読み込みます。
    キャッシュがある場合はファイルI/Oをスキップします。

    Args:
        force_reload: Trueの場合キャッシュを無視して再読み込み
    """
    global _settings_cache

    if _settings_cache is not None and not force_reload:
        return _settings_cache.copy()

    data = {}
    try:
        if SETTINGS_FILE.exists():
            with open(SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"設定読み込みエラー: {e}")

    _settings_cache = data
    return _settings_cache.copy()


def save_settings(settings: dict) -> bool:
    """
    設定を保存します。失敗時はキャッシュを無効化します。
    """
    global _settings_cache
    try:
        SETTINGS_DIR.mkdir(exist_ok=True)
        with open(SETTINGS_FILE, "w", encoding="utf-8") as f:
            json.dump(settings, f, indent=2, ensure_ascii=False)
        _settings_cache = settings.copy()
        return True
    except OSError as e:
        logger.error(f"設定保存エラー: {e}")
        _settings_cache = None
        return False


def get_setting(key: str, default=None):
    """特定の設定値を取得します。"""
    return load_settings().get(key, default)


def set_setting(key: str, value) -> bool:
    """特定の設定値を保存します。"""
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def _get_secret(name: str) -> str:
    """Streamlit secretsから値を取得（secrets未設定・Streamlit外では空文字）"""
    try:
        import streamlit as st

        if name in st.secrets:
            return str(st.secrets[name])
    except Exception:
        # secrets.toml が無い場合 StreamlitSecretNotFoundError になる
        pass
    return ""


# === 便利関数 ===


def get_gemini_api_key() -> str:
    """
    Gemini APIキーを取得します。

    優先順: Streamlit secrets → 環境変数（.env含む） → ローカル設定
    """
    for name in API_KEY_NAMES:
        key = _get_secret(name)
        if key:
            return key
    for name in API_KEY_NAMES:
        key = os.getenv(name, "")
        if key:
            return key
    return get_setting("gemini_api_key", "") or ""


def set_gemini_api_key(api_key: str) -> bool:
    """Gemini APIキーをローカル設定に保存"""
    return set_setting("gemini_api_key", api_key.strip())


def get_model_name() -> str:
    """使用するGeminiモデル名を取得（環境変数 GEMINI_MODEL で上書き可）"""
    return os.getenv("GEMINI_MODEL") or get_setting("gemini_model") or GEMINI_MODEL_NAME
