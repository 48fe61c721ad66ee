"""
Global Stock Pulse - メインアプリケーション
Streamlitを使用した市場概況・AI銘柄分析ダッシュボード
"""
import os
import sys

import streamlit as st

# パス設定
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from stock_pulse.exceptions import ConfigurationError
from stock_pulse.log_config import get_logger
from stock_pulse.ui.dashboard import get_controller, render_config_error_screen, render_dashboard
from stock_pulse.ui.styles import get_custom_css

logger = get_logger(__name__)

# ページ設定
st.set_page_config(
    page_title="Global Stock Pulse",
    page_icon="📈",
    layout="wide",
    initial_sidebar_state="collapsed",
)


def render_error_screen(e):
    """想定外のエラー時のフォールバック画面を表示"""
    st.error("An unexpected error occurred while rendering the dashboard.")
    st.code(str(e), language="python")
    st.markdown("""
    ### What to do
    1. Reload the page.
    2. Try again in a few moments.
    """)


def main():
    """メイン関数"""
    st.markdown(get_custom_css(), unsafe_allow_html=True)

    # APIキーが無い場合は何も呼び出さずにブロッキング画面を表示
    try:
        controller = get_controller()
    except ConfigurationError as e:
        logger.warning(f"Service unavailable: {e}")
        render_config_error_screen(e)
        return

    try:
        render_dashboard(controller)
    except Exception as e:
        logger.exception(f"Dashboard error: {e}")
        render_error_screen(e)


if __name__ == "__main__":
    main()
