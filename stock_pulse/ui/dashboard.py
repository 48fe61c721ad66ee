"""
Dashboard UI module
Coordinates the selector, search form, overview and analysis views around one
DashboardController, plus the blocking configuration screen.
"""
import asyncio
from typing import Awaitable, TypeVar

import streamlit as st

from stock_pulse.controller import DashboardController
from stock_pulse.exceptions import ConfigurationError
from stock_pulse.log_config import get_logger
from stock_pulse.market_config import get_search_placeholder
from stock_pulse.settings_storage import load_settings, set_gemini_api_key
from stock_pulse.ui.market_selector import render_market_selector
from stock_pulse.ui.overview_view import render_market_overview, render_overview_skeleton
from stock_pulse.ui.stock_view import render_stock_analysis

logger = get_logger(__name__)

T = TypeVar("T")

CONTROLLER_KEY = "dashboard_controller"


def run_async(coro: Awaitable[T]) -> T:
    """Streamlitのスクリプトスレッドからコルーチンを実行"""
    return asyncio.run(coro)


def get_controller() -> DashboardController:
    """
    セッションのコントローラーを取得（初回のみ生成）。

    Raises:
        ConfigurationError: APIキーが未設定の場合
    """
    if CONTROLLER_KEY not in st.session_state:
        st.session_state[CONTROLLER_KEY] = DashboardController.from_settings()
    return st.session_state[CONTROLLER_KEY]


def render_config_error_screen(error: ConfigurationError):
    """APIキー未設定時のブロッキング画面"""
    st.markdown("## 🔒 API Key Missing")
    st.error(
        "This application requires a Google Gemini API key to function. "
        "Set `GEMINI_API_KEY` (or `API_KEY`) in Streamlit secrets or the environment."
    )
    st.caption(str(error))

    api_key = st.text_input("Gemini API Key", type="password")
    if st.button("💾 Save API Key", type="primary", disabled=not api_key):
        if set_gemini_api_key(api_key):
            load_settings(force_reload=True)
            st.session_state.pop(CONTROLLER_KEY, None)
            st.rerun()
        else:
            st.error("❌ Failed to save the API key")


def render_dashboard(controller: DashboardController):
    """メイン画面"""
    st.markdown("## 📈 Global Stock Pulse")
    st.caption("✨ Powered by Gemini with Google Search grounding")

    state = controller.snapshot()
    render_market_selector(
        controller, disabled=state.is_analyzing or state.is_loading_overview
    )

    if state.stock_data is None:
        _render_search_form(controller)

    state = controller.snapshot()
    if state.stock_data is not None:
        render_stock_analysis(state.stock_data, on_close=controller.clear_analysis)
    else:
        _render_overview_section(controller)


def _render_search_form(controller: DashboardController):
    state = controller.snapshot()
    with st.form("stock_search", clear_on_submit=False):
        input_col, button_col = st.columns([5, 1])
        with input_col:
            query = st.text_input(
                "Stock ID",
                value=state.stock_query,
                placeholder=get_search_placeholder(state.active_region),
                label_visibility="collapsed",
            )
        with button_col:
            submitted = st.form_submit_button(
                "Analyze", type="primary", use_container_width=True
            )

    if submitted:
        controller.set_stock_query(query)
        if query.strip():
            with st.spinner("Analyzing..."):
                run_async(controller.submit_stock_query())
            st.rerun()

    error = controller.snapshot().error
    if error:
        st.error(f"⚠️ {error}")


def _render_overview_section(controller: DashboardController):
    state = controller.snapshot()
    st.markdown(f"### Market Overview / {state.active_region.value}")

    if state.active_overview is None:
        placeholder = st.empty()
        with placeholder.container():
            render_overview_skeleton()
        run_async(controller.ensure_overview_loaded())
        placeholder.empty()
        state = controller.snapshot()
        if state.error:
            st.error(f"⚠️ {state.error}")
        if state.active_overview is None:
            # 失敗したリージョンは再選択（ここでは再試行ボタン）まで取得しない
            if st.button("🔄 Retry", key="retry_overview"):
                controller.select_region(state.active_region)
                st.rerun()

    overview = state.active_overview
    if overview is not None and overview.last_updated:
        st.caption(f"ℹ️ Updated: {overview.last_updated}")
    render_market_overview(overview, state.is_loading_overview)
