"""
Market Selector UI module
"""
import streamlit as st

from stock_pulse.controller import DashboardController
from stock_pulse.market_config import REGION_CONFIGS, MarketRegion


def _region_label(region: MarketRegion) -> str:
    config = REGION_CONFIGS[region]
    return f"{config['flag']} {config['label']}"


def render_market_selector(controller: DashboardController, disabled: bool = False):
    """リージョン選択を描画し、変更時は再実行する"""
    st.markdown("##### 🌐 SELECT MARKET REGION")

    state = controller.snapshot()
    options = list(REGION_CONFIGS.keys())

    selection = st.segmented_control(
        "市場選択",
        options=options,
        default=state.active_region,
        format_func=_region_label,
        disabled=disabled,
        label_visibility="collapsed",
    )

    # 選択解除（None）は現在のリージョンのまま
    if selection is not None and selection != state.active_region:
        controller.select_region(selection)
        st.rerun()
