"""
Market Overview UI module
Renders index cards, sentiment, trending point and hot industries.
"""
from html import escape
from typing import Optional

import streamlit as st

from stock_pulse.models import MarketOverview
from stock_pulse.ui.styles import MOMENTUM_COLORS, TREND_COLORS

TREND_ICONS = {"up": "▲", "down": "▼", "neutral": "—"}


def render_overview_skeleton():
    """読み込み中のプレースホルダー"""
    cols = st.columns(3)
    for col in cols:
        with col:
            st.markdown('<div class="pulse-skeleton"></div>', unsafe_allow_html=True)
    st.markdown('<div class="pulse-skeleton"></div>', unsafe_allow_html=True)


def render_market_overview(data: Optional[MarketOverview], is_loading: bool):
    """市場概況を描画（読み込み中はスケルトン、データなしは何も描画しない）"""
    if is_loading:
        render_overview_skeleton()
        return
    if data is None:
        return

    _render_indices(data)

    main_col, side_col = st.columns([2, 1])
    with main_col:
        st.markdown(
            f"""<div class="pulse-card">
            <h4>📊 Market Sentiment</h4>
            <div class="pulse-text">{escape(data.sentiment)}</div>
            </div>""",
            unsafe_allow_html=True,
        )
        st.markdown(
            f"""<div class="pulse-card" style="border-color: var(--color-accent);">
            <h4>⚡ Trending Point</h4>
            <div class="pulse-text">{escape(data.trending_point)}</div>
            </div>""",
            unsafe_allow_html=True,
        )
    with side_col:
        _render_hot_industries(data)


def _render_indices(data: MarketOverview):
    cols = st.columns(3)
    for i, index in enumerate(data.indices):
        color = TREND_COLORS.get(index.trend, TREND_COLORS["neutral"])
        icon = TREND_ICONS.get(index.trend, TREND_ICONS["neutral"])
        with cols[i % 3]:
            st.markdown(
                f"""<div class="pulse-card">
                <div class="pulse-label">{escape(index.name)}</div>
                <div class="pulse-value">{escape(index.value)}</div>
                <div style="color: {color}; font-weight: 600;">{icon} {escape(index.change)}</div>
                </div>""",
                unsafe_allow_html=True,
            )


def _render_hot_industries(data: MarketOverview):
    items = []
    for industry in data.hot_industries:
        color = MOMENTUM_COLORS.get(industry.momentum, MOMENTUM_COLORS["low"])
        items.append(
            f"""<div class="pulse-industry">
            <strong>{escape(industry.name)}</strong>
            <span class="pulse-badge" style="background-color: {color}; float: right;">{escape(industry.momentum)}</span>
            <div class="pulse-text" style="font-size: 0.875rem;">{escape(industry.description)}</div>
            </div>"""
        )
    st.markdown(
        f"""<div class="pulse-card">
        <h4>🔥 Hot Industries</h4>
        {"".join(items)}
        </div>""",
        unsafe_allow_html=True,
    )
