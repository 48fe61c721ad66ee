"""
Stock Analysis UI module
Renders the AI equity analysis: header, summary, bull/bear case, sentiment donut, sources.
"""
import re
from html import escape
from typing import Callable

import plotly.graph_objects as go
import streamlit as st

from stock_pulse.constants import MAX_DISPLAYED_SOURCES
from stock_pulse.models import StockData
from stock_pulse.ui.styles import VERDICT_COLORS


def _escape_dollars(text: str) -> str:
    """Markdownで $ がLaTeX扱いされないようエスケープ（エスケープ済みは除外）"""
    return re.sub(r"(?<!\\)\$", r"\\$", text)


def build_sentiment_figure(data: StockData) -> go.Figure:
    """強気材料/弱気材料の件数比を示すドーナツチャート"""
    fig = go.Figure(
        go.Pie(
            labels=["Bullish Signals", "Bearish Risks"],
            values=[len(data.bull_case), len(data.bear_case)],
            hole=0.6,
            marker=dict(colors=["#10b981", "#f43f5e"]),
            sort=False,
        )
    )
    fig.update_layout(
        height=240,
        margin=dict(l=10, r=10, t=10, b=10),
        showlegend=True,
        legend=dict(orientation="h", y=-0.1),
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def render_stock_analysis(data: StockData, on_close: Callable[[], None]):
    """銘柄分析結果を描画"""
    _render_header(data)

    main_col, side_col = st.columns([2, 1])
    with main_col:
        st.markdown(
            f"""<div class="pulse-card">
            <h4>Executive Summary</h4>
            <div class="pulse-text">{escape(data.summary)}</div>
            </div>""",
            unsafe_allow_html=True,
        )
        bull_col, bear_col = st.columns(2)
        with bull_col:
            st.markdown("##### ✅ Bull Case")
            for point in data.bull_case:
                st.markdown(f"- {_escape_dollars(point)}")
        with bear_col:
            st.markdown("##### ⚠️ Bear Risks")
            for point in data.bear_case:
                st.markdown(f"- {_escape_dollars(point)}")

    with side_col:
        _render_sentiment_weight(data)
        _render_sources(data)

    st.button(
        "Close Analysis & Return to Overview",
        on_click=on_close,
        use_container_width=True,
    )


def _render_header(data: StockData):
    change_color = "var(--color-positive)" if data.is_positive else "var(--color-negative)"
    arrow = "↗" if data.is_positive else "↘"
    verdict_color = VERDICT_COLORS.get(data.verdict, VERDICT_COLORS["Neutral"])

    left, right = st.columns([3, 2])
    with left:
        st.markdown(
            f"""<div class="pulse-card">
            <div style="display: flex; gap: 0.75rem; align-items: center;">
                <span class="pulse-value">{escape(data.symbol)}</span>
                <span class="pulse-badge" style="background-color: var(--color-border);">{escape(data.sector)}</span>
            </div>
            <div class="pulse-text" style="font-size: 1.2rem;">{escape(data.name)}</div>
            <div style="margin-top: 0.75rem;">
                <span class="pulse-value">{escape(data.price)}</span>
                <span style="color: {change_color}; font-weight: 600; margin-left: 0.75rem;">{arrow} {escape(data.change_percent)}</span>
            </div>
            </div>""",
            unsafe_allow_html=True,
        )
    with right:
        st.markdown(
            f"""<div class="pulse-card">
            <div class="pulse-label">Market Cap</div>
            <div class="pulse-text">{escape(data.market_cap)}</div>
            <div class="pulse-label" style="margin-top: 0.5rem;">P/E Ratio</div>
            <div class="pulse-text">{escape(data.pe_ratio)}</div>
            <div class="pulse-label" style="margin-top: 0.5rem;">AI Verdict</div>
            <span class="pulse-badge" style="background-color: {verdict_color};">{escape(data.verdict)}</span>
            </div>""",
            unsafe_allow_html=True,
        )


def _render_sentiment_weight(data: StockData):
    st.markdown("##### Sentiment Weight")
    ratio = data.bullish_ratio
    if ratio is None:
        st.caption("No bull/bear factors provided")
        return
    st.plotly_chart(build_sentiment_figure(data), use_container_width=True)
    st.markdown(f"**{round(ratio * 100)}%** Bullish Factors")


def _render_sources(data: StockData):
    st.markdown("###### SOURCES & REFERENCES")
    if not data.sources:
        st.caption("Generated by Gemini analysis")
        return
    for source in data.sources[:MAX_DISPLAYED_SOURCES]:
        st.markdown(
            f'<div class="pulse-source"><a href="{escape(source.uri, quote=True)}" '
            f'target="_blank" rel="noreferrer">🔗 {escape(source.title)}</a></div>',
            unsafe_allow_html=True,
        )
