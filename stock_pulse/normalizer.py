"""
レスポンス正規化モジュール
パース済みJSONを MarketOverview / StockData に変換します。
"""
from datetime import datetime, timezone
from typing import Any, Optional

from stock_pulse.constants import FALLBACK_SENTIMENT
from stock_pulse.exceptions import NormalizationFailure
from stock_pulse.models import MarketIndex, MarketOverview, Source, StockData


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def fallback_overview(now: Optional[datetime] = None) -> MarketOverview:
    """
    取得失敗時に表示する固定の市場概況を返します。

    Args:
        now: lastUpdated に使う時刻（省略時は現在時刻）
    """
    timestamp = (now or datetime.now(timezone.utc)).isoformat()
    return MarketOverview(
        indices=[
            MarketIndex(
                name="Error Fetching Data", value="0.00", change="0%", trend="neutral"
            )
        ],
        sentiment=FALLBACK_SENTIMENT,
        hot_industries=[],
        trending_point="N/A",
        last_updated=timestamp,
    )


def normalize_overview(data: Any) -> MarketOverview:
    """
    市場概況JSONを検証して MarketOverview に変換します。

    Raises:
        NormalizationFailure: JSONが取得できない、または形式が不正な場合
    """
    if data is None:
        raise NormalizationFailure("Invalid JSON format")
    return MarketOverview.from_dict(data, default_timestamp=_now_iso())


def normalize_stock(data: Any, citations: Optional[list[Source]] = None) -> StockData:
    """
    銘柄分析JSONを検証し、参照ソースを結合して StockData に変換します。

    Raises:
        NormalizationFailure: JSONが取得できない、または形式が不正な場合
    """
    if data is None:
        raise NormalizationFailure("Invalid JSON format")
    # 表示件数の制限は画面側で行う
    sources = [source for source in (citations or []) if source.uri]
    return StockData.from_dict(data, sources=sources)
