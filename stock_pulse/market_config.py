"""
市場設定モジュール
米国/中国本土/香港/日本の4市場の設定を中央管理します。
"""

from enum import Enum
from typing import TypedDict, Union


class MarketRegion(str, Enum):
    """市場リージョン"""

    US = "US"
    CN = "CN"
    HK = "HK"
    JP = "JP"


class RegionSettings(TypedDict):
    """リージョン設定の型定義"""

    label: str
    flag: str
    exchanges: str  # 市場概況プロンプトで使う取引所名
    analysis_context: str  # 銘柄分析プロンプトで使う市場名
    sample_tickers: list[str]


US_CONFIG: RegionSettings = {
    "label": "United States",
    "flag": "🇺🇸",
    "exchanges": "United States (NYSE, NASDAQ)",
    "analysis_context": "US Market",
    "sample_tickers": ["AAPL", "NVDA"],
}

CN_CONFIG: RegionSettings = {
    "label": "China Mainland",
    "flag": "🇨🇳",
    "exchanges": "Mainland China (A-Shares, Shanghai, Shenzhen)",
    "analysis_context": "China A-Shares/Mainland",
    "sample_tickers": ["600519.SS"],
}

HK_CONFIG: RegionSettings = {
    "label": "Hong Kong",
    "flag": "🇭🇰",
    "exchanges": "Hong Kong (HKEX)",
    "analysis_context": "Hong Kong Stock Exchange",
    "sample_tickers": ["0700.HK", "9988.HK"],
}

JP_CONFIG: RegionSettings = {
    "label": "Japan",
    "flag": "🇯🇵",
    "exchanges": "Japan (Tokyo Stock Exchange)",
    "analysis_context": "Tokyo Stock Exchange",
    "sample_tickers": ["7203.T"],
}

# 設定マップ（表示順もこの順）
REGION_CONFIGS: dict[MarketRegion, RegionSettings] = {
    MarketRegion.US: US_CONFIG,
    MarketRegion.CN: CN_CONFIG,
    MarketRegion.HK: HK_CONFIG,
    MarketRegion.JP: JP_CONFIG,
}


def to_region(value: Union[str, MarketRegion]) -> MarketRegion:
    """
    文字列またはMarketRegionをMarketRegionに変換します。

    Args:
        value: "US" / "CN" / "HK" / "JP" またはMarketRegion

    Returns:
        MarketRegion

    Raises:
        ValueError: 未対応のリージョンの場合
    """
    if isinstance(value, MarketRegion):
        return value
    try:
        return MarketRegion(str(value).strip().upper())
    except ValueError:
        raise ValueError(f"Unsupported market region: {value!r}") from None


def get_region_config(region: Union[str, MarketRegion]) -> RegionSettings:
    """指定リージョンの設定を取得します。"""
    return REGION_CONFIGS[to_region(region)]


def get_search_placeholder(region: Union[str, MarketRegion]) -> str:
    """検索欄のプレースホルダー文字列を返します。"""
    region = to_region(region)
    examples = ", ".join(REGION_CONFIGS[region]["sample_tickers"])
    return f"Enter stock ID for {region.value} (e.g. {examples})"
