"""
データモデル（スキーマ検証）のテスト
"""
import pytest

from stock_pulse.exceptions import NormalizationFailure
from stock_pulse.models import (
    IndustryTrend,
    MarketIndex,
    MarketOverview,
    StockData,
    coerce_trend,
    coerce_verdict,
)


class TestMarketOverviewFromDict:
    """MarketOverview.from_dictのテスト"""

    def test_parses_camel_case_payload(self, overview_payload):
        overview = MarketOverview.from_dict(overview_payload)

        assert [i.name for i in overview.indices] == ["S&P 500", "NASDAQ"]
        assert overview.indices[0].trend == "up"
        assert overview.hot_industries[0] == IndustryTrend(
            name="Semiconductors", description="AI demand", momentum="high"
        )
        assert overview.trending_point == "Fed rate decision this week."
        assert overview.last_updated == "2026-10-16T14:30:00Z"

    def test_missing_required_field_raises(self, overview_payload):
        del overview_payload["sentiment"]
        with pytest.raises(NormalizationFailure):
            MarketOverview.from_dict(overview_payload)

    def test_indices_must_be_list(self, overview_payload):
        overview_payload["indices"] = {"name": "S&P 500"}
        with pytest.raises(NormalizationFailure):
            MarketOverview.from_dict(overview_payload)

    def test_non_object_raises(self):
        with pytest.raises(NormalizationFailure):
            MarketOverview.from_dict(["not", "an", "object"])

    def test_missing_last_updated_uses_default(self, overview_payload):
        del overview_payload["lastUpdated"]
        overview = MarketOverview.from_dict(overview_payload, default_timestamp="now")
        assert overview.last_updated == "now"

    def test_invalid_momentum_raises(self, overview_payload):
        overview_payload["hotIndustries"][0]["momentum"] = "explosive"
        with pytest.raises(NormalizationFailure):
            MarketOverview.from_dict(overview_payload)


class TestMarketIndex:
    """MarketIndexの値変換"""

    def test_numeric_values_become_strings(self):
        index = MarketIndex.from_dict(
            {"name": "Nikkei 225", "value": 38500.5, "change": "+1.1%", "trend": "UP"}
        )
        assert index.value == "38500.5"
        assert index.trend == "up"

    @pytest.mark.parametrize(
        "change, expected",
        [("+0.4%", "up"), ("-2.0%", "down"), ("0%", "neutral")],
    )
    def test_unknown_trend_inferred_from_change(self, change, expected):
        assert coerce_trend("sideways", change) == expected


class TestStockDataFromDict:
    """StockData.from_dictのテスト"""

    def test_parses_payload(self, stock_payload):
        data = StockData.from_dict(stock_payload)

        assert data.symbol == "NVDA"
        assert data.change_percent == "+1.2%"
        assert data.bull_case == ["Data center growth", "CUDA moat", "New product cycle"]
        assert data.verdict == "Buy"
        assert data.sources == []

    def test_missing_bull_case_raises(self, stock_payload):
        del stock_payload["bullCase"]
        with pytest.raises(NormalizationFailure):
            StockData.from_dict(stock_payload)

    def test_optional_fields_default_to_na(self, stock_payload):
        del stock_payload["peRatio"]
        assert StockData.from_dict(stock_payload).pe_ratio == "N/A"

    def test_bullish_ratio(self, stock_payload):
        data = StockData.from_dict(stock_payload)
        assert data.bullish_ratio == pytest.approx(0.6)

    def test_bullish_ratio_without_factors(self, stock_payload):
        stock_payload["bullCase"] = []
        stock_payload["bearCase"] = []
        assert StockData.from_dict(stock_payload).bullish_ratio is None

    @pytest.mark.parametrize(
        "change, positive", [("+1.2%", True), ("-0.8%", False), ("0.0%", True)]
    )
    def test_is_positive(self, stock_payload, change, positive):
        stock_payload["changePercent"] = change
        assert StockData.from_dict(stock_payload).is_positive is positive


class TestCoerceVerdict:
    """verdictは常に4値のいずれか"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Buy", "Buy"),
            ("sell", "Sell"),
            (" HOLD ", "Hold"),
            ("Strong Buy", "Buy"),
            ("strong sell", "Sell"),
            ("Accumulate", "Neutral"),
            ("", "Neutral"),
        ],
    )
    def test_coercion(self, raw, expected):
        assert coerce_verdict(raw) == expected
