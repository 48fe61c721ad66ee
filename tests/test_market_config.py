"""
市場設定モジュールのテスト
"""
import pytest

from stock_pulse.market_config import (
    REGION_CONFIGS,
    MarketRegion,
    get_region_config,
    get_search_placeholder,
    to_region,
)


class TestToRegion:
    @pytest.mark.parametrize("value", ["US", "us", " hk ", MarketRegion.JP])
    def test_accepts_known_values(self, value):
        assert isinstance(to_region(value), MarketRegion)

    @pytest.mark.parametrize("value", ["EU", "", "USA"])
    def test_rejects_unknown_values(self, value):
        with pytest.raises(ValueError):
            to_region(value)


class TestRegionConfig:
    def test_all_four_regions_configured(self):
        assert list(REGION_CONFIGS) == [
            MarketRegion.US,
            MarketRegion.CN,
            MarketRegion.HK,
            MarketRegion.JP,
        ]

    def test_lookup_by_string(self):
        assert get_region_config("HK")["exchanges"] == "Hong Kong (HKEX)"

    @pytest.mark.parametrize(
        "region, example",
        [("US", "AAPL, NVDA"), ("HK", "0700.HK, 9988.HK"), ("CN", "600519.SS"), ("JP", "7203.T")],
    )
    def test_search_placeholder(self, region, example):
        assert get_search_placeholder(region) == f"Enter stock ID for {region} (e.g. {example})"
