"""
Market Service
Combines the Gemini gateway and the normalizer for the two request paths.
"""
from typing import Union

from stock_pulse.exceptions import GatewayFailure, NormalizationFailure
from stock_pulse.gemini_gateway import GeminiGateway, extract_json
from stock_pulse.log_config import get_logger
from stock_pulse.market_config import MarketRegion
from stock_pulse.models import MarketOverview, StockData
from stock_pulse.normalizer import fallback_overview, normalize_overview, normalize_stock

logger = get_logger(__name__)


async def fetch_market_overview(
    gateway: GeminiGateway, region: Union[str, MarketRegion]
) -> MarketOverview:
    """
    Fetch the overview for a region.

    Gateway and normalization failures degrade to ``fallback_overview()``
    instead of raising.
    """
    try:
        reply = await gateway.request_market_overview(region)
        return normalize_overview(extract_json(reply.text))
    except (GatewayFailure, NormalizationFailure) as e:
        logger.error(f"Gemini Market Overview Error: {e}")
        return fallback_overview()


async def analyze_stock(
    gateway: GeminiGateway, symbol: str, region: Union[str, MarketRegion]
) -> StockData:
    """
    Analyze a single ticker.

    Raises:
        GatewayFailure: the Gemini call failed or returned nothing
        NormalizationFailure: the reply is not a valid StockData object
    """
    try:
        reply = await gateway.request_stock_analysis(symbol, region)
        return normalize_stock(extract_json(reply.text), reply.citations)
    except (GatewayFailure, NormalizationFailure) as e:
        logger.error(f"Gemini Stock Analysis Error: {e}")
        raise
