"""
Geminiゲートウェイモジュール
Google検索グラウンディング付きでGeminiに市場概況・銘柄分析を依頼し、
JSON応答と参照ソースを取り出します。
"""
import json
import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from google import genai
from google.genai import types

from stock_pulse.constants import RESPONSE_MIME_TYPE
from stock_pulse.exceptions import ConfigurationError, GatewayFailure
from stock_pulse.log_config import get_logger
from stock_pulse.market_config import MarketRegion, get_region_config, to_region
from stock_pulse.models import Source
from stock_pulse.prompts.market_prompts import (
    MARKET_OVERVIEW_PROMPT_TEMPLATE,
    STOCK_ANALYSIS_PROMPT_TEMPLATE,
)
from stock_pulse.settings_storage import get_gemini_api_key, get_model_name

logger = get_logger(__name__)

# ```json ... ``` または ``` ... ``` で囲まれたブロック
_FENCED_JSON = re.compile(r"```(?:json)?[ \t]*\r?\n?(.*?)\r?\n?[ \t]*```", re.DOTALL | re.IGNORECASE)


@dataclass(frozen=True)
class GatewayReply:
    """Geminiの生応答（本文テキストとグラウンディング引用）"""

    text: str
    citations: list[Source] = field(default_factory=list)


def extract_json(text: Optional[str]) -> Any:
    """
    応答テキストからJSONを取り出します。

    フェンス付きブロックがあればその中身を、なければ全文をパースします。

    Args:
        text: Geminiの応答テキスト

    Returns:
        パース結果。パースできない場合はNone
    """
    if not text:
        return None
    match = _FENCED_JSON.search(text)
    payload = match.group(1) if match else text
    try:
        return json.loads(payload.strip())
    except (json.JSONDecodeError, TypeError) as e:
        logger.warning(f"Failed to parse JSON from Gemini response: {e}")
        return None


def extract_citations(response: Any) -> list[Source]:
    """
    先頭候補のグラウンディングメタデータから参照ソースを取り出します。
    URIを持たない引用は除外します。
    """
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = (getattr(web, "uri", None) or "").strip()
        if not uri or uri == "#":
            continue
        title = (getattr(web, "title", None) or "").strip() or "Source"
        sources.append(Source(title=title, uri=uri))
    return sources


def build_overview_prompt(region: Union[str, MarketRegion]) -> str:
    """市場概況プロンプトを構築"""
    config = get_region_config(region)
    return MARKET_OVERVIEW_PROMPT_TEMPLATE.format(exchanges=config["exchanges"])


def build_stock_prompt(symbol: str, region: Union[str, MarketRegion]) -> str:
    """銘柄分析プロンプトを構築（銘柄コードはそのまま埋め込む）"""
    config = get_region_config(region)
    return STOCK_ANALYSIS_PROMPT_TEMPLATE.format(
        symbol=symbol, market_context=config["analysis_context"]
    )


class GeminiGateway:
    """Gemini generate_content 呼び出しの境界"""

    def __init__(self, api_key: str, model_name: Optional[str] = None):
        if not api_key or not api_key.strip():
            raise ConfigurationError("Gemini API key is missing")
        self._api_key = api_key.strip()
        self.model_name = model_name or get_model_name()

    @classmethod
    def from_settings(cls) -> "GeminiGateway":
        """保存済み設定（secrets/環境変数/ローカル）からゲートウェイを生成"""
        return cls(get_gemini_api_key())

    def _config(self) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            tools=[types.Tool(google_search=types.GoogleSearch())],
            response_mime_type=RESPONSE_MIME_TYPE,
        )

    async def _generate(self, prompt: str, label: str) -> Any:
        # asyncio.run ごとにイベントループが変わるため、クライアントは呼び出し毎に生成
        client = genai.Client(api_key=self._api_key)
        try:
            response = await client.aio.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=self._config(),
            )
        except Exception as e:
            logger.error(f"Gemini {label} error: {e}")
            raise GatewayFailure(f"Gemini request failed: {e}") from e

        if not getattr(response, "text", None):
            logger.error(f"Gemini {label} error: empty response")
            raise GatewayFailure("No response from Gemini")
        return response

    async def request_market_overview(self, region: Union[str, MarketRegion]) -> GatewayReply:
        """
        市場概況を依頼します。

        Raises:
            GatewayFailure: 通信エラーまたは空応答
        """
        region = to_region(region)
        logger.info(f"Requesting market overview for {region.value}")
        response = await self._generate(build_overview_prompt(region), "market overview")
        return GatewayReply(text=response.text)

    async def request_stock_analysis(
        self, symbol: str, region: Union[str, MarketRegion]
    ) -> GatewayReply:
        """
        銘柄分析を依頼します。グラウンディング引用も併せて返します。

        Raises:
            GatewayFailure: 通信エラーまたは空応答
        """
        region = to_region(region)
        symbol = symbol.strip()
        logger.info(f"Requesting stock analysis for {symbol} ({region.value})")
        response = await self._generate(build_stock_prompt(symbol, region), "stock analysis")
        return GatewayReply(text=response.text, citations=extract_citations(response))
