"""
Data Models
Dataclass representations of the Gemini replies with explicit schema validation.

``from_dict`` accepts the camelCase keys the prompts ask Gemini for and raises
NormalizationFailure when a required field is missing or an enumerated value
cannot be coerced.
"""
from dataclasses import dataclass, field
from typing import Any, Optional

from stock_pulse.exceptions import NormalizationFailure

TRENDS = ("up", "down", "neutral")
MOMENTUMS = ("high", "medium", "low")
VERDICTS = ("Buy", "Hold", "Sell", "Neutral")

_VERDICT_ALIASES = {
    "strong buy": "Buy",
    "strong sell": "Sell",
}


def _require(data: dict, key: str, context: str) -> Any:
    if key not in data or data[key] is None:
        raise NormalizationFailure(f"{context}: missing required field '{key}'")
    return data[key]


def _as_text(value: Any, key: str, context: str) -> str:
    """文字列化（数値は表示用文字列に変換）"""
    if isinstance(value, bool) or isinstance(value, (dict, list)):
        raise NormalizationFailure(f"{context}: field '{key}' must be text")
    return str(value).strip()


def _as_object(value: Any, context: str) -> dict:
    if not isinstance(value, dict):
        raise NormalizationFailure(f"{context}: expected a JSON object")
    return value


def _as_list(value: Any, key: str, context: str) -> list:
    if not isinstance(value, list):
        raise NormalizationFailure(f"{context}: field '{key}' must be a list")
    return value


def coerce_trend(value: Any, change: str = "") -> str:
    """trendを正規化。不明な値は変動率の符号から推定する"""
    text = str(value or "").strip().lower()
    if text in TRENDS:
        return text
    if change.startswith("+"):
        return "up"
    if change.startswith("-"):
        return "down"
    return "neutral"


def coerce_momentum(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text not in MOMENTUMS:
        raise NormalizationFailure(f"IndustryTrend: invalid momentum {value!r}")
    return text


def coerce_verdict(value: Any) -> str:
    """verdictを4値のいずれかに正規化（該当なしはNeutral）"""
    text = str(value or "").strip()
    for verdict in VERDICTS:
        if text.lower() == verdict.lower():
            return verdict
    return _VERDICT_ALIASES.get(text.lower(), "Neutral")


@dataclass(frozen=True)
class MarketIndex:
    """Market index quote (pre-formatted display strings)."""

    name: str
    value: str
    change: str
    trend: str  # up / down / neutral

    @classmethod
    def from_dict(cls, data: Any) -> "MarketIndex":
        context = "MarketIndex"
        data = _as_object(data, context)
        change = _as_text(data.get("change") or "", "change", context)
        return cls(
            name=_as_text(_require(data, "name", context), "name", context),
            value=_as_text(_require(data, "value", context), "value", context),
            change=change,
            trend=coerce_trend(data.get("trend"), change),
        )


@dataclass(frozen=True)
class IndustryTrend:
    """Hot industry narrative."""

    name: str
    description: str
    momentum: str  # high / medium / low

    @classmethod
    def from_dict(cls, data: Any) -> "IndustryTrend":
        context = "IndustryTrend"
        data = _as_object(data, context)
        return cls(
            name=_as_text(_require(data, "name", context), "name", context),
            description=_as_text(data.get("description") or "", "description", context),
            momentum=coerce_momentum(_require(data, "momentum", context)),
        )


@dataclass(frozen=True)
class MarketOverview:
    """AI-generated snapshot of one region."""

    indices: list[MarketIndex]
    sentiment: str
    hot_industries: list[IndustryTrend]
    trending_point: str
    last_updated: str

    @classmethod
    def from_dict(cls, data: Any, default_timestamp: str = "") -> "MarketOverview":
        context = "MarketOverview"
        data = _as_object(data, context)
        indices = _as_list(_require(data, "indices", context), "indices", context)
        industries = _as_list(
            _require(data, "hotIndustries", context), "hotIndustries", context
        )
        last_updated = data.get("lastUpdated")
        return cls(
            indices=[MarketIndex.from_dict(item) for item in indices],
            sentiment=_as_text(_require(data, "sentiment", context), "sentiment", context),
            hot_industries=[IndustryTrend.from_dict(item) for item in industries],
            trending_point=_as_text(
                _require(data, "trendingPoint", context), "trendingPoint", context
            ),
            last_updated=(
                _as_text(last_updated, "lastUpdated", context)
                if last_updated
                else default_timestamp
            ),
        )


@dataclass(frozen=True)
class Source:
    """Grounding citation attached by Google Search."""

    title: str
    uri: str


@dataclass(frozen=True)
class StockData:
    """AI-generated equity analysis of a single ticker."""

    symbol: str
    name: str
    price: str
    change_percent: str
    market_cap: str
    pe_ratio: str
    sector: str
    summary: str
    bull_case: list[str]
    bear_case: list[str]
    verdict: str  # Buy / Hold / Sell / Neutral
    sources: list[Source] = field(default_factory=list)

    @classmethod
    def from_dict(
        cls, data: Any, sources: Optional[list[Source]] = None
    ) -> "StockData":
        context = "StockData"
        data = _as_object(data, context)

        def text(key: str, default: Optional[str] = None) -> str:
            if default is not None and data.get(key) is None:
                return default
            return _as_text(_require(data, key, context), key, context)

        def points(key: str) -> list[str]:
            items = _as_list(_require(data, key, context), key, context)
            return [_as_text(item, key, context) for item in items]

        return cls(
            symbol=text("symbol"),
            name=text("name"),
            price=text("price"),
            change_percent=text("changePercent"),
            market_cap=text("marketCap", "N/A"),
            pe_ratio=text("peRatio", "N/A"),
            sector=text("sector", "N/A"),
            summary=text("summary"),
            bull_case=points("bullCase"),
            bear_case=points("bearCase"),
            verdict=coerce_verdict(_require(data, "verdict", context)),
            sources=list(sources or []),
        )

    @property
    def is_positive(self) -> bool:
        """変動率が上昇表示かどうか（'-' を含まなければ上昇扱い）"""
        return "+" in self.change_percent or "-" not in self.change_percent

    @property
    def bullish_ratio(self) -> Optional[float]:
        """強気材料の割合（材料がない場合はNone）"""
        total = len(self.bull_case) + len(self.bear_case)
        if total == 0:
            return None
        return len(self.bull_case) / total
