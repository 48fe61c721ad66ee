import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from stock_pulse.gemini_gateway import GatewayReply, GeminiGateway

OVERVIEW_PAYLOAD = {
    "indices": [
        {"name": "S&P 500", "value": "5,321.40", "change": "+0.52%", "trend": "up"},
        {"name": "NASDAQ", "value": "16,920.58", "change": "-0.12%", "trend": "down"},
    ],
    "sentiment": "Investors remain cautiously optimistic ahead of the Fed meeting.",
    "hotIndustries": [
        {"name": "Semiconductors", "description": "AI demand", "momentum": "high"},
        {"name": "Utilities", "description": "Defensive rotation", "momentum": "low"},
    ],
    "trendingPoint": "Fed rate decision this week.",
    "lastUpdated": "2026-10-16T14:30:00Z",
}

STOCK_PAYLOAD = {
    "symbol": "NVDA",
    "name": "NVIDIA Corporation",
    "price": "$121.40",
    "changePercent": "+1.2%",
    "marketCap": "$2.98T",
    "peRatio": "68.5",
    "sector": "Semiconductors",
    "summary": "NVIDIA continues to dominate the AI accelerator market.",
    "bullCase": ["Data center growth", "CUDA moat", "New product cycle"],
    "bearCase": ["Valuation", "Export restrictions"],
    "verdict": "Buy",
}


def make_response(text, chunks=None):
    """Gemini応答オブジェクトの簡易スタブ"""
    metadata = SimpleNamespace(grounding_chunks=chunks or [])
    return SimpleNamespace(
        text=text, candidates=[SimpleNamespace(grounding_metadata=metadata)]
    )


def make_chunk(title, uri):
    return SimpleNamespace(web=SimpleNamespace(title=title, uri=uri))


@pytest.fixture
def overview_payload():
    return json.loads(json.dumps(OVERVIEW_PAYLOAD))


@pytest.fixture
def stock_payload():
    return json.loads(json.dumps(STOCK_PAYLOAD))


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from real secrets, env keys and data/settings.json."""
    for name in ("GEMINI_API_KEY", "API_KEY", "GEMINI_MODEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("stock_pulse.settings_storage.SETTINGS_DIR", tmp_path)
    monkeypatch.setattr(
        "stock_pulse.settings_storage.SETTINGS_FILE", tmp_path / "settings.json"
    )
    monkeypatch.setattr("stock_pulse.settings_storage._settings_cache", None)
    with patch("stock_pulse.settings_storage._get_secret", return_value="") as mock_secret:
        yield mock_secret


@pytest.fixture(autouse=True)
def mock_genai_client():
    """Mock google-genai client for all tests."""
    with patch("stock_pulse.gemini_gateway.genai.Client") as mock_client_class:
        mock_client = MagicMock()
        mock_client.aio.models.generate_content = AsyncMock(
            return_value=make_response(json.dumps(OVERVIEW_PAYLOAD))
        )
        mock_client_class.return_value = mock_client
        yield mock_client


@pytest.fixture
def fake_gateway():
    """GeminiGateway stand-in returning the sample payloads."""
    gateway = MagicMock(spec=GeminiGateway)
    gateway.request_market_overview = AsyncMock(
        return_value=GatewayReply(text=json.dumps(OVERVIEW_PAYLOAD))
    )
    gateway.request_stock_analysis = AsyncMock(
        return_value=GatewayReply(text=json.dumps(STOCK_PAYLOAD))
    )
    return gateway


@pytest.fixture
def gemini_response():
    return make_response


@pytest.fixture
def grounding_chunk():
    return make_chunk
