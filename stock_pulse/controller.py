"""
ダッシュボード状態コントローラー
選択リージョン・市場概況キャッシュ・銘柄分析結果を一元管理し、
Gemini呼び出しの結果を一度の状態更新として反映します。
"""
import asyncio
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Union

from stock_pulse.constants import ANALYSIS_ERROR_MESSAGE, OVERVIEW_ERROR_MESSAGE
from stock_pulse.gemini_gateway import GeminiGateway
from stock_pulse.log_config import get_logger
from stock_pulse.market_config import MarketRegion, to_region
from stock_pulse.market_service import analyze_stock, fetch_market_overview
from stock_pulse.models import MarketOverview, StockData

logger = get_logger(__name__)

MODE_OVERVIEW = "overview"
MODE_ANALYSIS = "analysis"


@dataclass(frozen=True)
class DashboardState:
    """画面描画に渡す状態（更新時は丸ごと置き換える）"""

    active_region: MarketRegion = MarketRegion.US
    overview_cache: Mapping[MarketRegion, MarketOverview] = field(default_factory=dict)
    is_loading_overview: bool = False
    stock_query: str = ""
    is_analyzing: bool = False
    stock_data: Optional[StockData] = None
    error: Optional[str] = None

    @property
    def active_overview(self) -> Optional[MarketOverview]:
        return self.overview_cache.get(self.active_region)

    @property
    def display_mode(self) -> str:
        return MODE_ANALYSIS if self.stock_data is not None else MODE_OVERVIEW


class DashboardController:
    """
    1セッションにつき1インスタンス。

    市場概況はリージョンごとに一度だけ取得してキャッシュします（失効なし）。
    同一リージョンの取得が並行した場合は実行中のタスクを共有します。
    """

    def __init__(self, gateway: GeminiGateway):
        self._gateway = gateway
        self._state = DashboardState()
        self._inflight: dict[MarketRegion, asyncio.Task] = {}
        self._loading_regions: set[MarketRegion] = set()
        self._failed_regions: set[MarketRegion] = set()
        self._analysis_seq = 0

    @classmethod
    def from_settings(cls) -> "DashboardController":
        """
        保存済み設定からコントローラーを生成します。

        Raises:
            ConfigurationError: APIキーが未設定の場合
        """
        return cls(GeminiGateway.from_settings())

    def snapshot(self) -> DashboardState:
        """Presentation layer 向けの現在状態"""
        return self._state

    @property
    def display_mode(self) -> str:
        return self._state.display_mode

    def _commit(self, **changes) -> None:
        self._state = replace(self._state, **changes)

    # === リージョン / 市場概況 ===

    def select_region(self, region: Union[str, MarketRegion]) -> None:
        """
        選択リージョンを変更（取得は ensure_overview_loaded で行う）。

        読み込みに失敗したリージョンは、再選択されるまで再取得しません。
        """
        region = to_region(region)
        self._failed_regions.discard(region)
        self._commit(active_region=region)

    async def ensure_overview_loaded(
        self, region: Union[str, MarketRegion, None] = None
    ) -> Optional[MarketOverview]:
        """
        キャッシュに無ければ市場概況を取得します。

        Args:
            region: 対象リージョン（省略時は選択中のリージョン）

        Returns:
            キャッシュ済みまたは取得した MarketOverview（失敗時None）
        """
        region = self._state.active_region if region is None else to_region(region)
        cached = self._state.overview_cache.get(region)
        if cached is not None:
            logger.info(f"Overview cache hit: {region.value}")
            return cached
        if region in self._failed_regions:
            return None

        task = self._inflight.get(region)
        if task is None:
            task = asyncio.ensure_future(self._load_overview(region))
            self._inflight[region] = task
            task.add_done_callback(lambda _t, r=region: self._inflight.pop(r, None))
        else:
            logger.info(f"Overview fetch already in flight: {region.value}")
        return await task

    async def _load_overview(self, region: MarketRegion) -> Optional[MarketOverview]:
        self._loading_regions.add(region)
        self._commit(is_loading_overview=True, error=None)
        try:
            overview = await fetch_market_overview(self._gateway, region)
        except Exception as e:
            logger.exception(f"Market overview load failed for {region.value}: {e}")
            self._loading_regions.discard(region)
            self._failed_regions.add(region)
            self._commit(
                is_loading_overview=bool(self._loading_regions),
                error=OVERVIEW_ERROR_MESSAGE,
            )
            return None
        finally:
            self._loading_regions.discard(region)

        cache = dict(self._state.overview_cache)
        cache[region] = overview
        self._commit(
            overview_cache=cache,
            is_loading_overview=bool(self._loading_regions),
        )
        return overview

    # === 銘柄分析 ===

    def set_stock_query(self, text: str) -> None:
        """検索欄の入力値を保持"""
        self._commit(stock_query=text or "")

    async def submit_stock_query(self, raw_symbol: Optional[str] = None) -> Optional[StockData]:
        """
        銘柄分析を実行します。空白のみの入力は何もしません。

        Args:
            raw_symbol: 銘柄コード（省略時は保持中の入力値）

        Returns:
            成功時 StockData、失敗・無視時None
        """
        raw = self._state.stock_query if raw_symbol is None else raw_symbol
        symbol = (raw or "").strip()
        if not symbol:
            return None

        region = self._state.active_region
        self._analysis_seq += 1
        seq = self._analysis_seq
        self._commit(stock_query=raw, is_analyzing=True, stock_data=None, error=None)

        try:
            data = await analyze_stock(self._gateway, symbol, region)
        except Exception as e:
            logger.error(f"Stock analysis failed for {symbol} ({region.value}): {e}")
            if seq == self._analysis_seq:
                self._commit(is_analyzing=False, stock_data=None, error=ANALYSIS_ERROR_MESSAGE)
            return None

        # 後から送信された分析があれば、古い結果は反映しない
        if seq != self._analysis_seq:
            logger.info(f"Discarding stale analysis result for {symbol}")
            return None
        self._commit(is_analyzing=False, stock_data=data)
        return data

    def clear_analysis(self) -> None:
        """分析結果と入力値をクリアして市場概況表示に戻す"""
        self._commit(stock_data=None, stock_query="")
