"""
Market Data Service Implementation

Stock lookup and headline market sentiment.
Source: Yahoo Finance (quotes, daily history, benchmark series)
"""

import asyncio
import logging
from typing import Optional

from app.core.config import settings
from app.schemas.market import MarketSentiment, StockBasicInfo, StockData
from app.services.base import ExternalAPIError, NotFoundError, ValidationError
from app.services.data_ingestion import yahoo_adapter
from app.services.data_ingestion.interface import MarketDataServiceInterface
from app.services.indicators import get_indicator_service
from app.services.indicators.calculations import MIN_HISTORY, round_price

logger = logging.getLogger(__name__)

# Headline instruments for the sentiment heatmap, in display order
MARKET_INDICES = [
    ("S&P 500", "^GSPC"),
    ("NASDAQ", "^IXIC"),
    ("Dow Jones", "^DJI"),
    ("Bitcoin", "BTC-USD"),
    ("Gold", "GC=F"),
]


class MarketDataService(MarketDataServiceInterface):
    """
    Market Data Service.

    Quote and history are fetched concurrently. The benchmark series is
    fetched only when the history is long enough for anything beyond
    SMA 50, and its failure never fails the lookup.
    """

    def __init__(self, benchmark_symbol: Optional[str] = None):
        self.benchmark_symbol = benchmark_symbol or settings.benchmark_symbol

    @property
    def name(self) -> str:
        return "MarketDataService"

    async def validate_input(self, input_data: str) -> str:
        ticker = (input_data or "").strip().upper()
        if not ticker:
            raise ValidationError(self.name, "Ticker is required")
        return ticker

    async def execute(self, input_data: str) -> StockData:
        ticker = await self.validate_input(input_data)

        quote, history = await asyncio.gather(
            yahoo_adapter.fetch_quote(ticker),
            yahoo_adapter.fetch_history(ticker, yahoo_adapter.months_ago(settings.history_months)),
        )
        if quote is None:
            raise NotFoundError(self.name, f"No quote data for {ticker}")

        closes = [point.close for point in history]
        benchmark_closes = await self._benchmark_closes() if len(closes) >= MIN_HISTORY else []

        indicators = get_indicator_service().calculate(closes, benchmark_closes)
        logger.info(f"Looked up {ticker}: {len(closes)} bars, {len(benchmark_closes)} benchmark bars")

        return StockData(
            basic_info=StockBasicInfo.from_quote(quote),
            indicators=indicators,
            price_history=history,
        )

    async def _benchmark_closes(self) -> list[float]:
        """Benchmark closes for relative strength, empty on any provider failure."""
        try:
            return await yahoo_adapter.fetch_closes(
                self.benchmark_symbol,
                yahoo_adapter.months_ago(settings.benchmark_months),
            )
        except ExternalAPIError as e:
            logger.warning(f"Benchmark {self.benchmark_symbol} unavailable, skipping relative strength: {e}")
            return []

    async def _sentiment_for(self, name: str, symbol: str) -> MarketSentiment:
        try:
            quote = await yahoo_adapter.fetch_quote(symbol)
        except ExternalAPIError:
            return MarketSentiment(name=name, symbol=symbol, change=None)

        change = quote.change_percent if quote else None
        return MarketSentiment(name=name, symbol=symbol, change=round_price(change))

    async def get_market_sentiment(self) -> list[MarketSentiment]:
        return list(
            await asyncio.gather(
                *(self._sentiment_for(name, symbol) for name, symbol in MARKET_INDICES)
            )
        )

    async def health_check(self) -> bool:
        try:
            return await yahoo_adapter.fetch_quote(self.benchmark_symbol) is not None
        except ExternalAPIError:
            return False


# Singleton instance
_market_data_service: Optional[MarketDataService] = None


def get_market_data_service() -> MarketDataService:
    """Get the market data service singleton."""
    global _market_data_service
    if _market_data_service is None:
        _market_data_service = MarketDataService()
    return _market_data_service
