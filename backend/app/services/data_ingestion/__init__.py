"""
Market Data Service

CONTRACT:
    Input:  ticker symbol
    Output: StockData (quote + indicators + daily history)

RESPONSIBILITIES:
    - Fetch quotes and daily OHLCV history from Yahoo Finance
    - Fetch the benchmark series for relative strength
    - Drop bars without a positive close
    - Headline market sentiment (index day changes)

NO LLM INVOLVEMENT - Pure data fetching and transformation.
"""

from app.services.data_ingestion.interface import MarketDataServiceInterface
from app.services.data_ingestion.service import (
    MARKET_INDICES,
    MarketDataService,
    get_market_data_service,
)

__all__ = [
    "MARKET_INDICES",
    "MarketDataServiceInterface",
    "MarketDataService",
    "get_market_data_service",
]
