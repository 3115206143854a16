"""
Market Data API Endpoints

Headline market sentiment and ticker lookup with indicators.
"""

import logging
from fastapi import APIRouter, HTTPException

from app.schemas.market import MarketSentiment, StockData
from app.services.base import NotFoundError, ServiceError, ValidationError
from app.services.data_ingestion import get_market_data_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sentiment", response_model=list[MarketSentiment])
async def get_market_sentiment():
    """
    Day change (%) for S&P 500, NASDAQ, Dow Jones, Bitcoin and Gold.

    An instrument whose quote fails is returned with `change: null`.
    """
    service = get_market_data_service()

    try:
        return await service.get_market_sentiment()
    except Exception as e:
        logger.error(f"Market sentiment error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch market sentiment")


@router.get("/stock/{ticker}", response_model=StockData)
async def get_stock(ticker: str):
    """
    Quote, ~6 months of daily history and technical indicators.

    Indicators the history is too short for are null. A failing
    benchmark only nulls `relativeStrength`.

    Example: `/market/stock/AAPL`
    """
    service = get_market_data_service()

    try:
        return await service.execute(ticker)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ServiceError as e:
        logger.error(f"Stock fetch error for {ticker}: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch stock data")
