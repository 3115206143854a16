"""
News API Endpoints

Latest business news with headline sentiment.
"""

import logging
from fastapi import APIRouter, HTTPException

from app.services.base import ConfigurationError, ExternalAPIError
from app.services.news import get_news_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def get_news():
    """
    Latest stock/business headlines (up to 6, de-duplicated by URL).

    Each article carries a Bullish/Bearish/Neutral tag, its display
    color and a topic category.
    """
    news_service = get_news_service()

    try:
        articles = await news_service.get_latest_news()
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=e.message)
    except ExternalAPIError as e:
        logger.error(f"News fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch news")

    return [a.to_dict() for a in articles]
