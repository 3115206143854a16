"""
News Service

Fetches business news from NewsAPI and tags each headline with a
keyword-based sentiment and a topic category.
"""

import asyncio
import logging
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional, List, Dict, Any

import aiohttp

from app.core.config import settings
from app.services.base import ConfigurationError, ExternalAPIError

logger = logging.getLogger(__name__)


class NewsSentiment(str, Enum):
    """News sentiment classification."""
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


SENTIMENT_COLORS = {
    NewsSentiment.BULLISH: "#10B981",
    NewsSentiment.BEARISH: "#EF4444",
    NewsSentiment.NEUTRAL: "#9CA3AF",
}

# Bearish words win when a headline matches both lists
BEARISH_KEYWORDS = [
    "falls", "drop", "plunge", "down", "loss",
    "selloff", "cuts", "fears", "crash", "decline",
]

BULLISH_KEYWORDS = [
    "jumps", "rises", "up", "soars", "beats",
    "growth", "record", "rally", "surge", "gain",
]

# First match wins
CATEGORY_KEYWORDS = [
    ("Crypto", ["bitcoin", "crypto"]),
    ("Macro", ["fed", "inflation"]),
    ("Earnings", ["earnings"]),
    ("Politics", ["trump", "election"]),
]
DEFAULT_CATEGORY = "Markets"


@dataclass
class NewsArticle:
    """A news article."""
    title: str
    source: str
    image: Optional[str] = None
    url: Optional[str] = None
    published: Optional[str] = None
    sentiment: NewsSentiment = NewsSentiment.NEUTRAL
    sentiment_color: str = SENTIMENT_COLORS[NewsSentiment.NEUTRAL]
    category: str = DEFAULT_CATEGORY

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["sentiment"] = self.sentiment.value
        d["sentimentColor"] = d.pop("sentiment_color")
        return d


def classify_headline(title: str) -> tuple[NewsSentiment, str, str]:
    """
    Classify a headline by substring keyword matching.

    Returns (sentiment, color, category).
    """
    text = (title or "").lower()

    if any(kw in text for kw in BEARISH_KEYWORDS):
        sentiment = NewsSentiment.BEARISH
    elif any(kw in text for kw in BULLISH_KEYWORDS):
        sentiment = NewsSentiment.BULLISH
    else:
        sentiment = NewsSentiment.NEUTRAL

    category = DEFAULT_CATEGORY
    for name, keywords in CATEGORY_KEYWORDS:
        if any(kw in text for kw in keywords):
            category = name
            break

    return sentiment, SENTIMENT_COLORS[sentiment], category


def parse_articles(raw_articles: List[Dict[str, Any]], limit: int) -> List[NewsArticle]:
    """
    Normalize NewsAPI articles, skipping repeated URLs, up to `limit`.

    Articles without a URL are always kept.
    """
    seen_urls = set()
    articles: List[NewsArticle] = []

    for raw in raw_articles or []:
        if len(articles) >= limit:
            break

        url = raw.get("url") or ""
        if url and url in seen_urls:
            continue
        if url:
            seen_urls.add(url)

        title = raw.get("title") or ""
        sentiment, color, category = classify_headline(title)
        source = raw.get("source") or {}

        articles.append(NewsArticle(
            title=title or "No Title",
            source=source.get("name") or "Unknown",
            image=raw.get("urlToImage") or None,
            url=url or None,
            published=raw.get("publishedAt") or None,
            sentiment=sentiment,
            sentiment_color=color,
            category=category,
        ))

    return articles


class NewsService:
    """
    Service for fetching and classifying business news.

    Source: NewsAPI /everything (requires NEWS_API_KEY)
    """

    name = "NewsService"

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.news_api_key
        self.base_url = base_url or settings.news_api_base_url
        self._session: Optional[aiohttp.ClientSession] = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure we have an active HTTP session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=10),
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def _fetch_raw(self, query: str, page_size: int) -> List[Dict[str, Any]]:
        session = await self._ensure_session()
        params = {
            "q": query,
            "language": "en",
            "sortBy": "publishedAt",
            "pageSize": str(page_size),
            "apiKey": self.api_key,
        }

        try:
            async with session.get(f"{self.base_url}/everything", params=params) as response:
                if response.status != 200:
                    logger.warning(f"NewsAPI returned status {response.status}")
                    raise ExternalAPIError(self.name, "Failed to fetch news", {"status": response.status})
                data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            logger.error(f"Error fetching NewsAPI: {e}")
            raise ExternalAPIError(self.name, "Failed to fetch news", {"error": str(e)}) from e

        return data.get("articles") or []

    async def get_latest_news(
        self,
        query: Optional[str] = None,
        num_results: Optional[int] = None,
    ) -> List[NewsArticle]:
        """
        Get the latest business headlines, newest first.

        Raises:
            ConfigurationError: no API key
            ExternalAPIError: NewsAPI request failed
        """
        if not self.api_key:
            raise ConfigurationError(self.name, "News API key not configured")

        raw = await self._fetch_raw(query or settings.news_query, settings.news_page_size)
        return parse_articles(raw, num_results or settings.news_max_articles)


# Singleton instance
_news_service: Optional[NewsService] = None


def get_news_service() -> NewsService:
    """Get the news service singleton."""
    global _news_service
    if _news_service is None:
        _news_service = NewsService()
    return _news_service
