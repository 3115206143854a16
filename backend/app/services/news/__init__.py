"""
News Integration Service

Fetches and classifies business news.
"""

from app.services.news.service import (
    NewsService,
    get_news_service,
    NewsArticle,
    NewsSentiment,
    classify_headline,
    parse_articles,
)

__all__ = [
    "NewsService",
    "get_news_service",
    "NewsArticle",
    "NewsSentiment",
    "classify_headline",
    "parse_articles",
]
