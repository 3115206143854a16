"""
StockSense Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from app.schemas.market import (
    MarketSentiment,
    PriceHistoryPoint,
    QuoteSnapshot,
    StockBasicInfo,
    StockData,
)
from app.schemas.indicators import TechnicalIndicators
from app.schemas.auth import Credentials, User, UserResponse
from app.schemas.report import ChatRequest, ChatResponse, PdfReportRequest

__all__ = [
    # Market
    "MarketSentiment",
    "PriceHistoryPoint",
    "QuoteSnapshot",
    "StockBasicInfo",
    "StockData",
    # Indicators
    "TechnicalIndicators",
    # Auth
    "Credentials",
    "User",
    "UserResponse",
    # Chat & reports
    "ChatRequest",
    "ChatResponse",
    "PdfReportRequest",
]
