"""
CONTRACT 1: Market Data

Shapes returned by the quote/history provider and by the stock lookup
and market sentiment endpoints.
"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.schemas.indicators import TechnicalIndicators


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# MARKET SENTIMENT
# =============================================================================


class MarketSentiment(CamelModel):
    """Day change for one of the headline market instruments."""

    name: str
    symbol: str
    change: Optional[float] = Field(
        None, description="Regular market change in %, null if the quote failed"
    )


# =============================================================================
# STOCK LOOKUP
# =============================================================================


class PriceHistoryPoint(CamelModel):
    """One daily bar. Only the close is guaranteed."""

    date: str = Field(..., description="ISO-8601 timestamp of the bar")
    close: float
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    volume: Optional[float] = None


class QuoteSnapshot(CamelModel):
    """Quote fields as delivered by the provider (None when missing)."""

    symbol: str
    name: Optional[str] = None
    price: Optional[float] = None
    market_cap: Optional[float] = None
    pe_ratio: Optional[float] = None
    change_percent: Optional[float] = None


class StockBasicInfo(CamelModel):
    """Quote block of the stock lookup response. Missing numerics become "N/A"."""

    current_price: Union[float, str]
    market_cap: Union[float, str]
    pe_ratio: Union[float, str]
    name: Optional[str] = None
    symbol: Optional[str] = None

    @classmethod
    def from_quote(cls, quote: QuoteSnapshot) -> "StockBasicInfo":
        return cls(
            current_price=quote.price if quote.price else "N/A",
            market_cap=quote.market_cap if quote.market_cap else "N/A",
            pe_ratio=quote.pe_ratio if quote.pe_ratio else "N/A",
            name=quote.name or quote.symbol,
            symbol=quote.symbol,
        )


class StockData(CamelModel):
    """Full stock lookup payload."""

    basic_info: StockBasicInfo
    indicators: TechnicalIndicators
    price_history: list[PriceHistoryPoint]
