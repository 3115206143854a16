"""
Market Data Service Interface

Defines the contract for the stock lookup layer.
"""

from abc import abstractmethod

from app.services.base import BaseService
from app.schemas.market import MarketSentiment, StockData


class MarketDataServiceInterface(BaseService[str, StockData]):
    """
    Market Data Service Contract.

    INPUT: ticker symbol (any case)

    OUTPUT: StockData
        - basic_info: quote fields ("N/A" when missing)
        - indicators: TechnicalIndicators from the indicator engine
        - price_history: ~6 months of daily bars, positive closes only

    ERRORS:
        - ValidationError: empty ticker
        - NotFoundError: provider has no quote for the ticker
        - ExternalAPIError: quote or history request failed
        A failed benchmark request is NOT an error; relative strength is
        simply null.
    """

    @property
    def name(self) -> str:
        return "MarketDataService"

    @abstractmethod
    async def execute(self, input_data: str) -> StockData:
        """Look up a ticker and compute its indicators."""
        pass

    @abstractmethod
    async def get_market_sentiment(self) -> list[MarketSentiment]:
        """Day change for the headline indices, in fixed order."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check connectivity to the quote provider."""
        pass
