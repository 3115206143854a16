"""
CONTRACT 2: Indicator Engine

Input: IndicatorInput (daily closes + benchmark closes)
Output: TechnicalIndicators

This module describes the values produced by the indicator engine.
Every field is optional: null means "not enough history", never
"request failed".
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TechnicalIndicators(BaseModel):
    """
    Indicator set for a single ticker.

    Serialized with camelCase keys (sma50, sma200, volatility, roc,
    relativeStrength) to match the dashboard client.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    sma50: Optional[float] = Field(None, description="50-day simple moving average")
    sma200: Optional[float] = Field(None, description="200-day simple moving average")
    volatility: Optional[float] = Field(
        None, description="30-day realized volatility of daily returns, in %"
    )
    roc: Optional[float] = Field(None, description="14-day rate of change, in %")
    relative_strength: Optional[float] = Field(
        None, description="Trailing return minus benchmark return, in %"
    )

    def is_empty(self) -> bool:
        """True when no indicator could be computed."""
        return all(value is None for value in self.model_dump().values())
