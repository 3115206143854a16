"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod
from dataclasses import dataclass, field

from app.services.base import BaseService
from app.schemas.indicators import TechnicalIndicators


@dataclass(frozen=True)
class IndicatorInput:
    """Closing prices for one ticker plus the benchmark, both oldest first."""

    closes: tuple[float, ...] = ()
    benchmark_closes: tuple[float, ...] = field(default_factory=tuple)


class IndicatorServiceInterface(BaseService[IndicatorInput, TechnicalIndicators]):
    """
    Indicator Engine Service Contract.

    INPUT: IndicatorInput
        - closes: Daily closes, chronological ascending
        - benchmark_closes: Benchmark closes over a trailing ~1 month window

    OUTPUT: TechnicalIndicators
        - sma50, sma200: price units
        - volatility, roc, relative_strength: signed percentages
        - Any field may be None when history is too short
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: IndicatorInput) -> TechnicalIndicators:
        """Calculate the indicator set."""
        pass

    @abstractmethod
    def calculate(
        self,
        closes: list[float],
        benchmark_closes: list[float],
    ) -> TechnicalIndicators:
        """Synchronous variant for callers already holding plain lists."""
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Indicator service is always healthy (pure computation)."""
        pass
