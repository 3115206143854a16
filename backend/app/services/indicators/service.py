"""
Indicator Engine Service Implementation

Thin service wrapper over the pure calculations.
NO I/O - holds no state, safe to share across requests.
"""

import logging
from typing import Optional

from app.schemas.indicators import TechnicalIndicators
from app.services.indicators.interface import IndicatorInput, IndicatorServiceInterface
from app.services.indicators.calculations import compute_indicators

logger = logging.getLogger(__name__)


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    All calculations are deterministic and reproducible.
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    async def execute(self, input_data: IndicatorInput) -> TechnicalIndicators:
        return self.calculate(list(input_data.closes), list(input_data.benchmark_closes))

    def calculate(
        self,
        closes: list[float],
        benchmark_closes: list[float],
    ) -> TechnicalIndicators:
        indicators = compute_indicators(closes, benchmark_closes)
        if indicators.is_empty():
            logger.debug(f"Not enough history for indicators ({len(closes)} closes)")
        return indicators

    async def health_check(self) -> bool:
        return True


# Singleton instance
_indicator_service: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get the indicator service singleton."""
    global _indicator_service
    if _indicator_service is None:
        _indicator_service = IndicatorService()
    return _indicator_service
