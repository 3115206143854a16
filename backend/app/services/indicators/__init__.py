"""
Indicator Engine Service

CONTRACT:
    Input:  IndicatorInput (daily closes + benchmark closes)
    Output: TechnicalIndicators

RESPONSIBILITIES:
    - SMA 50 / SMA 200
    - 30-day realized volatility
    - 14-day rate of change
    - Relative strength vs the benchmark index

PURE PYTHON - No I/O, no LLM involvement.
Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from app.services.indicators.interface import IndicatorInput, IndicatorServiceInterface
from app.services.indicators.service import IndicatorService, get_indicator_service
from app.services.indicators.calculations import compute_indicators, round_price

__all__ = [
    "IndicatorInput",
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
    "compute_indicators",
    "round_price",
]
