"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the dashboard indicators.
NO I/O - All math is deterministic.

Every function takes closes in chronological (ascending) order and works
on trailing "last N" slices. Insufficient or malformed input gives None,
never an exception.
"""

import math
from typing import Optional, Sequence

import numpy as np

from app.schemas.indicators import TechnicalIndicators


SMA_SHORT_PERIOD = 50
SMA_LONG_PERIOD = 200
VOLATILITY_WINDOW = 30
ROC_PERIOD = 14
RELATIVE_STRENGTH_WINDOW = 30

# Nothing beyond SMA 50 is attempted on shorter series.
MIN_HISTORY = SMA_SHORT_PERIOD


# =============================================================================
# HELPERS
# =============================================================================


def round_price(value: Optional[float]) -> Optional[float]:
    """
    Round to 2 decimals, half away from zero.

    Non-finite values (NaN, inf) collapse to None.
    """
    if value is None or not math.isfinite(value):
        return None
    return math.copysign(math.floor(abs(value) * 100 + 0.5), value) / 100


def _usable(value: float) -> bool:
    """A price can be used as a denominator: non-zero and not NaN."""
    return bool(value) and not math.isnan(value)


def _as_array(values: Optional[Sequence[float]]) -> np.ndarray:
    if values is None:
        return np.empty(0)
    try:
        return np.asarray(values, dtype=float).ravel()
    except (TypeError, ValueError):
        return np.empty(0)


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def sma(closes: np.ndarray, period: int) -> Optional[float]:
    """Simple moving average of the last `period` closes."""
    if len(closes) < period:
        return None
    return float(np.mean(closes[-period:]))


# =============================================================================
# VOLATILITY & MOMENTUM
# =============================================================================


def realized_volatility(closes: np.ndarray, window: int = VOLATILITY_WINDOW) -> Optional[float]:
    """
    Population standard deviation of daily simple returns, in %.

    Uses the last `window` closes (window - 1 returns). Returns whose
    previous close is zero are skipped. Not annualized.
    """
    if len(closes) < window:
        return None

    tail = closes[-window:]
    returns = [
        (tail[i] - tail[i - 1]) / tail[i - 1]
        for i in range(1, len(tail))
        if _usable(tail[i - 1])
    ]
    if not returns:
        return None

    returns = np.asarray(returns)
    variance = np.mean((returns - np.mean(returns)) ** 2)
    return float(np.sqrt(variance) * 100)


def rate_of_change(closes: np.ndarray, period: int = ROC_PERIOD) -> Optional[float]:
    """Percent change between the last close and the close `period` days before."""
    if len(closes) < period + 1:
        return None

    current = closes[-1]
    previous = closes[-(period + 1)]
    if not _usable(previous):
        return None
    return float((current - previous) / previous * 100)


def relative_strength(
    closes: np.ndarray,
    benchmark_closes: np.ndarray,
    window: int = RELATIVE_STRENGTH_WINDOW,
) -> Optional[float]:
    """
    Stock return over the last `window` closes minus the benchmark return
    over its whole series, in %.
    """
    if len(closes) < window or len(benchmark_closes) < 2:
        return None

    start = closes[-window]
    bench_start = benchmark_closes[0]
    if not _usable(start) or not _usable(bench_start):
        return None

    stock_return = (closes[-1] - start) / start
    benchmark_return = (benchmark_closes[-1] - bench_start) / bench_start
    return float((stock_return - benchmark_return) * 100)


# =============================================================================
# INDICATOR SET
# =============================================================================


def compute_indicators(
    closes: Optional[Sequence[float]],
    benchmark_closes: Optional[Sequence[float]] = None,
) -> TechnicalIndicators:
    """
    Compute the full indicator set from daily closes.

    Args:
        closes: Daily closes, oldest first
        benchmark_closes: Benchmark daily closes over its own (shorter)
            window, oldest first. Empty when the benchmark is unavailable.

    Returns:
        TechnicalIndicators with None for every field the history is too
        short for. Each field is rounded once, at the end.
    """
    prices = _as_array(closes)
    benchmark = _as_array(benchmark_closes)

    if len(prices) < MIN_HISTORY:
        return TechnicalIndicators()

    return TechnicalIndicators(
        sma50=round_price(sma(prices, SMA_SHORT_PERIOD)),
        sma200=round_price(sma(prices, SMA_LONG_PERIOD)),
        volatility=round_price(realized_volatility(prices)),
        roc=round_price(rate_of_change(prices)),
        relative_strength=round_price(relative_strength(prices, benchmark)),
    )
