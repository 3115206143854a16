"""
Yahoo Finance Data Adapter

Fetches REAL market data from Yahoo Finance.
yfinance is synchronous, so every call runs in the default executor.
"""

import asyncio
import calendar
import logging
import math
from datetime import date, datetime
from typing import Optional

import yfinance as yf

from app.schemas.market import PriceHistoryPoint, QuoteSnapshot
from app.services.base import ExternalAPIError

logger = logging.getLogger(__name__)

SERVICE_NAME = "YahooFinance"


def months_ago(months: int, today: Optional[date] = None) -> date:
    """Same day `months` calendar months back, clamped to the month's end."""
    today = today or date.today()
    month_index = today.year * 12 + (today.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(today.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _number(value) -> Optional[float]:
    """Coerce a provider field to float, None for missing/NaN."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


async def _run(func, *args):
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


def _quote_sync(symbol: str) -> Optional[QuoteSnapshot]:
    info = yf.Ticker(symbol).info or {}

    price = _number(info.get("regularMarketPrice")) or _number(info.get("currentPrice"))
    name = info.get("shortName") or info.get("longName")
    if price is None and name is None:
        return None

    return QuoteSnapshot(
        symbol=symbol,
        name=name,
        price=price,
        market_cap=_number(info.get("marketCap")),
        pe_ratio=_number(info.get("trailingPE")),
        change_percent=_number(info.get("regularMarketChangePercent")),
    )


def _history_sync(symbol: str, start: date, interval: str) -> list[PriceHistoryPoint]:
    hist = yf.Ticker(symbol).history(start=start.isoformat(), interval=interval, auto_adjust=False)
    if hist is None or hist.empty:
        return []

    points = []
    for idx, row in hist.iterrows():
        close = _number(row.get("Close"))
        # Bars without a positive close never reach the indicator engine
        if close is None or close <= 0:
            continue

        ts = idx.to_pydatetime() if hasattr(idx, "to_pydatetime") else datetime.fromisoformat(str(idx))
        points.append(
            PriceHistoryPoint(
                date=ts.isoformat(),
                close=close,
                open=_number(row.get("Open")),
                high=_number(row.get("High")),
                low=_number(row.get("Low")),
                volume=_number(row.get("Volume")),
            )
        )
    return points


async def fetch_quote(symbol: str) -> Optional[QuoteSnapshot]:
    """
    Get the current quote for a symbol.

    Returns:
        QuoteSnapshot, or None when Yahoo knows nothing about the symbol

    Raises:
        ExternalAPIError: network or provider failure
    """
    try:
        logger.info(f"Fetching quote for {symbol} from Yahoo Finance...")
        return await _run(_quote_sync, symbol)
    except Exception as e:
        logger.error(f"Error fetching quote for {symbol}: {e}")
        raise ExternalAPIError(SERVICE_NAME, f"Quote request failed for {symbol}", {"error": str(e)}) from e


async def fetch_history(
    symbol: str,
    start: date,
    interval: str = "1d",
) -> list[PriceHistoryPoint]:
    """
    Get price bars from `start` until today, oldest first.

    Bars with a missing or non-positive close are dropped.

    Raises:
        ExternalAPIError: network or provider failure
    """
    try:
        logger.info(f"Fetching {interval} history for {symbol} since {start}...")
        return await _run(_history_sync, symbol, start, interval)
    except Exception as e:
        logger.error(f"Error fetching history for {symbol}: {e}")
        raise ExternalAPIError(SERVICE_NAME, f"History request failed for {symbol}", {"error": str(e)}) from e


async def fetch_closes(symbol: str, start: date) -> list[float]:
    """Daily closes since `start`, oldest first."""
    return [point.close for point in await fetch_history(symbol, start)]
