"""Shared fixtures for StockSense backend tests.

External providers (Yahoo Finance, NewsAPI, LLMs) are never called:
adapter functions and service accessors are monkeypatched with fakes.
"""

from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.schemas.market import PriceHistoryPoint, QuoteSnapshot
from app.services.auth import storage
from app.services.data_ingestion import yahoo_adapter


def linear_closes(start: float, count: int, step: float = 1.0) -> list[float]:
    return [start + i * step for i in range(count)]


def history_from_closes(closes: list[float]) -> list[PriceHistoryPoint]:
    return [
        PriceHistoryPoint(date=(date(2023, 1, 2) + timedelta(days=i)).isoformat(), close=c, volume=1000.0)
        for i, c in enumerate(closes)
    ]


class FakeYahoo:
    """Records calls and serves canned quotes/history per symbol."""

    def __init__(self):
        self.quotes: dict[str, object] = {}
        self.histories: dict[str, object] = {}
        self.calls: list[tuple[str, str]] = []

    async def fetch_quote(self, symbol):
        self.calls.append(("quote", symbol))
        result = self.quotes.get(symbol)
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_history(self, symbol, start, interval="1d"):
        self.calls.append(("history", symbol))
        result = self.histories.get(symbol, [])
        if isinstance(result, Exception):
            raise result
        return result

    async def fetch_closes(self, symbol, start):
        return [p.close for p in await self.fetch_history(symbol, start)]

    def symbols_fetched(self, kind: str) -> list[str]:
        return [symbol for k, symbol in self.calls if k == kind]


@pytest.fixture
def fake_yahoo(monkeypatch):
    fake = FakeYahoo()
    monkeypatch.setattr(yahoo_adapter, "fetch_quote", fake.fetch_quote)
    monkeypatch.setattr(yahoo_adapter, "fetch_history", fake.fetch_history)
    monkeypatch.setattr(yahoo_adapter, "fetch_closes", fake.fetch_closes)
    return fake


@pytest.fixture
def sample_quote():
    return QuoteSnapshot(
        symbol="AAPL",
        name="Apple Inc.",
        price=349.0,
        market_cap=3.1e12,
        pe_ratio=31.5,
        change_percent=1.234,
    )


@pytest.fixture(autouse=True)
def fresh_user_store(monkeypatch):
    """Empty user store per test, with cheap hashing."""
    store = storage.MemoryUserStore(hash_iterations=1000)
    monkeypatch.setattr(storage, "_user_store", store)
    return store


@pytest.fixture
def client():
    return TestClient(app)
