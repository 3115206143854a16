"""Stock lookup and market sentiment: service and HTTP layer with a fake Yahoo."""

import asyncio
from datetime import date

import pytest

from app.schemas.market import QuoteSnapshot
from app.services.base import ExternalAPIError, NotFoundError, ValidationError
from app.services.data_ingestion import MARKET_INDICES, MarketDataService
from app.services.data_ingestion.yahoo_adapter import months_ago
from app.services.indicators import IndicatorInput, get_indicator_service
from conftest import history_from_closes, linear_closes


@pytest.mark.parametrize(
    "today, months, expected",
    [
        (date(2024, 7, 15), 6, date(2024, 1, 15)),
        (date(2024, 1, 15), 6, date(2023, 7, 15)),
        (date(2024, 3, 31), 1, date(2024, 2, 29)),
        (date(2023, 3, 31), 1, date(2023, 2, 28)),
    ],
)
def test_months_ago(today, months, expected):
    assert months_ago(months, today) == expected


def test_indicator_service_execute():
    service = get_indicator_service()
    result = asyncio.run(service.execute(IndicatorInput(
        closes=tuple(linear_closes(100.0, 250)),
        benchmark_closes=tuple(linear_closes(400.0, 21)),
    )))
    assert result.sma50 == 324.5
    assert asyncio.run(service.health_check()) is True


# =============================================================================
# SERVICE
# =============================================================================


class TestMarketDataService:
    def test_lookup_computes_indicators(self, fake_yahoo, sample_quote):
        fake_yahoo.quotes["AAPL"] = sample_quote
        fake_yahoo.histories["AAPL"] = history_from_closes(linear_closes(100.0, 250))
        fake_yahoo.histories["SPY"] = history_from_closes(linear_closes(400.0, 21))

        data = asyncio.run(MarketDataService(benchmark_symbol="SPY").execute(" aapl "))

        assert data.basic_info.symbol == "AAPL"
        assert data.indicators.sma200 == 249.5
        assert data.indicators.relative_strength == 4.06
        assert len(data.price_history) == 250
        assert fake_yahoo.symbols_fetched("history") == ["AAPL", "SPY"]

    def test_short_history_skips_benchmark(self, fake_yahoo, sample_quote):
        fake_yahoo.quotes["AAPL"] = sample_quote
        fake_yahoo.histories["AAPL"] = history_from_closes(linear_closes(100.0, 40))

        data = asyncio.run(MarketDataService(benchmark_symbol="SPY").execute("AAPL"))

        assert data.indicators.is_empty()
        assert "SPY" not in fake_yahoo.symbols_fetched("history")

    def test_benchmark_failure_is_isolated(self, fake_yahoo, sample_quote):
        fake_yahoo.quotes["AAPL"] = sample_quote
        fake_yahoo.histories["AAPL"] = history_from_closes(linear_closes(100.0, 250))
        fake_yahoo.histories["SPY"] = ExternalAPIError("YahooFinance", "timeout")

        data = asyncio.run(MarketDataService(benchmark_symbol="SPY").execute("AAPL"))

        assert data.indicators.relative_strength is None
        assert data.indicators.sma50 == 324.5
        assert data.indicators.roc == 4.18

    def test_history_failure_propagates(self, fake_yahoo, sample_quote):
        fake_yahoo.quotes["AAPL"] = sample_quote
        fake_yahoo.histories["AAPL"] = ExternalAPIError("YahooFinance", "boom")

        with pytest.raises(ExternalAPIError):
            asyncio.run(MarketDataService().execute("AAPL"))

    def test_unknown_ticker(self, fake_yahoo):
        with pytest.raises(NotFoundError):
            asyncio.run(MarketDataService().execute("NOPE"))

    def test_blank_ticker(self, fake_yahoo):
        with pytest.raises(ValidationError):
            asyncio.run(MarketDataService().execute("   "))

    def test_sentiment_keeps_order_and_isolates_failures(self, fake_yahoo):
        for name, symbol in MARKET_INDICES:
            fake_yahoo.quotes[symbol] = QuoteSnapshot(symbol=symbol, name=name, change_percent=1.23456)
        fake_yahoo.quotes["BTC-USD"] = ExternalAPIError("YahooFinance", "down")
        fake_yahoo.quotes["GC=F"] = None

        result = asyncio.run(MarketDataService().get_market_sentiment())

        assert [s.symbol for s in result] == [symbol for _, symbol in MARKET_INDICES]
        changes = {s.symbol: s.change for s in result}
        assert changes["^GSPC"] == 1.23
        assert changes["BTC-USD"] is None
        assert changes["GC=F"] is None


# =============================================================================
# HTTP
# =============================================================================


class TestStockEndpoint:
    def test_payload_shape(self, client, fake_yahoo, sample_quote):
        fake_yahoo.quotes["AAPL"] = sample_quote
        fake_yahoo.histories["AAPL"] = history_from_closes(linear_closes(100.0, 250))
        fake_yahoo.histories["SPY"] = history_from_closes(linear_closes(400.0, 21))

        response = client.get("/api/v1/market/stock/aapl")

        assert response.status_code == 200
        body = response.json()
        assert body["basicInfo"] == {
            "currentPrice": 349.0,
            "marketCap": 3.1e12,
            "peRatio": 31.5,
            "name": "Apple Inc.",
            "symbol": "AAPL",
        }
        assert body["indicators"]["sma50"] == 324.5
        assert body["indicators"]["relativeStrength"] == 4.06
        assert body["priceHistory"][-1]["close"] == 349.0

    def test_missing_quote_fields_are_na(self, client, fake_yahoo):
        fake_yahoo.quotes["XYZ"] = QuoteSnapshot(symbol="XYZ", price=12.5)
        fake_yahoo.histories["XYZ"] = history_from_closes(linear_closes(10.0, 5))

        body = client.get("/api/v1/market/stock/xyz").json()

        assert body["basicInfo"]["marketCap"] == "N/A"
        assert body["basicInfo"]["peRatio"] == "N/A"
        assert body["basicInfo"]["name"] == "XYZ"
        assert all(v is None for v in body["indicators"].values())

    def test_provider_failure_is_500(self, client, fake_yahoo):
        fake_yahoo.quotes["AAPL"] = ExternalAPIError("YahooFinance", "boom")

        response = client.get("/api/v1/market/stock/AAPL")

        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to fetch stock data"}

    def test_unknown_ticker_is_404(self, client, fake_yahoo):
        assert client.get("/api/v1/market/stock/NOPE").status_code == 404


def test_sentiment_endpoint(client, fake_yahoo):
    fake_yahoo.quotes["^GSPC"] = QuoteSnapshot(symbol="^GSPC", change_percent=-1.5)

    response = client.get("/api/v1/market/sentiment")

    assert response.status_code == 200
    body = response.json()
    assert body[0] == {"name": "S&P 500", "symbol": "^GSPC", "change": -1.5}
    assert len(body) == 5
    assert body[1]["change"] is None
