"""Indicator engine tests: thresholds, guards, rounding and a worked example."""

import statistics

import numpy as np
import pytest

from app.schemas.indicators import TechnicalIndicators
from app.services.indicators.calculations import (
    compute_indicators,
    rate_of_change,
    realized_volatility,
    relative_strength,
    round_price,
    sma,
)
from conftest import linear_closes


FIELDS = ["sma50", "sma200", "volatility", "roc", "relative_strength"]


def random_walk(seed: int, count: int) -> list[float]:
    rng = np.random.default_rng(seed)
    steps = rng.normal(0, 1.5, count)
    return list(np.maximum(100 + np.cumsum(steps), 1.0))


# =============================================================================
# ROUNDING
# =============================================================================


class TestRoundPrice:
    def test_half_rounds_away_from_zero(self):
        assert round_price(0.125) == 0.13
        assert round_price(-0.125) == -0.13

    def test_plain_values(self):
        assert round_price(324.5) == 324.5
        assert round_price(4.179104477) == 4.18
        assert round_price(-4.174) == -4.17

    def test_non_finite_is_none(self):
        assert round_price(None) is None
        assert round_price(float("nan")) is None
        assert round_price(float("inf")) is None


# =============================================================================
# INDIVIDUAL INDICATORS
# =============================================================================


def test_sma_uses_trailing_window():
    closes = np.array(linear_closes(1, 10))
    assert sma(closes, 4) == pytest.approx((7 + 8 + 9 + 10) / 4)
    assert sma(closes, 11) is None


def test_volatility_uses_last_30_closes_only():
    base = linear_closes(100, 60)
    spiked = list(base)
    spiked[-31] = 10_000.0  # just outside the 30-close window

    assert realized_volatility(np.array(base)) == realized_volatility(np.array(spiked))


def test_volatility_is_population_std_of_29_returns():
    closes = random_walk(7, 60)
    tail = closes[-30:]
    returns = [(tail[i] - tail[i - 1]) / tail[i - 1] for i in range(1, 30)]

    assert len(returns) == 29
    assert realized_volatility(np.array(closes)) == pytest.approx(statistics.pstdev(returns) * 100)


def test_volatility_skips_returns_from_zero_close():
    closes = linear_closes(100, 60)
    closes[-10] = 0.0
    value = realized_volatility(np.array(closes))
    assert value is not None and np.isfinite(value)


def test_rate_of_change_compares_with_close_14_days_back():
    closes = np.array(linear_closes(100, 60))
    assert rate_of_change(closes) == pytest.approx((159 - 145) / 145 * 100)


def test_relative_strength_requires_two_benchmark_points():
    closes = np.array(linear_closes(100, 60))
    assert relative_strength(closes, np.array([400.0])) is None
    assert relative_strength(closes, np.array([400.0, 410.0])) is not None


# =============================================================================
# INDICATOR SET
# =============================================================================


class TestComputeIndicators:
    @pytest.mark.parametrize("length", [0, 1, 14, 30, 40, 49])
    def test_short_series_is_all_null(self, length):
        result = compute_indicators(linear_closes(100, length), linear_closes(400, 21))
        assert result == TechnicalIndicators()
        assert result.is_empty()

    def test_length_40_blocks_volatility_and_roc(self):
        # 40 closes would satisfy the 30/14 windows, but the 50 gate wins
        result = compute_indicators(random_walk(1, 40), linear_closes(400, 21))
        assert result.volatility is None
        assert result.roc is None

    def test_exactly_50_closes(self):
        closes = linear_closes(10, 50, step=0.5)
        result = compute_indicators(closes, [])

        assert result.sma50 == round_price(sum(closes) / 50)
        assert result.sma200 is None
        assert result.volatility is not None
        assert result.roc is not None
        assert result.relative_strength is None

        with_benchmark = compute_indicators(closes, [400.0, 404.0])
        assert with_benchmark.relative_strength is not None

    def test_sma200_ignores_values_before_window(self):
        tail = random_walk(3, 200)
        a = compute_indicators(linear_closes(5, 60) + tail)
        b = compute_indicators(random_walk(4, 30) + tail)

        assert a.sma200 == b.sma200 == round_price(sum(tail) / 200)

    def test_idempotent(self):
        closes, bench = random_walk(11, 180), random_walk(12, 21)
        assert compute_indicators(closes, bench) == compute_indicators(closes, bench)

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_every_field_is_a_rounding_fixed_point(self, seed):
        result = compute_indicators(random_walk(seed, 260), random_walk(seed + 100, 22))
        for field in FIELDS:
            value = getattr(result, field)
            assert value is not None
            assert round_price(value) == value

    def test_zero_close_14_back_nulls_roc_only(self):
        closes = linear_closes(100, 80)
        closes[-15] = 0.0
        result = compute_indicators(closes, linear_closes(400, 21))

        assert result.roc is None
        assert result.sma50 is not None
        assert result.volatility is not None
        assert result.relative_strength is not None

    def test_empty_benchmark_only_nulls_relative_strength(self):
        closes = linear_closes(100, 250)
        with_bench = compute_indicators(closes, linear_closes(400, 21))
        without = compute_indicators(closes, [])

        assert without.relative_strength is None
        for field in ["sma50", "sma200", "volatility", "roc"]:
            assert getattr(without, field) == getattr(with_bench, field)

    def test_malformed_input_gives_nulls(self):
        assert compute_indicators(None, None).is_empty()
        assert compute_indicators(["not", "a", "price"], [1.0, 2.0]).is_empty()

    def test_worked_example(self):
        closes = linear_closes(100.0, 250)   # 100.00 .. 349.00
        bench = linear_closes(400.0, 21)     # 400.00 .. 420.00

        result = compute_indicators(closes, bench)

        assert result.sma50 == 324.5
        assert result.sma200 == 249.5
        assert result.roc == 4.18
        expected_rs = ((349 - 320) / 320 - (420 - 400) / 400) * 100
        assert result.relative_strength == round_price(expected_rs) == 4.06

        tail = closes[-30:]
        returns = [(tail[i] - tail[i - 1]) / tail[i - 1] for i in range(1, 30)]
        assert result.volatility == pytest.approx(statistics.pstdev(returns) * 100, abs=0.006)

    def test_serializes_with_camel_case_keys(self):
        result = compute_indicators(linear_closes(100.0, 250), linear_closes(400.0, 21))
        payload = result.model_dump(by_alias=True)
        assert set(payload) == {"sma50", "sma200", "volatility", "roc", "relativeStrength"}
