"""
Tests for the statistics aggregator.
"""

import math
from datetime import datetime

import pandas as pd
import pytest

from tradeledger.journal import (
    LedgerStats,
    PROFIT_FACTOR_INFINITE,
    aggregate,
    cumulative_profit,
    format_profit_factor,
    format_win_rate,
    win_loss_counts,
)


class TestAggregate:
    """Tests for aggregate."""

    def test_empty_ledger(self):
        stats = aggregate([])

        assert isinstance(stats, LedgerStats)
        assert stats.win_rate == 0
        assert stats.avg_win == 0
        assert stats.avg_loss == 0
        assert stats.profit_factor == 0
        assert stats.total_trades == 0

    def test_mixed_results(self, sample_trades):
        stats = aggregate(sample_trades)

        assert stats.win_rate == 50.0
        assert stats.avg_win == pytest.approx(65.0)
        assert stats.avg_loss == pytest.approx(30.0)
        assert stats.profit_factor == pytest.approx(130 / 60)
        assert format_profit_factor(stats.profit_factor) == "2.17"
        assert stats.total_pnl == pytest.approx(70.0)
        assert (stats.winning_trades, stats.losing_trades) == (2, 2)

    def test_all_winners_is_infinite(self, make_trade):
        stats = aggregate([make_trade(10.0), make_trade(5.0)])

        assert stats.profit_factor == PROFIT_FACTOR_INFINITE
        assert stats.profit_factor_is_infinite
        assert stats.avg_loss == 0
        assert stats.win_rate == 100.0

    def test_only_breakeven_trades(self, make_trade):
        """No profit and no loss: factor is 0, not infinite."""
        stats = aggregate([make_trade(0.0), make_trade(0.0)])

        assert stats.profit_factor == 0
        assert stats.win_rate == 100.0
        assert stats.avg_win == 0

    def test_zero_counts_as_win(self, make_trade):
        stats = aggregate([make_trade(0.0), make_trade(-20.0)])

        assert stats.win_rate == 50.0
        assert stats.winning_trades == 1
        assert stats.avg_win == 0.0
        assert stats.avg_loss == 20.0
        assert stats.profit_factor == 0.0

    def test_all_losers(self, make_trade):
        stats = aggregate([make_trade(-10.0), make_trade(-30.0)])

        assert stats.win_rate == 0.0
        assert stats.avg_win == 0.0
        assert stats.avg_loss == 20.0
        assert stats.profit_factor == 0.0

    def test_trusts_overridden_result(self, make_trade):
        """A manually edited result is used even though the formula disagrees."""
        record = make_trade(-5.0, size=10, entry=100, exit=110)
        assert record.result_diverges()

        stats = aggregate([record])

        assert stats.win_rate == 0.0
        assert stats.avg_loss == 5.0


class TestWinLossCounts:
    """Tests for win_loss_counts."""

    def test_counts(self, sample_trades, make_trade):
        assert win_loss_counts(sample_trades) == (2, 2)
        assert win_loss_counts(sample_trades + [make_trade(0.0)]) == (3, 2)

    def test_empty(self):
        assert win_loss_counts([]) == (0, 0)


class TestCumulativeProfit:
    """Tests for cumulative_profit."""

    def test_running_sum_in_date_order(self, sample_trades):
        df = cumulative_profit(sample_trades)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ['date', 'cumulative_pnl']
        # Chronological: t1 (+100), t3 (+30), t2 (-50), t4 (-10)
        assert list(df['cumulative_pnl']) == [100.0, 130.0, 80.0, 70.0]
        assert list(df['date']) == sorted(t.date for t in sample_trades)

    def test_equal_dates_keep_stored_order(self, make_trade):
        same_day = datetime(2024, 5, 1, 12, 0)
        trades = [
            make_trade(1.0, id="a", date=same_day),
            make_trade(10.0, id="b", date=same_day),
            make_trade(100.0, id="c", date=datetime(2024, 4, 1)),
        ]

        df = cumulative_profit(trades)

        assert list(df['cumulative_pnl']) == [100.0, 101.0, 111.0]

    def test_empty(self):
        df = cumulative_profit([])

        assert df.empty
        assert list(df.columns) == ['date', 'cumulative_pnl']


class TestFormatting:
    """Tests for summary formatting."""

    def test_infinite_profit_factor_symbol(self):
        assert format_profit_factor(math.inf) == "∞"

    def test_profit_factor_two_decimals(self):
        assert format_profit_factor(0) == "0.00"

    def test_win_rate(self):
        assert format_win_rate(50) == "50.0%"
        assert format_win_rate(200 / 3) == "66.7%"
