"""
Statistics Aggregator - summary metrics derived from the ledger.

Stored results are trusted as-is, including ones the user overrode by hand.
A result of exactly 0 counts as a win throughout.
"""

import math
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import pandas as pd

from .trade_record import TradeRecord

# Profit factor when there are no losses but some profit
PROFIT_FACTOR_INFINITE = math.inf


@dataclass
class LedgerStats:
    """Aggregated ledger statistics."""
    total_trades: int = 0
    winning_trades: int = 0
    losing_trades: int = 0

    win_rate: float = 0.0
    avg_win: float = 0.0
    avg_loss: float = 0.0
    profit_factor: float = 0.0

    total_pnl: float = 0.0

    @property
    def profit_factor_is_infinite(self) -> bool:
        return math.isinf(self.profit_factor)


def aggregate(records: Iterable[TradeRecord]) -> LedgerStats:
    """Calculate win rate, average win/loss and profit factor."""
    records = list(records)
    stats = LedgerStats(total_trades=len(records))

    if not records:
        return stats

    winners = [r.result for r in records if r.is_win]
    losers = [abs(r.result) for r in records if not r.is_win]

    stats.winning_trades = len(winners)
    stats.losing_trades = len(losers)
    stats.win_rate = len(winners) / len(records) * 100
    stats.total_pnl = sum(r.result for r in records)

    gross_profit = sum(winners)
    gross_loss = sum(losers)

    if winners:
        stats.avg_win = gross_profit / len(winners)
    if losers:
        stats.avg_loss = gross_loss / len(losers)

    if gross_loss > 0:
        stats.profit_factor = gross_profit / gross_loss
    elif gross_profit > 0:
        stats.profit_factor = PROFIT_FACTOR_INFINITE

    return stats


def win_loss_counts(records: Iterable[TradeRecord]) -> Tuple[int, int]:
    """(winning, losing) trade counts for the win-rate chart."""
    records = list(records)
    wins = sum(1 for r in records if r.is_win)
    return wins, len(records) - wins


def sort_chronologically(records: Iterable[TradeRecord]) -> List[TradeRecord]:
    """Oldest first; equal dates keep their relative order."""
    return sorted(records, key=lambda r: r.date)


def cumulative_profit(records: Iterable[TradeRecord]) -> pd.DataFrame:
    """
    Running total of results in date order.

    Returns:
        DataFrame with columns ['date', 'cumulative_pnl'], one row per trade
    """
    ordered = sort_chronologically(records)

    if not ordered:
        return pd.DataFrame(columns=['date', 'cumulative_pnl'])

    df = pd.DataFrame({
        'date': [r.date for r in ordered],
        'result': [r.result for r in ordered],
    })
    df['cumulative_pnl'] = df['result'].cumsum()

    return df[['date', 'cumulative_pnl']]


def format_profit_factor(value: float) -> str:
    """Display the infinite sentinel as a symbol, others to two decimals."""
    if math.isinf(value):
        return "∞"
    return f"{value:.2f}"


def format_win_rate(value: float) -> str:
    return f"{value:.1f}%"
