"""
Display helpers for the trade table and summary cards.
"""

from datetime import datetime
from typing import Dict

from .calculator import format_money
from .statistics import LedgerStats, format_profit_factor, format_win_rate
from .trade_record import TradeRecord

EMPTY_TABLE_MESSAGE = "No trades recorded yet"

PROFIT_POSITIVE_CLASS = "profit-positive"
PROFIT_NEGATIVE_CLASS = "profit-negative"


def format_date(value: datetime, short: bool = False) -> str:
    """Full timestamp for the table, date only for chart labels."""
    if short:
        return value.strftime("%Y-%m-%d")
    return value.strftime("%Y-%m-%d %H:%M")


def format_result(value: float) -> str:
    """Signed two-decimal result, e.g. +98.00 or -12.50."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{format_money(value)}"


def format_trade_row(record: TradeRecord) -> Dict[str, str]:
    """Table row for one trade."""
    return {
        'id': record.id,
        'date': format_date(record.date),
        'symbol': record.symbol,
        'direction': record.direction.value,
        'size': f"{record.size:g}",
        'entry': f"{record.entry:.4f}",
        'exit': f"{record.exit:.4f}",
        'result': format_result(record.result),
        'css_class': PROFIT_POSITIVE_CLASS if record.is_win else PROFIT_NEGATIVE_CLASS,
    }


def format_stats(stats: LedgerStats) -> Dict[str, str]:
    """Summary card values."""
    return {
        'win_rate': format_win_rate(stats.win_rate),
        'avg_win': f"${format_money(stats.avg_win)}",
        'avg_loss': f"${format_money(stats.avg_loss)}",
        'profit_factor': format_profit_factor(stats.profit_factor),
    }
