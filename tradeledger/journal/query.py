"""
Query/Filter Engine - search and category filtering for the trade table.
"""

from enum import Enum
from typing import Iterable, List, Union

from .trade_record import Direction, TradeRecord


class Category(Enum):
    """Category filter options."""
    ALL = "all"
    WINNING = "winning"
    LOSING = "losing"
    LONG = "long"
    SHORT = "short"


def matches_search(record: TradeRecord, search_term: str) -> bool:
    """Case-insensitive substring match on symbol or notes."""
    term = (search_term or "").lower()
    return term in record.symbol.lower() or term in (record.notes or "").lower()


def matches_category(record: TradeRecord, category: Category) -> bool:
    if category == Category.WINNING:
        return record.result >= 0
    if category == Category.LOSING:
        return record.result < 0
    if category == Category.LONG:
        return record.direction == Direction.LONG
    if category == Category.SHORT:
        return record.direction == Direction.SHORT
    return True


def query(
    records: Iterable[TradeRecord],
    search_term: str = "",
    category: Union[Category, str] = Category.ALL
) -> List[TradeRecord]:
    """
    Filter trades for table display.

    Args:
        records: Ledger contents in stored order
        search_term: Substring to look for in symbol or notes
        category: One of all, winning, losing, long, short

    Returns:
        Matching trades, most recent first. Trades sharing a date keep
        their original relative order.
    """
    category = Category(category)

    matched = [
        r for r in records
        if matches_search(r, search_term) and matches_category(r, category)
    ]

    return sorted(matched, key=lambda r: r.date, reverse=True)
