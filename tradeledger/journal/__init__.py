"""
Trade Ledger Module

Trade records, persistence, P/L calculation, statistics and filtering.
"""

from .trade_record import (
    TradeRecord,
    Direction,
)
from .calculator import (
    compute_result,
    preview_result,
    format_money,
)
from .blob_store import (
    BlobStore,
    MemoryBlobStore,
    FileBlobStore,
)
from .ledger_store import (
    LedgerStore,
    DEFAULT_STORAGE_KEY,
)
from .statistics import (
    LedgerStats,
    PROFIT_FACTOR_INFINITE,
    aggregate,
    cumulative_profit,
    win_loss_counts,
    format_profit_factor,
    format_win_rate,
)
from .query import (
    Category,
    query,
    matches_search,
    matches_category,
)
from .errors import (
    LedgerError,
    InvalidTradeError,
)
from .controller import (
    LedgerController,
    LedgerSnapshot,
    parse_trade_fields,
)
from .formatting import (
    EMPTY_TABLE_MESSAGE,
    format_date,
    format_result,
    format_trade_row,
    format_stats,
)

__all__ = [
    # Records
    'TradeRecord',
    'Direction',
    # Calculator
    'compute_result',
    'preview_result',
    'format_money',
    # Storage
    'BlobStore',
    'MemoryBlobStore',
    'FileBlobStore',
    'LedgerStore',
    'DEFAULT_STORAGE_KEY',
    # Statistics
    'LedgerStats',
    'PROFIT_FACTOR_INFINITE',
    'aggregate',
    'cumulative_profit',
    'win_loss_counts',
    'format_profit_factor',
    'format_win_rate',
    # Query
    'Category',
    'query',
    'matches_search',
    'matches_category',
    # Errors
    'LedgerError',
    'InvalidTradeError',
    # Controller
    'LedgerController',
    'LedgerSnapshot',
    'parse_trade_fields',
    # Formatting
    'EMPTY_TABLE_MESSAGE',
    'format_date',
    'format_result',
    'format_trade_row',
    'format_stats',
]
