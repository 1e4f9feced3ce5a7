"""
Trade Ledger - Main Package
Personal trade journal with P/L calculation and performance statistics.

Modules:
- journal: Trade records, ledger store, calculator, statistics, filtering
- config: YAML/.env configuration
- utils: Logging
"""

__version__ = "1.0.0"
__author__ = "Trade Ledger Team"

from tradeledger.app import create_ledger
from tradeledger.journal import (
    LedgerController,
    LedgerStore,
    TradeRecord,
    Direction,
    Category,
)

__all__ = [
    'create_ledger',
    'LedgerController',
    'LedgerStore',
    'TradeRecord',
    'Direction',
    'Category',
]
