"""
Pytest configuration and fixtures for Trade Ledger tests.
"""

import logging

import pytest
from datetime import datetime, timedelta

from tradeledger.journal import (
    Direction,
    LedgerController,
    LedgerStore,
    MemoryBlobStore,
    TradeRecord,
)
from tradeledger.utils import logger as logger_module

FIXED_NOW = 1700000000.0


@pytest.fixture
def blob_store():
    """Empty in-memory blob store."""
    return MemoryBlobStore()


@pytest.fixture
def ledger_store(blob_store):
    """Ledger store with a frozen clock so ids are predictable."""
    return LedgerStore(blob_store=blob_store, clock=lambda: FIXED_NOW)


@pytest.fixture
def make_trade():
    """Factory for trade records with sensible defaults."""
    def _make(result: float = 0.0, **overrides) -> TradeRecord:
        fields = dict(
            id="",
            date=datetime(2024, 1, 1, 10, 0),
            symbol="EURUSD",
            direction=Direction.LONG,
            size=1.0,
            entry=1.1000,
            exit=1.1050,
            fee=0.0,
            result=result,
            notes="",
        )
        fields.update(overrides)
        return TradeRecord(**fields)
    return _make


@pytest.fixture
def sample_trades(make_trade):
    """Four trades with results +100, -50, +30, -10 across a week."""
    base = datetime(2024, 3, 1, 9, 30)
    return [
        make_trade(100.0, id="t1", date=base, symbol="AAPL", notes="breakout retest"),
        make_trade(-50.0, id="t2", date=base + timedelta(days=2), symbol="MSFT",
                   direction=Direction.SHORT, notes="faded the open"),
        make_trade(30.0, id="t3", date=base + timedelta(days=1), symbol="EURUSD",
                   notes="London session"),
        make_trade(-10.0, id="t4", date=base + timedelta(days=3), symbol="GBPUSD",
                   direction=Direction.SHORT, notes="stopped out, aapl correlation"),
    ]


@pytest.fixture
def controller(ledger_store):
    """Controller without an activity logger."""
    return LedgerController(ledger_store)


@pytest.fixture
def trade_form():
    """Raw form fields for a valid long trade."""
    return {
        'date': '2024-03-01T10:30',
        'symbol': 'eurusd',
        'direction': 'Long',
        'size': '10',
        'entry': '100',
        'exit': '110',
        'stopLoss': '',
        'takeProfit': '115',
        'fee': '2',
        'result': '',
        'notes': 'Trend day',
    }


@pytest.fixture
def fresh_logging():
    """Reset the logging singleton before and after a test."""
    def _reset():
        logger_module.LedgerLogger._instance = None
        logger_module.LedgerLogger._loggers = {}
        logger_module._ledger_logger = None
        root = logging.getLogger(logger_module.ROOT_LOGGER_NAME)
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    _reset()
    yield
    _reset()
