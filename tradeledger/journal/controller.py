"""
Ledger Controller - consumes UI events and publishes derived views.

Owns a LedgerStore instance, keeps the current search/category selection and
re-derives everything from the full collection after each change.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, List, Mapping, Optional, Tuple, Union

import pandas as pd

from .calculator import compute_result, preview_result
from .errors import InvalidTradeError
from .ledger_store import LedgerStore
from .query import Category, query
from .statistics import LedgerStats, aggregate, cumulative_profit, win_loss_counts
from .trade_record import Direction, TradeRecord

logger = logging.getLogger(__name__)


@dataclass
class LedgerSnapshot:
    """Everything the presentation layer renders."""
    trades: List[TradeRecord] = field(default_factory=list)
    stats: LedgerStats = field(default_factory=LedgerStats)
    cumulative: pd.DataFrame = field(
        default_factory=lambda: pd.DataFrame(columns=['date', 'cumulative_pnl'])
    )
    win_loss: Tuple[int, int] = (0, 0)
    search_term: str = ""
    category: Category = Category.ALL

    @property
    def is_empty(self) -> bool:
        """True when the filtered table has no rows."""
        return not self.trades


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _required_float(fields: Mapping[str, Any], name: str) -> float:
    value = fields.get(name)
    if _is_blank(value):
        raise InvalidTradeError(name, value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidTradeError(name, value, "must be a number")
    if number != number:
        raise InvalidTradeError(name, value, "must be a number")
    return number


def _optional_float(fields: Mapping[str, Any], name: str) -> Optional[float]:
    value = fields.get(name)
    if _is_blank(value):
        return None
    return _required_float(fields, name)


def parse_trade_fields(fields: Mapping[str, Any]) -> TradeRecord:
    """
    Build a trade record from raw form fields.

    Fields use the stored key names (date, symbol, direction, size, entry,
    exit, stopLoss, takeProfit, fee, result, notes). A blank result is filled
    in from the P/L formula; anything else typed there is kept as an override.

    Raises:
        InvalidTradeError: a required field is missing or unusable
    """
    date = fields.get('date')
    if _is_blank(date):
        raise InvalidTradeError('date', date)
    if isinstance(date, str):
        try:
            date = datetime.fromisoformat(date.strip())
        except ValueError:
            raise InvalidTradeError('date', date, "must be an ISO date")
    elif not isinstance(date, datetime):
        raise InvalidTradeError('date', date, "must be an ISO date")

    symbol = fields.get('symbol')
    if _is_blank(symbol):
        raise InvalidTradeError('symbol', symbol)

    direction = fields.get('direction')
    try:
        direction = Direction(direction)
    except ValueError:
        raise InvalidTradeError('direction', direction, "must be Long or Short")

    size = _required_float(fields, 'size')
    if size <= 0:
        raise InvalidTradeError('size', size, "must be positive")
    entry = _required_float(fields, 'entry')
    exit_price = _required_float(fields, 'exit')

    fee = _optional_float(fields, 'fee') or 0.0
    if fee < 0:
        raise InvalidTradeError('fee', fee, "must not be negative")

    result = _optional_float(fields, 'result')
    if result is None:
        result = compute_result(direction, size, entry, exit_price, fee)

    return TradeRecord(
        date=date,
        symbol=str(symbol).strip(),
        direction=direction,
        size=size,
        entry=entry,
        exit=exit_price,
        stop_loss=_optional_float(fields, 'stopLoss'),
        take_profit=_optional_float(fields, 'takeProfit'),
        fee=fee,
        result=result,
        notes=fields.get('notes') or "",
    )


SnapshotListener = Callable[[LedgerSnapshot], None]


class LedgerController:
    """
    Event handlers for the trade ledger UI.

    Usage:
        controller = LedgerController(LedgerStore(FileBlobStore("data")))
        controller.subscribe(render)
        controller.submit_trade({'date': '2024-03-01T10:00', 'symbol': 'eurusd', ...})
        controller.set_category('winning')
    """

    def __init__(self, store: LedgerStore, activity_logger=None):
        """
        Initialize controller.

        Args:
            store: Ledger store owning the collection
            activity_logger: Optional LedgerLogger recording each mutation
        """
        self.store = store
        self.activity_logger = activity_logger
        self.search_term = ""
        self.category = Category.ALL
        self._listeners: List[SnapshotListener] = []

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def snapshot(self) -> LedgerSnapshot:
        """Re-derive all views from the current ledger."""
        records = self.store.load()
        return LedgerSnapshot(
            trades=query(records, self.search_term, self.category),
            stats=aggregate(records),
            cumulative=cumulative_profit(records),
            win_loss=win_loss_counts(records),
            search_term=self.search_term,
            category=self.category,
        )

    def _publish(self) -> LedgerSnapshot:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
        return snapshot

    def _after_mutation(self, action: str, record: TradeRecord) -> None:
        if self.activity_logger is not None:
            self.activity_logger.log_mutation(action, record)

        snapshot = self._publish()

        if self.activity_logger is not None:
            self.activity_logger.log_stats(snapshot.stats)

    def preview(self, fields: Mapping[str, Any]) -> Optional[float]:
        """P/L preview for a partly filled form, or None to leave it alone."""
        return preview_result(
            fields.get('direction', Direction.LONG.value),
            fields.get('size'),
            fields.get('entry'),
            fields.get('exit'),
            fields.get('fee'),
        )

    def submit_trade(self, fields: Mapping[str, Any]) -> TradeRecord:
        """Record a new trade."""
        stored = self.store.insert(parse_trade_fields(fields))
        self._after_mutation("ADD", stored)
        return stored

    def edit_trade(self, trade_id: str) -> Optional[TradeRecord]:
        """Fetch a trade to populate the edit form."""
        return self.store.get(trade_id)

    def update_trade(self, trade_id: str, fields: Mapping[str, Any]) -> bool:
        """Replace a trade with freshly submitted fields."""
        record = parse_trade_fields(fields)
        if not self.store.replace(trade_id, record):
            return False

        self._after_mutation("UPDATE", self.store.get(trade_id) or record)
        return True

    def recompute_trade(self, trade_id: str) -> bool:
        """Discard a manual result override by re-deriving it from the inputs."""
        record = self.store.get(trade_id)
        if record is None:
            return False

        if record.result_diverges():
            logger.info(
                f"Recomputing trade {trade_id}: stored {record.result:.2f}, "
                f"formula {record.computed_result():.2f}"
            )
        recomputed = record.recompute()
        self.store.replace(trade_id, recomputed)
        self._after_mutation("RECOMPUTE", recomputed)
        return True

    def delete_trade(self, trade_id: str) -> bool:
        """Remove a trade. Confirmation is the caller's job."""
        record = self.store.get(trade_id)
        if record is None or not self.store.remove(trade_id):
            return False

        self._after_mutation("DELETE", record)
        return True

    def set_search(self, term: Optional[str]) -> LedgerSnapshot:
        self.search_term = term or ""
        return self._publish()

    def set_category(self, category: Union[Category, str]) -> LedgerSnapshot:
        self.category = Category(category)
        return self._publish()
