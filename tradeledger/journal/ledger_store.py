"""
Ledger Store - sole owner of the persisted collection of trade records.

Every mutation is a read-modify-write of the whole collection against a
blob store. Callers recompute derived views afterwards; the store itself
does not notify anyone.
"""

import json
import logging
import time
from dataclasses import replace as replace_fields
from typing import Callable, Iterable, List, Optional, Set

import pandas as pd

from .blob_store import BlobStore, MemoryBlobStore
from .trade_record import TradeRecord

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "trades"


class LedgerStore:
    """
    Trade ledger persisted as one JSON array under a fixed key.

    Features:
    - Unparseable or missing data loads as an empty ledger
    - Unreadable entries are skipped one by one
    - Time-derived, collision-free trade ids
    - Whole-record replacement keyed by id
    """

    def __init__(
        self,
        blob_store: Optional[BlobStore] = None,
        key: str = DEFAULT_STORAGE_KEY,
        clock: Callable[[], float] = time.time
    ):
        """Initialize ledger store."""
        self.blob_store = blob_store if blob_store is not None else MemoryBlobStore()
        self.key = key
        self._clock = clock

    def load(self) -> List[TradeRecord]:
        """Load trades from storage. Never raises."""
        raw = self.blob_store.get(self.key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, TypeError) as e:
            logger.warning(f"Stored ledger is not valid JSON, treating as empty: {e}")
            return []

        if not isinstance(data, list):
            logger.warning("Stored ledger is not a list, treating as empty")
            return []

        records = []
        for index, item in enumerate(data):
            try:
                records.append(TradeRecord.from_dict(item))
            except (KeyError, ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Skipping malformed trade at position {index}: {e}")
        return records

    def save(self, records: Iterable[TradeRecord]) -> None:
        """Persist the full collection, replacing prior content."""
        payload = [record.to_dict() for record in records]
        self.blob_store.set(self.key, json.dumps(payload, indent=2))
        logger.debug(f"Saved {len(payload)} trades under '{self.key}'")

    def new_trade_id(self, existing: Set[str]) -> str:
        """Millisecond timestamp token, bumped until unused."""
        candidate = int(self._clock() * 1000)
        while str(candidate) in existing:
            candidate += 1
        return str(candidate)

    def insert(self, record: TradeRecord) -> TradeRecord:
        """
        Append a record under a freshly assigned id and persist.

        Raises:
            InvalidTradeError: the record breaks a stored-record invariant
        """
        record.validate()
        records = self.load()
        trade_id = self.new_trade_id({r.id for r in records})

        stored = replace_fields(record, id=trade_id)
        records.append(stored)
        self.save(records)

        logger.info(f"Added trade {trade_id}: {stored.direction.value} {stored.size} {stored.symbol}")
        return stored

    def replace(self, trade_id: str, record: TradeRecord) -> bool:
        """Substitute the record with this id wholesale. No-op if absent."""
        record.validate()
        records = self.load()

        for i, existing in enumerate(records):
            if existing.id == trade_id:
                records[i] = replace_fields(record, id=trade_id)
                self.save(records)
                logger.info(f"Updated trade {trade_id}")
                return True

        logger.debug(f"Replace ignored, no trade {trade_id}")
        return False

    def remove(self, trade_id: str) -> bool:
        """Remove the record with this id. No-op if absent."""
        records = self.load()
        remaining = [r for r in records if r.id != trade_id]

        if len(remaining) == len(records):
            logger.debug(f"Remove ignored, no trade {trade_id}")
            return False

        self.save(remaining)
        logger.info(f"Removed trade {trade_id}")
        return True

    def get(self, trade_id: str) -> Optional[TradeRecord]:
        """Get a specific trade."""
        for record in self.load():
            if record.id == trade_id:
                return record
        return None

    def to_dataframe(self) -> pd.DataFrame:
        """Convert all trades to DataFrame."""
        records = self.load()
        if not records:
            return pd.DataFrame()

        return pd.DataFrame([
            {
                'id': r.id,
                'date': r.date,
                'symbol': r.symbol,
                'direction': r.direction.value,
                'size': r.size,
                'entry': r.entry,
                'exit': r.exit,
                'stop_loss': r.stop_loss,
                'take_profit': r.take_profit,
                'fee': r.fee,
                'result': r.result,
                'notes': r.notes,
            }
            for r in records
        ])
