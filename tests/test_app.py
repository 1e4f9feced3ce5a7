"""
Tests for the create_ledger factory.
"""

import json

from tradeledger import create_ledger
from tradeledger.config import Config
from tradeledger.journal import FileBlobStore, MemoryBlobStore


def write_config(tmp_path, file_enabled="false"):
    path = tmp_path / "config.yaml"
    path.write_text(
        "ledger:\n"
        f"  storage_dir: {tmp_path / 'data'}\n"
        "  storage_key: my_trades\n"
        "logging:\n"
        f"  log_dir: {tmp_path / 'logs'}\n"
        f"  file_enabled: {file_enabled}\n"
    )
    return Config(str(path))


class TestCreateLedger:
    """Tests for create_ledger."""

    def test_file_store_from_config(self, tmp_path, trade_form, monkeypatch):
        monkeypatch.delenv("LEDGER_STORAGE_DIR", raising=False)
        monkeypatch.delenv("LEDGER_STORAGE_KEY", raising=False)
        controller = create_ledger(write_config(tmp_path), enable_logging=False)

        assert isinstance(controller.store.blob_store, FileBlobStore)
        assert controller.activity_logger is None

        stored = controller.submit_trade(trade_form)

        saved = json.loads((tmp_path / "data" / "my_trades.json").read_text())
        assert saved[0]["id"] == stored.id
        assert saved[0]["symbol"] == "EURUSD"

    def test_explicit_blob_store(self, tmp_path):
        blob_store = MemoryBlobStore()
        controller = create_ledger(write_config(tmp_path), blob_store=blob_store,
                                   enable_logging=False)

        assert controller.store.blob_store is blob_store

    def test_logging_enabled(self, fresh_logging, tmp_path, trade_form, monkeypatch):
        monkeypatch.delenv("LOGGING_LOG_DIR", raising=False)
        monkeypatch.delenv("LOGGING_FILE_ENABLED", raising=False)
        controller = create_ledger(write_config(tmp_path, file_enabled="true"),
                                   blob_store=MemoryBlobStore())

        controller.submit_trade(trade_form)

        assert controller.activity_logger is not None
        assert list((tmp_path / "logs" / "trades").glob("ledger_*.jsonl"))
