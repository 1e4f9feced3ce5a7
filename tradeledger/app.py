"""
Ledger factory - wires configuration, logging and storage together.
"""

from typing import Optional

from tradeledger.config import Config, get_config
from tradeledger.journal import FileBlobStore, BlobStore, LedgerController, LedgerStore
from tradeledger.utils.logger import LogConfig, setup_logging


def create_ledger(
    config: Optional[Config] = None,
    blob_store: Optional[BlobStore] = None,
    enable_logging: bool = True
) -> LedgerController:
    """
    Factory function to create a configured ledger controller.

    Args:
        config: Configuration (global config if not provided)
        blob_store: Persistence transport (a FileBlobStore in the
            configured storage directory if not provided)
        enable_logging: Set up console/file logging from the config

    Returns:
        LedgerController owning a LedgerStore
    """
    config = config or get_config()

    activity_logger = None
    if enable_logging:
        activity_logger = setup_logging(LogConfig(
            level=config.log_level,
            log_dir=config.log_dir,
            file_enabled=config.log_to_file,
        ))

    if blob_store is None:
        blob_store = FileBlobStore(config.storage_dir)

    store = LedgerStore(blob_store=blob_store, key=config.storage_key)
    return LedgerController(store, activity_logger=activity_logger)
