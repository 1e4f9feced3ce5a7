"""
Blob stores - key-value persistence transport for the serialized ledger.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class BlobStore(ABC):
    """Named string blobs. Writes replace prior content (last writer wins)."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the blob stored under key, or None if there is none."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous blob."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Drop the blob under key if present."""


class MemoryBlobStore(BlobStore):
    """Dict-backed store for tests and embedding."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._blobs: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._blobs.get(key)

    def set(self, key: str, value: str) -> None:
        self._blobs[key] = value

    def delete(self, key: str) -> None:
        self._blobs.pop(key, None)


class FileBlobStore(BlobStore):
    """
    One JSON file per key inside a directory.

    Usage:
        store = FileBlobStore("data")
        store.set("trades", "[]")   # writes data/trades.json
    """

    def __init__(self, directory: str = "data"):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)

        # Create directory if needed
        path.parent.mkdir(parents=True, exist_ok=True)

        path.write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
