"""
Expiring key-value cache.

Entries are stored as {"timestamp": <ms>, "data": <value>}, the same shape the
site keeps in localStorage. The backing store is any MutableMapping, so the
cache works the same against a plain dict or a JSON file on disk.
"""

import json
import os
import tempfile
import time
from collections.abc import MutableMapping
from pathlib import Path
from typing import Any, Callable, Dict, Generic, Iterator, Optional, TypeVar

from ..core.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


def now_ms() -> int:
    """Current wall-clock time in milliseconds."""
    return int(time.time() * 1000)


class JsonFileStore(MutableMapping):
    """
    A MutableMapping persisted as a single JSON object file.

    Every write rewrites the whole file. A missing or corrupt file reads as
    empty.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read cache file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring cache file {self.path}: not a JSON object")
            return {}
        return data

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise

    def __getitem__(self, key: str) -> Any:
        return self._load()[key]

    def __setitem__(self, key: str, value: Any) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def __delitem__(self, key: str) -> None:
        data = self._load()
        del data[key]
        self._save(data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._load())

    def __len__(self) -> int:
        return len(self._load())


class ExpiringCache(Generic[T]):
    """Timestamped cache whose entries are only returned while younger than ttl_ms."""

    def __init__(
        self,
        store: Optional[MutableMapping] = None,
        ttl_ms: int = 60 * 60 * 1000,
        clock: Callable[[], int] = now_ms,
    ):
        self.store = store if store is not None else {}
        self.ttl_ms = ttl_ms
        self.clock = clock

    def get(self, key: str) -> Optional[T]:
        """Return the cached value for key, or None if absent, expired or malformed."""
        entry = self.store.get(key)
        if entry is None:
            return None

        try:
            timestamp = entry["timestamp"]
            data = entry["data"]
            age = self.clock() - timestamp
        except (KeyError, TypeError):
            logger.warning(f"Ignoring malformed cache entry for '{key}'")
            return None

        if age < self.ttl_ms:
            return data

        logger.debug(f"Cache entry '{key}' expired ({age} ms old)")
        self.delete(key)
        return None

    def set(self, key: str, value: T) -> None:
        """Store value under key, stamped with the current time."""
        self.store[key] = {"timestamp": self.clock(), "data": value}

    def delete(self, key: str) -> None:
        self.store.pop(key, None)
