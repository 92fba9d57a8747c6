"""Thread-safe in-memory key-value store.

Owned by the handlers that use it, never a module global, so each app
instance (and each test) gets its own.
"""

import threading
from enum import Enum
from typing import Any


class Upsert(Enum):
    """What an upsert did to the stored value."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"


class Store:
    """Key-value pairs guarded by a lock."""

    __slots__ = ("_lock", "_vals")

    def __init__(self) -> None:
        self._vals: dict[str, Any] = {}
        self._lock = threading.Lock()

    def list(self) -> dict[str, Any]:
        """Snapshot of every pair."""
        with self._lock:
            return dict(self._vals)

    def get(self, key: str) -> tuple[Any, bool]:
        with self._lock:
            if key not in self._vals:
                return None, False
            return self._vals[key], True

    def upsert(self, key: str, value: Any) -> Upsert:
        with self._lock:
            if key not in self._vals:
                self._vals[key] = value
                return Upsert.CREATED
            if self._vals[key] == value:
                return Upsert.UNCHANGED
            self._vals[key] = value
            return Upsert.UPDATED

    def delete(self, key: str) -> tuple[Any, bool]:
        """Remove *key*; returns the removed value and whether it existed."""
        with self._lock:
            if key not in self._vals:
                return None, False
            return self._vals.pop(key), True
