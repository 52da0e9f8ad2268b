"""In-memory key-value store backend.

A tiny, dependency-free store meant for **tests**, examples, and local
development. Values are kept in a dict; there is no persistence across
process restarts.

Thread-safety: every operation runs under an `RLock`, so single operations
are atomic. Sequences of operations are not.
"""

from __future__ import annotations

import fnmatch
import logging
import threading

from userdir.interfaces.kv_store import KeyValueStore, check_key, check_value

__all__ = ["InMemoryKeyValueStore"]

logger = logging.getLogger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed `KeyValueStore`.

    Keys are enumerated in insertion order; callers must not rely on that.
    Keys and values go through `check_key` and `check_value`, as on the SQL
    backend.

    Example:
        store = InMemoryKeyValueStore()
        store.set("a", "1")
        store.get("a")  # "1"
        store.list_keys("a*")  # ["a"]
    """

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(initial or {})
        self._lock = threading.RLock()

    def set(self, key: str, value: str) -> None:
        check_key(key)
        check_value(value)
        with self._lock:
            self._entries[key] = value
        logger.debug("set %s (%d bytes)", key, len(value))

    def get(self, key: str) -> str | None:
        check_key(key)
        with self._lock:
            return self._entries.get(key)

    def delete(self, key: str) -> None:
        check_key(key)
        with self._lock:
            removed = self._entries.pop(key, None) is not None
        logger.debug("delete %s (present=%s)", key, removed)

    def list_keys(self, pattern: str = "*") -> list[str]:
        with self._lock:
            keys = list(self._entries)
        return [key for key in keys if fnmatch.fnmatchcase(key, pattern)]
