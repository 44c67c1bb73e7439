"""TTL cache over a key-value store.

Entries are stored as ``{"data": payload, "timestamp": ms, "ttl": ms}`` under
``prefix + field``. Staleness is checked on read; a stale entry is deleted
there and then and reported as ``EntryNotFound``, same as a key that never
existed. ``sweep`` is the only other path that removes stale entries.
"""
import logging
import time
from typing import Any, Callable

from app.core.errors import EntryNotFound
from app.core.kv_store import KeyValueStore

logger = logging.getLogger(__name__)


def now_millis() -> int:
    return int(time.time() * 1000)


class CacheStore:
    def __init__(
        self,
        kv: KeyValueStore,
        prefix: str,
        ttl_ms: int,
        clock: Callable[[], int] = now_millis,
    ):
        if ttl_ms < 0:
            raise ValueError("ttl_ms must be non-negative")
        self.kv = kv
        self.prefix = prefix
        self.ttl_ms = ttl_ms
        self.clock = clock

    def key_for(self, field: str) -> str:
        return f"{self.prefix}{field}"

    def put(self, field: str, payload: Any) -> None:
        """Stores payload under the field, replacing any previous entry."""
        key = self.key_for(field)
        self.kv.set(key, {"data": payload, "timestamp": self.clock(), "ttl": self.ttl_ms})
        logger.debug(f"Cached {key}")

    def get(self, field: str) -> Any:
        """Returns the payload if fresh. Raises EntryNotFound otherwise."""
        key = self.key_for(field)
        entry = self.kv.get(key)
        if entry is None:
            logger.debug(f"Cache miss for {key}")
            raise EntryNotFound(key)

        age = self.clock() - entry["timestamp"]
        if age > entry["ttl"]:
            self.kv.delete(key)
            logger.info(f"Evicted stale cache entry {key} (age {age} ms)")
            raise EntryNotFound(key)

        return entry["data"]

    def delete(self, field: str) -> None:
        self.kv.delete(self.key_for(field))

    def exists(self, field: str) -> bool:
        """Raw presence check. Ignores TTL and never evicts."""
        return self.kv.get(self.key_for(field)) is not None

    def sweep(self) -> int:
        """Deletes every stale entry under the prefix. Returns how many went."""
        now = self.clock()
        removed = 0
        for key, entry in self.kv.get_by_prefix(self.prefix):
            if now - entry["timestamp"] > entry["ttl"]:
                self.kv.delete(key)
                removed += 1
        if removed:
            logger.info(f"Swept {removed} stale entries under '{self.prefix}'")
        return removed
