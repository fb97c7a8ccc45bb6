"""
Process-scoped in-memory TTL cache.

Each serving process owns an independent instance, so the hit rate depends on
how requests are routed to processes. Reads are lock-free; concurrent writes to
the same key resolve last-writer-wins.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    expires_at_ms: float


class TTLCache:
    """
    Key -> (value, expiry) map with lazy eviction on read.

    The clock returns epoch seconds; tests inject a fake one to control expiry.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._store: Dict[str, CacheEntry] = {}
        self._evicted = 0

    def _now_ms(self) -> float:
        return self._clock() * 1000

    def set(self, key: str, value: Any, ttl_seconds: float = 3600) -> None:
        self._store[key] = CacheEntry(value, self._now_ms() + ttl_seconds * 1000)

    def get(self, key: str) -> Optional[Any]:
        entry = self._store.get(key)
        if entry is None:
            return None

        if self._now_ms() > entry.expires_at_ms:
            # Another reader may have evicted it already
            if self._store.pop(key, None) is not None:
                self._evicted += 1
            logger.debug(f"Cache entry expired: {key}")
            return None

        return entry.value

    def has(self, key: str) -> bool:
        entry = self._store.get(key)
        return entry is not None and self._now_ms() <= entry.expires_at_ms

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()
        self._evicted = 0

    def stats(self) -> Dict[str, int]:
        """
        `total` and `valid` describe what is stored now. `expired` counts stale
        entries still stored plus entries lazily evicted since the last clear().
        """
        now = self._now_ms()
        entries = list(self._store.values())
        stale = sum(1 for entry in entries if now > entry.expires_at_ms)
        return {
            "total": len(entries),
            "valid": len(entries) - stale,
            "expired": stale + self._evicted,
        }


# Process-wide instance
cache = TTLCache()
