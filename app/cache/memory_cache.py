"""
app/cache/memory_cache.py

Thread-safe in-memory TTL cache for fetch results.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from app.cache.base import CacheEntry
from app.domain.api_result import ApiResult


class InMemoryResultCache:
    """
    Dict-backed cache guarded by a lock; expired entries are evicted on read.
    """

    def __init__(self, *, ttl_seconds: float, clock: Callable[[], float] = time.time) -> None:
        self.ttl_seconds = max(0.0, ttl_seconds)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> ApiResult | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if not entry.is_valid(now=self._clock(), ttl_seconds=self.ttl_seconds):
                del self._entries[key]
                return None
            return entry.result

    def put(self, key: str, result: ApiResult) -> None:
        with self._lock:
            self._entries[key] = CacheEntry(result=result, stored_at=self._clock())

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def invalidate_all(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
