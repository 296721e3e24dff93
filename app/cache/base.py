"""
app/cache/base.py

Cache contract shared by the in-memory and SQL-backed result caches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from app.domain.api_result import ApiResult


@dataclass(frozen=True)
class CacheEntry:
    """
    A stored result and the epoch time it was stored.
    """

    result: ApiResult
    stored_at: float

    def is_valid(self, *, now: float, ttl_seconds: float) -> bool:
        return now - self.stored_at < ttl_seconds


class ResultCache(Protocol):
    """
    Time-boxed result store keyed by task name.
    """

    ttl_seconds: float

    def get(self, key: str) -> ApiResult | None:
        ...

    def put(self, key: str, result: ApiResult) -> None:
        ...

    def invalidate(self, key: str) -> None:
        ...

    def invalidate_all(self) -> None:
        ...
