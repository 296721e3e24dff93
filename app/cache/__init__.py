"""
app/cache package marker.
"""

from __future__ import annotations

from app.cache.base import CacheEntry, ResultCache
from app.cache.memory_cache import InMemoryResultCache
from app.config import AggregationSettings


def build_result_cache(settings: AggregationSettings) -> ResultCache | None:
    """
    Build the configured cache backend, or None when caching is disabled.
    """

    if settings.cache_backend == "none":
        return None
    if settings.cache_backend == "sql":
        from app.cache.sql_cache import SQLResultCache
        from db.session import create_cache_engine

        return SQLResultCache(
            engine=create_cache_engine(settings.cache_url),
            ttl_seconds=settings.cache_ttl_seconds,
        )
    return InMemoryResultCache(ttl_seconds=settings.cache_ttl_seconds)


__all__ = [
    "CacheEntry",
    "InMemoryResultCache",
    "ResultCache",
    "build_result_cache",
]
