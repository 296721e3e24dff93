"""
app/cache/sql_cache.py

Persistent TTL cache for fetch results backed by SQLAlchemy (SQLite by default).
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable

from sqlalchemy import delete, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.cache.base import CacheEntry
from app.domain.api_result import ApiResult, result_from_payload, result_to_payload
from db.base import Base
from db.models.cached_api_result import CachedApiResult

logger = logging.getLogger(__name__)


class SQLResultCache:
    """
    Stores envelopes as JSON rows so cached results survive process restarts.

    Storage errors are logged and treated as cache misses; a broken cache
    never fails an aggregation run.
    """

    def __init__(
        self,
        *,
        engine: Engine,
        ttl_seconds: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.ttl_seconds = max(0.0, ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._session_factory = sessionmaker(
            bind=engine,
            class_=Session,
            autoflush=False,
            expire_on_commit=False,
        )
        Base.metadata.create_all(engine, tables=[CachedApiResult.__table__])

    def get(self, key: str) -> ApiResult | None:
        with self._lock:
            try:
                with self._session_factory() as session:
                    row = session.get(CachedApiResult, key)
                    if row is None:
                        return None
                    entry = CacheEntry(result=result_from_payload(row.payload), stored_at=row.stored_at)
                    if entry.is_valid(now=self._clock(), ttl_seconds=self.ttl_seconds):
                        return entry.result
                    session.delete(row)
                    session.commit()
                    return None
            except (SQLAlchemyError, KeyError, ValueError) as exc:
                logger.warning("Result cache read failed key=%s error=%s", key, exc)
                return None

    def put(self, key: str, result: ApiResult) -> None:
        with self._lock:
            try:
                with self._session_factory() as session:
                    session.merge(
                        CachedApiResult(
                            cache_key=key,
                            source=result.source,
                            status=result.status,
                            payload=result_to_payload(result),
                            stored_at=self._clock(),
                        )
                    )
                    session.commit()
            except (SQLAlchemyError, TypeError, ValueError) as exc:
                logger.warning("Result cache write failed key=%s error=%s", key, exc)

    def invalidate(self, key: str) -> None:
        with self._lock:
            try:
                with self._session_factory() as session:
                    session.execute(delete(CachedApiResult).where(CachedApiResult.cache_key == key))
                    session.commit()
            except SQLAlchemyError as exc:
                logger.warning("Result cache invalidate failed key=%s error=%s", key, exc)

    def invalidate_all(self) -> None:
        with self._lock:
            try:
                with self._session_factory() as session:
                    session.execute(delete(CachedApiResult))
                    session.commit()
            except SQLAlchemyError as exc:
                logger.warning("Result cache clear failed error=%s", exc)

    def keys(self) -> list[str]:
        with self._lock:
            try:
                with self._session_factory() as session:
                    return list(session.scalars(select(CachedApiResult.cache_key)))
            except SQLAlchemyError as exc:
                logger.warning("Result cache key listing failed error=%s", exc)
                return []
