"""
db/session.py

SQLAlchemy engine factory for the result cache store.
"""

from __future__ import annotations

import os
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool


def _get_bool_env(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def create_cache_engine(database_url: str) -> Engine:
    """
    Create an engine for the cache store, creating the SQLite directory if needed.
    """

    url = make_url(database_url)
    connect_args: dict[str, object] = {}
    engine_kwargs: dict[str, object] = {}
    if url.get_backend_name() == "sqlite":
        # Worker threads share the engine.
        connect_args["check_same_thread"] = False
        if not url.database or url.database == ":memory:":
            engine_kwargs["poolclass"] = StaticPool
        else:
            Path(url.database).expanduser().parent.mkdir(parents=True, exist_ok=True)

    return create_engine(
        url,
        echo=_get_bool_env("SQL_ECHO", default=False),
        connect_args=connect_args,
        pool_pre_ping=True,
        **engine_kwargs,
    )
