"""
db/models/cached_api_result.py

Persistent cache row for one task's most recent fetch result.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from db.base import Base


class CachedApiResult(Base):
    __tablename__ = "cached_api_results"

    cache_key: Mapped[str] = mapped_column(String(255), primary_key=True)
    source: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        comment="success or error",
    )
    payload: Mapped[dict[str, Any]] = mapped_column(
        JSON,
        nullable=False,
        comment="Serialized result envelope",
    )
    stored_at: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Epoch seconds when the entry was written; drives TTL checks",
    )
