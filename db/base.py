"""
db/base.py

Declarative base for the result cache store.
"""

from typing import Any

from sqlalchemy import JSON
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """
    Declarative base shared by cache store models.
    Serialized envelopes map to the portable JSON type so SQLite and
    Postgres both accept them.
    """

    type_annotation_map: dict[Any, Any] = {
        dict[str, Any]: JSON,
    }
