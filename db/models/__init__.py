"""
Model package exports.

Import all SQLAlchemy models here so metadata registration works without
extra imports.
"""

from db.models.cached_api_result import CachedApiResult

__all__ = [
    "CachedApiResult",
]
