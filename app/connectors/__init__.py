"""
app/connectors package marker.
"""

from app.connectors.base import (
    RETRYABLE_STATUS_CODES,
    FetchClient,
    FetchOptions,
    RetryPolicy,
)

__all__ = [
    "RETRYABLE_STATUS_CODES",
    "FetchClient",
    "FetchOptions",
    "RetryPolicy",
]
