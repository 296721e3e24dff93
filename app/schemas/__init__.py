"""
app/schemas package marker.
"""

from app.schemas.snapshot import (
    ApiResultResponse,
    SnapshotResponse,
    SourceDescriptor,
    to_result_response,
    to_snapshot_response,
    to_source_descriptor,
)

__all__ = [
    "ApiResultResponse",
    "SnapshotResponse",
    "SourceDescriptor",
    "to_result_response",
    "to_snapshot_response",
    "to_source_descriptor",
]
