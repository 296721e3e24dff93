"""
app/domain package marker.
"""

from app.domain.api_result import (
    ApiResult,
    Failure,
    FetchTask,
    Snapshot,
    Success,
    format_result,
    is_success,
    map_success,
)

__all__ = [
    "ApiResult",
    "Failure",
    "FetchTask",
    "Snapshot",
    "Success",
    "format_result",
    "is_success",
    "map_success",
]
