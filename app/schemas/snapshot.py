"""
app/schemas/snapshot.py

Response schemas for dashboard snapshot endpoints.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from app.domain.api_result import ApiResult, FetchTask, Snapshot, Success


class ApiResultResponse(BaseModel):
    """
    API response model for one source result.
    """

    status: Literal["success", "error"]
    source: str
    fetched_at: datetime
    attempts: int = Field(..., ge=1)
    data: Any = None
    error: str | None = None
    status_code: int | None = None


class SnapshotResponse(BaseModel):
    """
    API response model for a complete dashboard snapshot.
    """

    started_at: datetime
    completed_at: datetime
    success_count: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    summary: str
    sections: dict[str, dict[str, ApiResultResponse]]


class SourceDescriptor(BaseModel):
    """
    API response model describing one configured source task.
    """

    name: str
    label: str
    section: str
    cacheable: bool


def to_result_response(result: ApiResult) -> ApiResultResponse:
    if isinstance(result, Success):
        return ApiResultResponse(
            status="success",
            source=result.source,
            fetched_at=result.fetched_at,
            attempts=result.attempts,
            data=result.data,
        )
    return ApiResultResponse(
        status="error",
        source=result.source,
        fetched_at=result.fetched_at,
        attempts=result.attempts,
        error=result.error,
        status_code=result.status_code,
    )


def to_snapshot_response(snapshot: Snapshot) -> SnapshotResponse:
    return SnapshotResponse(
        started_at=snapshot.started_at,
        completed_at=snapshot.completed_at,
        success_count=snapshot.success_count,
        total=snapshot.total,
        summary=snapshot.summary_line(),
        sections={
            section: {name: to_result_response(result) for name, result in results.items()}
            for section, results in snapshot.grouped().items()
        },
    )


def to_source_descriptor(task: FetchTask) -> SourceDescriptor:
    return SourceDescriptor(
        name=task.name,
        label=task.display_name,
        section=task.section,
        cacheable=task.cacheable,
    )
