"""
app/api/routers/snapshot_router.py

Dashboard snapshot HTTP endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.schemas.snapshot import (
    SnapshotResponse,
    SourceDescriptor,
    to_snapshot_response,
    to_source_descriptor,
)
from app.services.dashboard_service import DashboardService, get_dashboard_service

router = APIRouter(tags=["snapshot"])


@router.get("/snapshot", response_model=SnapshotResponse)
def get_snapshot(
    refresh: bool = Query(default=False, description="Bypass and repopulate cached sources"),
    workers: int | None = Query(default=None, ge=1, description="Override the worker pool size"),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> SnapshotResponse:
    """
    Fetch every configured source and return the grouped results.
    """

    try:
        snapshot = dashboard_service.build_snapshot(force_refresh=refresh, concurrency=workers)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc

    return to_snapshot_response(snapshot)


@router.get("/snapshot/sources", response_model=list[SourceDescriptor])
def list_sources(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> list[SourceDescriptor]:
    """
    List the configured source tasks without fetching them.
    """

    return [to_source_descriptor(task) for task in dashboard_service.sources()]
