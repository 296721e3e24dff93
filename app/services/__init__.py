"""
app/services package marker.
"""

from app.services.aggregation_service import AggregationConfigError, AggregationService
from app.services.dashboard_catalog import build_dashboard_tasks
from app.services.dashboard_service import (
    DashboardService,
    build_dashboard_service,
    get_dashboard_service,
)

__all__ = [
    "AggregationConfigError",
    "AggregationService",
    "build_dashboard_tasks",
    "DashboardService",
    "build_dashboard_service",
    "get_dashboard_service",
]
