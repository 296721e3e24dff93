"""
app/services/dashboard_service.py

Ties settings, HTTP client, cache and aggregator together for one dashboard.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache

from app.cache import ResultCache, build_result_cache
from app.config import DashboardSettings, get_dashboard_settings
from app.connectors.base import FetchClient, FetchOptions
from app.domain.api_result import FetchTask, Snapshot
from app.services.aggregation_service import AggregationService
from app.services.dashboard_catalog import build_dashboard_tasks

logger = logging.getLogger(__name__)


class DashboardService:
    """
    Builds dashboard snapshots from the configured source catalog.
    """

    def __init__(
        self,
        *,
        settings: DashboardSettings,
        client: FetchClient,
        cache: ResultCache | None,
        aggregator: AggregationService,
        include_extended: bool = False,
    ) -> None:
        self._settings = settings
        self._client = client
        self._cache = cache
        self._aggregator = aggregator
        self._include_extended = include_extended

    @property
    def cache(self) -> ResultCache | None:
        return self._cache

    def tasks(self, *, today: date | None = None) -> list[FetchTask]:
        return build_dashboard_tasks(
            self._settings,
            self._client,
            today=today,
            include_extended=self._include_extended,
        )

    def build_snapshot(
        self,
        *,
        force_refresh: bool = False,
        concurrency: int | None = None,
        today: date | None = None,
    ) -> Snapshot:
        """
        Fetch every source once and return the assembled snapshot.
        """

        tasks = self.tasks(today=today)
        logger.info(
            "Building dashboard snapshot tasks=%s force_refresh=%s cache=%s",
            len(tasks),
            force_refresh,
            type(self._cache).__name__ if self._cache is not None else "disabled",
        )
        return self._aggregator.run_all(
            tasks,
            concurrency=concurrency,
            cache=self._cache,
            force_refresh=force_refresh,
        )

    def sources(self) -> list[FetchTask]:
        """
        Task descriptors without running them.
        """

        return self.tasks()


def build_dashboard_service(settings: DashboardSettings) -> DashboardService:
    return DashboardService(
        settings=settings,
        client=FetchClient(options=FetchOptions.from_settings(settings.fetch)),
        cache=build_result_cache(settings.aggregation),
        aggregator=AggregationService(settings=settings.aggregation),
        include_extended=settings.aggregation.include_extended,
    )


@lru_cache(maxsize=1)
def get_dashboard_service() -> DashboardService:
    """
    Build and cache the dashboard service from environment settings.
    """

    return build_dashboard_service(get_dashboard_settings())
