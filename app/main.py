from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import get_dashboard_settings, load_env_files
from app.logging_utils import configure_logging


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Log the effective fetch and aggregation settings on boot."""
    settings = get_dashboard_settings()
    logging.getLogger(__name__).info(
        "Dashboard API starting workers=%s sequential=%s cache_backend=%s cache_ttl_seconds=%s "
        "run_timeout_seconds=%s fetch_timeout_seconds=%s max_attempts=%s",
        settings.aggregation.parallel_workers,
        settings.aggregation.sequential,
        settings.aggregation.cache_backend,
        settings.aggregation.cache_ttl_seconds,
        settings.aggregation.run_timeout_seconds,
        settings.fetch.timeout_seconds,
        settings.fetch.max_attempts,
    )
    yield
    logging.getLogger(__name__).info("Dashboard API shut down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    load_env_files()
    configure_logging()

    application = FastAPI(
        title="Current Info Dashboard API",
        version="1.0.0",
        lifespan=_lifespan,
    )

    from app.api.routers import snapshot_router

    application.include_router(snapshot_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()
