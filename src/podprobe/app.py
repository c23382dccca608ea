"""FastAPI application factory with an async lifespan for the demo service."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from podprobe.api.router import root_router
from podprobe.config import Settings, get_settings
from podprobe.services.clock import ProcessClock
from podprobe.services.crash import CrashScheduler
from podprobe.services.metrics import build_registry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log readiness on startup; cancel a pending crash on graceful shutdown."""
    settings: Settings = app.state.settings
    logger.info(
        "podprobe %s listening on http://%s:%d",
        settings.app_version,
        settings.host,
        settings.port,
    )

    yield

    await app.state.crash_scheduler.cancel()
    logger.info("podprobe shutting down after %ds", app.state.clock.uptime_seconds())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the app factory. Uvicorn calls it with the --factory flag:
        uvicorn podprobe.app:create_app --factory

    The process clock starts here, so uptime counts from app creation.
    """
    if settings is None:
        settings = get_settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    app = FastAPI(
        title="podprobe",
        description="Container platform demo: probes, identity, CPU load, crash and metrics",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    clock = ProcessClock()
    app.state.settings = settings
    app.state.clock = clock
    app.state.crash_scheduler = CrashScheduler(
        delay_ms=settings.crash_delay_ms,
        exit_code=settings.crash_exit_code,
    )
    app.state.metrics_registry = build_registry(clock)

    app.include_router(root_router)

    return app
