"""
structured_logging_demo.api.app

FastAPI app factory for the structured logging demo service.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Start and stop the background emitter with the app lifespan.
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from structured_logging_demo.api.routers.demo import router as demo_router
from structured_logging_demo.background import StepLogger
from structured_logging_demo.observability.logging import configure_logging, get_logger
from structured_logging_demo.observability.middleware import RequestLoggingMiddleware
from structured_logging_demo.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    # Configure structured logging once at process startup (before app serves requests).
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        step_logger: StepLogger | None = None
        if settings.background_logger_enabled:
            step_logger = StepLogger(interval_seconds=settings.background_log_interval_seconds)
            step_logger.start()
        app.state.step_logger = step_logger
        try:
            yield
        finally:
            if step_logger is not None:
                step_logger.stop(timeout=5)
            log.info("shutdown")

    app = FastAPI(
        title="Structured Logging Demo",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(demo_router, tags=["demo"])
    # Added last => outermost user middleware: runs first, sees every downstream error.
    app.add_middleware(RequestLoggingMiddleware)

    return app


# --- Module Notes -----------------------------------------------------------
# Any middleware added in the future must be registered before
# RequestLoggingMiddleware, otherwise its logs would miss the request context.
