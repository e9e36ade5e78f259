"""
tests.conftest

Shared fixtures: app/client construction and in-process log capture.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Any

import httpx
import pytest
import pytest_asyncio
import structlog
from fastapi import FastAPI
from structlog.testing import LogCapture

from structured_logging_demo.api.app import create_app
from structured_logging_demo.observability.logging import configure_logging
from structured_logging_demo.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(env="test", background_logger_enabled=False)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings=settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    # Unhandled errors come back as the framework's 500 response instead of raising.
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def captured_logs(settings: Settings) -> Iterator[list[dict[str, Any]]]:
    """
    Swap the live processor chain for merge_contextvars + LogCapture.

    The list is mutated in place (like `structlog.testing.capture_logs`) so that
    module-level loggers cached on first use are captured as well.
    """

    configure_logging(service_name=settings.service_name, level=settings.log_level)
    cap = LogCapture()
    processors = structlog.get_config()["processors"]
    saved = processors.copy()
    processors.clear()
    processors.extend([structlog.contextvars.merge_contextvars, cap])
    try:
        yield cap.entries
    finally:
        processors.clear()
        processors.extend(saved)
