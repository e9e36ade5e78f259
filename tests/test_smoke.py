"""
tests.test_smoke

Minimal smoke tests to validate the service can boot and serve its endpoints.
"""

from __future__ import annotations

import logging

import httpx
import pytest
import structlog

from structured_logging_demo.api.app import create_app
from structured_logging_demo.settings import Settings


@pytest.mark.asyncio
async def test_app_boots_and_serves_index() -> None:
    app = create_app(settings=Settings(env="test", background_logger_enabled=False))

    # httpx ASGITransport does not manage lifespan automatically; do it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            r = await client.get("/")
            assert r.status_code == 200
            assert r.headers["content-type"].startswith("text/plain")


@pytest.mark.asyncio
async def test_lifespan_runs_background_logger() -> None:
    app = create_app(
        settings=Settings(
            env="test",
            background_logger_enabled=True,
            background_log_interval_seconds=0.01,
        )
    )

    async with app.router.lifespan_context(app):
        step_logger = app.state.step_logger
        assert step_logger is not None
        assert step_logger.running

    assert not step_logger.running


@pytest.mark.asyncio
async def test_lifespan_without_background_logger() -> None:
    app = create_app(settings=Settings(env="test", background_logger_enabled=False))

    async with app.router.lifespan_context(app):
        assert app.state.step_logger is None


def test_server_loggers_share_the_json_handler() -> None:
    create_app(settings=Settings(env="test", background_logger_enabled=False))

    # pytest attaches its own capture handlers to the root logger as well.
    [root_handler] = [
        h
        for h in logging.getLogger().handlers
        if isinstance(h.formatter, structlog.stdlib.ProcessorFormatter)
    ]
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        server_logger = logging.getLogger(name)
        assert server_logger.handlers == [root_handler]
        assert server_logger.propagate is False
