"""
structured_logging_demo.api.routers.demo

Demo endpoints whose log entries show the request context at work.

Responsibilities:
- `/` lists the other endpoints.
- `/fault` logs and then always fails.
- `/divide/{a}/by/{b}` logs the operands; dividing by zero fails.

Handlers are plain `def` functions: Starlette runs them in its threadpool with a
copy of the request's contextvars, so their log entries carry `req.*` too.
"""

from __future__ import annotations

from decimal import Decimal

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from structured_logging_demo.observability.logging import get_logger
from structured_logging_demo.services.arithmetic import divide as exact_divide
from structured_logging_demo.services.arithmetic import to_plain_string

log = get_logger(__name__)

router = APIRouter(default_response_class=PlainTextResponse)


@router.get("/", name="index")
def index(request: Request) -> str:
    fault_url = request.url_for("fault")
    divide_url = request.url_for("divide", a="10", b="2")
    return f"These endpoints are available:\n - {fault_url}\n - {divide_url}\n"


@router.get("/fault", name="fault")
def fault() -> str:
    log.info("I'm about to throw an error")
    raise RuntimeError("Bad luck, this is an error")


@router.get("/divide/{a}/by/{b}", name="divide")
def divide(a: Decimal, b: Decimal) -> str:
    # What would happen if we divide by zero?
    result = exact_divide(a, b)
    log.info("Divide op", a=to_plain_string(a), b=to_plain_string(b))
    return f"{to_plain_string(a)} / {to_plain_string(b)} = {to_plain_string(result)}\n"


# --- Module Notes -----------------------------------------------------------
# Errors raised here are logged by `observability.middleware.RequestLoggingMiddleware`.
