"""
structured_logging_demo.observability.middleware

HTTP middleware for request-scoped logging context.

Responsibilities:
- Bind request metadata (URI, user agent, forwarded-for) into structlog contextvars.
- Log unhandled request failures with message and stack trace, then re-raise.
- Remove the request metadata when the request ends, on every exit path.
"""

from __future__ import annotations

import traceback

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from structured_logging_demo.observability.context import request_context
from structured_logging_demo.observability.logging import get_logger

log = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    - Every log entry emitted while handling a request carries `req.*` attributes
    - Unhandled errors are logged once and propagated unchanged

    Must be the outermost user middleware (added last) so that its context is
    visible to everything downstream and it sees every downstream failure.
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        with request_context(request):
            try:
                return await call_next(request)
            except Exception as exc:
                log.error(
                    "Request error",
                    **{
                        "error.message": str(exc),
                        "error.stacktrace": "".join(traceback.format_exception(exc)),
                    },
                )
                # Starlette's ServerErrorMiddleware turns this into the 500 response.
                raise


# --- Module Notes -----------------------------------------------------------
# HTTPException and validation errors are answered by the inner exception
# middleware and never reach `dispatch` as exceptions.
