"""
structured_logging_demo.observability.context

Request-scoped logging context.

Responsibilities:
- Name the request attributes merged into every log entry.
- Extract those attributes from an inbound request.
- Bind them for exactly the lifetime of a request (scoped acquire/release).

Values live in `structlog.contextvars`, i.e. in `contextvars`: each asyncio task
and each threadpool worker call sees its own copy, so concurrent requests never
observe each other's attributes.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from starlette.requests import Request

REQ_URI = "req.uri"
REQ_USER_AGENT = "req.userAgent"
REQ_X_FORWARDED_FOR = "req.xForwardedFor"

REQUEST_CONTEXT_KEYS: tuple[str, ...] = (REQ_URI, REQ_USER_AGENT, REQ_X_FORWARDED_FOR)


def _request_path(request: Request) -> str:
    # From the scope, not request.url: a decoded "?" or "#" in the path would be
    # re-parsed as query/fragment there and truncate the value.
    root_path = request.scope.get("root_path", "")
    path = request.scope["path"]
    if root_path and not path.startswith(root_path):
        return root_path + path
    return path


def extract_request_context(request: Request) -> dict[str, str]:
    # Missing headers are stored as "" so every entry carries all three keys.
    return {
        REQ_URI: _request_path(request),
        REQ_USER_AGENT: request.headers.get("user-agent", ""),
        REQ_X_FORWARDED_FOR: request.headers.get("x-forwarded-for", ""),
    }


@contextmanager
def request_context(request: Request) -> Iterator[dict[str, str]]:
    """
    Bind the request attributes for the duration of the `with` block.

    On exit (normal or exceptional) the keys are unbound. A value that was
    already bound under one of these keys before entering is put back rather
    than dropped. Request tasks start from a fresh context, so after a served
    request none of the keys remain.
    """

    attrs = extract_request_context(request)
    with structlog.contextvars.bound_contextvars(**attrs):
        yield attrs


def current_request_context() -> dict[str, str]:
    bound = structlog.contextvars.get_contextvars()
    return {key: bound[key] for key in REQUEST_CONTEXT_KEYS if key in bound}


# --- Module Notes -----------------------------------------------------------
# Code running outside a request (e.g. the background emitter) gets an empty
# mapping from `current_request_context()`.
