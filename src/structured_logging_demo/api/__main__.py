"""
structured_logging_demo.api.__main__

Run the demo service: `python -m structured_logging_demo.api` or the
`structured-logging-demo` console script.

Host and port come from `SLD_API_HOST` / `SLD_API_PORT`.
"""

from __future__ import annotations

import uvicorn

from structured_logging_demo.api.app import create_app
from structured_logging_demo.settings import get_settings


def main() -> None:
    settings = get_settings()

    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        # Keep uvicorn off its dictConfig; configure_logging already routed its
        # loggers to the JSON handler.
        log_config=None,
    )


if __name__ == "__main__":
    main()
