"""
structured_logging_demo.background

Background emitter that logs outside of any HTTP request.

Responsibilities:
- Log `Logging step` with an increasing `step` counter at a fixed interval.
- Run on its own daemon thread until the process exits or `stop()` is called.
"""

from __future__ import annotations

import itertools
import threading

from structured_logging_demo.observability.logging import get_logger

log = get_logger(__name__)


class StepLogger:
    """
    A fresh thread starts with an empty contextvars context, so entries from
    this loop never carry request attributes.
    """

    def __init__(self, *, interval_seconds: float, thread_name: str = "EndlessLogger") -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._interval = interval_seconds
        self._thread_name = thread_name
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("StepLogger already started")
        self._thread = threading.Thread(target=self._run, name=self._thread_name, daemon=True)
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        for step in itertools.count():
            log.info("Logging step", step=step)
            # Event.wait doubles as the sleep; stop() wakes it immediately.
            if self._stop.wait(self._interval):
                return


# --- Module Notes -----------------------------------------------------------
# The app lifespan in `api.app` owns the single StepLogger instance.
