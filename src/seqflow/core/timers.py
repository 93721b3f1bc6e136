# src/seqflow/core/timers.py

"""
Concrete Timer implementations for delay/sleep tasks.

- ThreadingTimer: one daemon threading.Timer per call; the callback runs on the timer thread.
- AsyncioTimer: schedules on an event loop; safe to call from other threads.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import Any

from .ports import Timer

logger = logging.getLogger(__name__)


def _seconds(delay_ms: float) -> float:
    return max(0.0, float(delay_ms)) / 1000.0


class ThreadingTimer:
    """Timer backed by daemon threads, usable without any event loop."""

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> None:
        t = threading.Timer(_seconds(delay_ms), callback)
        t.daemon = True
        t.start()


class AsyncioTimer:
    """
    Timer backed by an asyncio event loop.

    If no loop is given, the loop running at call time is used.
    Calls made from a thread other than the loop's are handed over with call_soon_threadsafe.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> None:
        try:
            running: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        loop = self._loop or running
        if loop is None:
            raise RuntimeError("AsyncioTimer needs a running event loop or an explicit loop")

        delay = _seconds(delay_ms)
        if loop is running:
            loop.call_later(delay, callback)
        else:
            loop.call_soon_threadsafe(loop.call_later, delay, callback)


def make_timer(backend: str = "thread") -> Timer:
    """Build a timer by backend name ("thread" or "asyncio")."""
    name = (backend or "").strip().lower()
    if name == "asyncio":
        return AsyncioTimer()
    if name not in ("thread", "threading"):
        logger.warning("Unknown timer backend %r; falling back to threads", backend)
    return ThreadingTimer()
