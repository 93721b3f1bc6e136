# src/seqflow/tasks/task_runner.py

"""
Queue runner.

Serializes appended tasks into one ordered, resumable chain:
- append while IDLE   -> start a new batch seeded with the last batch's result,
- append while DRAINING -> join the batch that is already running,
- when the queue runs dry the batch ends and its final result is remembered.

Every append returns the runner, so steps can be chained fluently:

    QueueRunner().log("A").sleep(500).log("B")
"""

from __future__ import annotations

import asyncio
import functools
import logging
import threading
from collections import deque
from collections.abc import Callable, Coroutine
from typing import Any

from ..config import Settings, get_settings
from ..core.ports import Continuation, Printer, StepTask, Task, Timer
from ..core.timers import make_timer
from .task_api import (
    get_coroutine_task,
    get_delayed_task,
    get_log_task,
    get_repeat_until_task,
    get_sync_task,
    get_timestamp_task,
)
from .task_models import UNSET, RunnerState
from .task_queue import consume_task_queue

logger = logging.getLogger(__name__)


class QueueRunner:
    """
    Owns one task queue plus the scheduling state.

    - running: True iff a drain loop is active for this queue.
    - last_result: final result of the most recently completed batch; seeds the next batch.

    The queue and both fields belong to the runner alone. An RLock makes
    "check running -> push" and "queue empty -> running=False" atomic, so appends
    coming from timer threads are never lost. The lock is never held while a task runs.
    """

    def __init__(
        self,
        timer: Timer | None = None,
        *,
        out: Printer | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.timer = timer or make_timer(self.settings.timer_backend)
        self.out: Printer = out or print

        self.running = False
        self.queue: deque[Task] = deque()
        self.last_result: Any = None

        self._lock = threading.RLock()
        self._batch_seq = 0

    # ---------- state ----------
    @property
    def state(self) -> RunnerState:
        return RunnerState.from_flag(self.running)

    @property
    def pending(self) -> int:
        """Number of queued tasks that have not started yet."""
        with self._lock:
            return len(self.queue)

    # ---------- core ----------
    def exec(self, task: Task) -> QueueRunner:
        """Append a task `(cb, previous_result)`; start a batch if none is running."""
        with self._lock:
            if self.running:
                self.queue.append(task)
                logger.debug("Batch %d: task joined (queued=%d)", self._batch_seq, len(self.queue))
                return self

            self.queue.append(self._seeded(task))
            self.running = True
            self._batch_seq += 1
            batch = self._batch_seq

        logger.debug("Batch %d started", batch)
        consume_task_queue(self.queue, functools.partial(self._on_drain_done, batch), lock=self._lock)
        return self

    def _seeded(self, task: Task) -> Task:
        # First task of a batch: feed it last_result as read when it actually runs.
        def first(cb: Continuation, _result: Any = None) -> None:
            task(cb, self.last_result)

        return first

    def _on_drain_done(self, batch: int, result: Any) -> None:
        with self._lock:
            self.running = False
            self.last_result = result
        logger.debug("Batch %d drained", batch)

    # ---------- derived steps ----------
    def sync(self, fn: Callable[[], Any]) -> QueueRunner:
        """Run a plain function as a step; the previous result passes through."""
        return self.exec(get_sync_task(fn))

    def log(self, msg: Any = UNSET) -> QueueRunner:
        """Print `msg`, the threaded result (no argument), or `msg(result)` (callable)."""
        return self.exec(get_log_task(msg, out=self.out))

    def ts(self, fmt: str | None = None) -> QueueRunner:
        """Print the current timestamp."""
        return self.exec(get_timestamp_task(fmt or self.settings.ts_format, out=self.out))

    def wait(self, period: float | None = None, fn: Callable[[], Any] | None = None) -> QueueRunner:
        """Run `fn` (optional), then pause the chain for `period` milliseconds."""
        if period is None:
            period = self.settings.default_delay_ms
        return self.exec(get_delayed_task(fn, period, timer=self.timer))

    def sleep(self, period: float | None = None) -> QueueRunner:
        return self.wait(period)

    def repeat_until(self, task: StepTask, check_fn: Callable[[], bool]) -> QueueRunner:
        """Repeat `task(cb)` until `check_fn()` is true after a run; then continue the chain."""
        return self.exec(get_repeat_until_task(task, check_fn))

    def exec_coroutine(
        self,
        coro_fn: Callable[[Any], Coroutine[Any, Any, Any]],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> QueueRunner:
        """Await `coro_fn(previous_result)` as a step; its return value is the next input."""
        return self.exec(get_coroutine_task(coro_fn, loop=loop))


Qr = QueueRunner
