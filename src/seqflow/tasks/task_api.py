# src/seqflow/tasks/task_api.py

"""
Task factories.

Each helper returns a Task `(cb, previous_result=None)` that threads the incoming
result through unchanged, so inserting one of them into a chain never alters what
the next real step receives.
"""

from __future__ import annotations

import asyncio
import functools
from collections.abc import Callable, Coroutine
from datetime import datetime
from typing import Any

from ..core.callbacks import invoke_fn
from ..core.ports import Continuation, Printer, StepTask, Task, Timer
from .iterators import repeat_task_until
from .task_models import DEFAULT_DELAY_MS, DEFAULT_TS_FORMAT, UNSET

# Strong references to coroutine steps scheduled with create_task (the loop keeps weak ones).
_background_tasks: set[asyncio.Task[Any]] = set()


def get_sync_task(task_fn: Callable[[], Any]) -> Task:
    """Wrap a plain zero-argument function: run it, then continue immediately."""

    def task(cb: Continuation, result: Any = None) -> None:
        task_fn()
        invoke_fn(cb, result)

    return task


def get_log_task(msg: Any = UNSET, *, out: Printer = print) -> Task:
    """
    Print a value, then continue.

    - no argument: print the threaded result
    - callable: print msg(result)
    - anything else: print msg as is
    """

    def task(cb: Continuation, result: Any = None) -> None:
        if msg is UNSET:
            value = result
        elif callable(msg):
            value = msg(result)
        else:
            value = msg
        out(value)
        invoke_fn(cb, result)

    return task


def get_timestamp_task(fmt: str | None = None, *, out: Printer = print) -> Task:
    """Print the current local time, then continue."""
    pattern = fmt or DEFAULT_TS_FORMAT

    def task(cb: Continuation, result: Any = None) -> None:
        out(datetime.now().astimezone().strftime(pattern))
        invoke_fn(cb, result)

    return task


def get_delayed_task(
        fn: Callable[[], Any] | None = None,
        period: float | None = None,
        *,
        timer: Timer,
) -> Task:
    """
    Run `fn` (optional), then wait `period` milliseconds before continuing.

    The wait goes through `timer`; the task returns immediately.
    """
    if period is None:
        period = DEFAULT_DELAY_MS

    def task(cb: Continuation, result: Any = None) -> None:
        invoke_fn(fn)
        timer.call_later(period, functools.partial(invoke_fn, cb, result))

    return task


def get_sleep_task(period: float | None = None, *, timer: Timer) -> Task:
    """Special case of get_delayed_task with nothing to run before the wait."""
    return get_delayed_task(None, period, timer=timer)


def get_repeat_until_task(task: StepTask, check_fn: Callable[[], bool]) -> Task:
    """A single chain step that runs repeat_task_until and continues once it finishes."""

    def step(cb: Continuation, result: Any = None) -> None:
        repeat_task_until(task, check_fn, functools.partial(invoke_fn, cb, result))

    return step


def get_coroutine_task(
        coro_fn: Callable[[Any], Coroutine[Any, Any, Any]],
        *,
        loop: asyncio.AbstractEventLoop | None = None,
) -> Task:
    """
    Run `await coro_fn(previous_result)` on an event loop; its return value is the step result.

    Without `loop`, the step must start on a thread with a running loop.
    An exception raised by the coroutine is left to the loop (the chain does not continue).
    """

    def task(cb: Continuation, result: Any = None) -> None:
        if loop is not None:
            cfut = asyncio.run_coroutine_threadsafe(coro_fn(result), loop)
            cfut.add_done_callback(lambda f: invoke_fn(cb, f.result()))
            return

        running = asyncio.get_running_loop()
        t = running.create_task(coro_fn(result))
        _background_tasks.add(t)
        t.add_done_callback(_background_tasks.discard)
        t.add_done_callback(lambda f: invoke_fn(cb, f.result()))

    return task
