# src/seqflow/tasks/task_queue.py

from __future__ import annotations

import contextlib
from collections import deque
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any

from ..core.callbacks import Trampoline, invoke_fn
from ..core.ports import Task


def consume_task_queue(
        task_queue: deque[Task],
        on_complete: Callable[[Any], Any] | None = None,
        *,
        lock: AbstractContextManager[Any] | None = None,
) -> None:
    """
    Drain `task_queue` from the front until it is empty.

    Each task is removed before it runs and is called as `task(next, result)`, where
    `result` is whatever the previous task passed to its continuation (None for the first).
    Emptiness is re-checked before every step, so tasks appended while the drain is in
    flight are still processed. When the queue is empty, `on_complete(result)` is called.

    `lock`, when given, is held while the queue is inspected and while `on_complete` runs,
    never while a task executes.
    """
    guard = lock if lock is not None else contextlib.nullcontext()

    def step(result: Any) -> None:
        with guard:
            if not task_queue:
                invoke_fn(on_complete, result)
                return
            task = task_queue.popleft()
        task(advance, result)

    loop = Trampoline(step)

    def advance(result: Any = None) -> None:
        loop.resume(result)

    loop.resume(None)
