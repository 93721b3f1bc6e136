# src/seqflow/core/callbacks.py

"""
Callback helpers shared by every drainer and iterator.

- invoke_fn: call an optional callback only when it is actually callable.
- Trampoline: run continuation steps iteratively, so a long run of tasks that
  complete synchronously does not grow the Python call stack.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any


def invoke_fn(fn: Any, *args: Any) -> Any:
    """Call `fn(*args)` if `fn` is callable; otherwise do nothing and return None."""
    if callable(fn):
        return fn(*args)
    return None


class Trampoline:
    """
    Drives a `step(value)` function through repeated `resume(value)` calls.

    A task that calls its continuation before returning would normally re-enter
    `step` recursively. Here such a resume only records the value; the outer
    loop picks it up once the current step returns. The next step therefore
    starts only after the current task body has returned: code a task runs
    after calling its continuation happens before the next task, not after it.
    A resume that arrives later (from a timer thread or an event loop callback)
    starts the loop again on the calling thread.

    Exceptions raised by `step` are not caught. If the step had already resumed
    before raising, the loop keeps going until it runs dry and the first
    exception is re-raised afterwards.
    """

    def __init__(self, step: Callable[[Any], None]) -> None:
        self._step = step
        self._lock = threading.Lock()
        self._looping = False
        self._pending = False
        self._value: Any = None

    def resume(self, value: Any = None) -> None:
        with self._lock:
            self._value = value
            self._pending = True
            if self._looping:
                return
            self._looping = True

        error: BaseException | None = None
        while True:
            with self._lock:
                if not self._pending:
                    self._looping = False
                    break
                self._pending = False
                value, self._value = self._value, None

            try:
                self._step(value)
            except BaseException as exc:
                if error is None:
                    error = exc

        if error is not None:
            raise error
