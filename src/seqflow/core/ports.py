# src/seqflow/core/ports.py

"""
Ports (interfaces) used by the engine.

The engine depends on Protocols instead of concrete implementations.
Timers and output sinks stay swappable, which keeps tests deterministic.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol

Continuation = Callable[..., None]
# Called exactly once by a task: cb() or cb(result).


class Task(Protocol):
    """
    Unit of schedulable work.

    Receives the completion continuation and the previous task's result (None when absent).
    Must call `cb` on every code path; a task that never does stalls its chain.
    """
    def __call__(self, cb: Continuation, previous_result: Any = None) -> None: ...


class StepTask(Protocol):
    """Continuation-only task used by the fixed-length iterators (no result threading)."""
    def __call__(self, cb: Continuation) -> None: ...


class Timer(Protocol):
    """
    Deferred-invocation primitive (delay tasks).

    `delay_ms` is a millisecond interval. The callback must run eventually, no earlier than the
    interval; exact timing is not guaranteed.
    """
    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> None: ...


class Printer(Protocol):
    """Output sink for print/timestamp tasks (print() by default)."""
    def __call__(self, value: Any) -> Any: ...
