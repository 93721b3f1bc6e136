# src/seqflow/tasks/iterators.py

"""
Fixed-length iterators.

These walk a sequence whose length is captured once, before the first step.
They do not depend on the queue runner and can be used on their own.

- exec_task_with_params: call one task function per element.
- exec_task_queue / exec_tasks: run a literal list of continuation-only tasks.
- repeat_task_until: post-checked loop, the task always runs at least once, no result threading.
- repeat_task_while: pre-checked loop, may run zero times, threads a result.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from ..core.callbacks import Trampoline, invoke_fn
from ..core.ports import StepTask


def exec_task_with_params(
        task_fn: Callable[[Any, Callable[..., None]], None],
        param_array: Sequence[Any],
        on_complete: Callable[[], Any] | None = None,
) -> None:
    """
    Call `task_fn(item, advance)` for each element of `param_array`, one at a time.

    `advance()` moves on to the next element. After the last element `on_complete()` is
    called with no arguments (immediately for an empty sequence).
    """
    length = len(param_array)
    index = 0

    def step(_: Any) -> None:
        nonlocal index
        if index < length:
            item = param_array[index]
            index += 1
            task_fn(item, advance)
        else:
            invoke_fn(on_complete)

    loop = Trampoline(step)

    def advance(*_: Any) -> None:
        loop.resume()

    loop.resume()


def exec_task_queue(
        task_queue: Sequence[StepTask],
        on_complete: Callable[[], Any] | None = None,
) -> None:
    """
    Run the tasks of `task_queue` in order; each is called as `task(advance)`.

    The sequence is read by index and is not consumed. Mutating it during iteration is
    not supported.
    """
    length = len(task_queue)
    index = 0

    def step(_: Any) -> None:
        nonlocal index
        if index < length:
            task = task_queue[index]
            index += 1
            task(advance)
        else:
            invoke_fn(on_complete)

    loop = Trampoline(step)

    def advance(*_: Any) -> None:
        loop.resume()

    loop.resume()


def exec_tasks(*tasks: StepTask) -> None:
    """Run the given tasks in order. The next one is blocked until the current one continues."""
    exec_task_queue(tasks)


def repeat_task_until(
        task: StepTask,
        check_fn: Callable[[], bool],
        on_complete: Callable[[], Any] | None = None,
) -> None:
    """
    Run `task(advance)` repeatedly until `check_fn()` returns true.

    `check_fn` is evaluated only after a task run completes, never before the first one.
    If it never becomes true the loop never ends.
    """
    started = False

    def step(_: Any) -> None:
        nonlocal started
        if started and check_fn():
            invoke_fn(on_complete)
            return
        started = True
        task(advance)

    loop = Trampoline(step)

    def advance(*_: Any) -> None:
        loop.resume()

    loop.resume()


def repeat_task_while(
        task: Callable[[Callable[..., None], Any], None],
        predicate: Callable[[], bool],
        on_complete: Callable[[Any], Any] | None = None,
        seed: Any = None,
) -> None:
    """
    Run `task(advance, previous_result)` while `predicate()` is true.

    The predicate is checked before every run, so the task may not run at all.
    Each run hands its result on with `advance(result)`; the last result (or `seed`)
    is passed to `on_complete(result)`.
    """

    def step(result: Any) -> None:
        if predicate():
            task(advance, result)
        else:
            invoke_fn(on_complete, result)

    loop = Trampoline(step)

    def advance(result: Any = None) -> None:
        loop.resume(result)

    loop.resume(seed)
