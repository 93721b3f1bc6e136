# tests/test_task_api.py

from __future__ import annotations

import asyncio
from typing import Any

import pytest

from seqflow.core.timers import AsyncioTimer
from seqflow.tasks.task_api import (
    get_coroutine_task,
    get_delayed_task,
    get_log_task,
    get_repeat_until_task,
    get_sleep_task,
    get_sync_task,
    get_timestamp_task,
)
from seqflow.tasks.task_runner import QueueRunner

from .fakes import FakeTimer, RecordingPrinter


def _run(task, previous: Any = None) -> list[tuple]:
    calls: list[tuple] = []
    task(lambda *args: calls.append(args), previous)
    return calls


def test_sync_task_runs_fn_and_threads_input() -> None:
    ran: list[bool] = []
    assert _run(get_sync_task(lambda: ran.append(True)), "in") == [("in",)]
    assert ran == [True]


def test_log_task_variants() -> None:
    out = RecordingPrinter()
    _run(get_log_task("fixed", out=out), "r")
    _run(get_log_task(out=out), "r")
    _run(get_log_task(str.upper, out=out), "r")
    _run(get_log_task(None, out=out), "r")

    assert out.lines == ["fixed", "r", "R", None]


def test_tasks_tolerate_missing_continuation() -> None:
    out = RecordingPrinter()
    get_log_task("x", out=out)(None)
    get_sync_task(lambda: None)(None)
    assert out.lines == ["x"]


def test_timestamp_task_uses_format() -> None:
    out = RecordingPrinter()
    calls = _run(get_timestamp_task("%Y", out=out), 7)
    assert calls == [(7,)]
    assert len(out.lines[0]) == 4 and out.lines[0].isdigit()


def test_delayed_task_runs_fn_then_waits(timer: FakeTimer) -> None:
    events: list[str] = []
    task = get_delayed_task(lambda: events.append("fn"), 250, timer=timer)

    calls = _run(task, "r")
    assert events == ["fn"]
    assert calls == []

    timer.advance(250)
    assert calls == [("r",)]


def test_sleep_task_default_period(timer: FakeTimer) -> None:
    calls = _run(get_sleep_task(timer=timer))
    assert timer.requested == [1000]
    timer.advance(1000)
    assert calls == [(None,)]


def test_repeat_until_task_threads_input() -> None:
    n = {"v": 0}

    def bump(cb) -> None:
        n["v"] += 1
        cb()

    calls = _run(get_repeat_until_task(bump, lambda: n["v"] == 2), "keep")
    assert n["v"] == 2
    assert calls == [("keep",)]


@pytest.mark.asyncio
async def test_coroutine_task_result_becomes_next_input() -> None:
    async def double(prev: int) -> int:
        await asyncio.sleep(0)
        return prev * 2

    loop = asyncio.get_running_loop()
    done: asyncio.Future = loop.create_future()
    runner = QueueRunner(AsyncioTimer(loop), out=RecordingPrinter())

    runner.exec(lambda cb, prev: cb(21)).exec_coroutine(double).sync(lambda: done.set_result(True))
    await asyncio.wait_for(done, timeout=2.0)

    assert runner.last_result == 42


@pytest.mark.asyncio
async def test_coroutine_task_on_explicit_loop_from_other_thread() -> None:
    async def echo(prev: str) -> str:
        return f"{prev}!"

    loop = asyncio.get_running_loop()
    got: asyncio.Future = loop.create_future()
    task = get_coroutine_task(echo, loop=loop)

    def start() -> None:
        task(lambda r: loop.call_soon_threadsafe(got.set_result, r), "hi")

    await asyncio.to_thread(start)
    assert await asyncio.wait_for(got, timeout=2.0) == "hi!"


@pytest.mark.asyncio
async def test_asyncio_timer_delays_chain() -> None:
    loop = asyncio.get_running_loop()
    out = RecordingPrinter()
    finished: asyncio.Future = loop.create_future()
    runner = QueueRunner(AsyncioTimer(), out=out)

    started = loop.time()
    runner.sleep(50).log("done").sync(lambda: finished.set_result(loop.time()))
    assert out.lines == []

    ended = await asyncio.wait_for(finished, timeout=2.0)
    assert out.lines == ["done"]
    assert ended - started >= 0.045


def test_asyncio_timer_without_loop_raises() -> None:
    with pytest.raises(RuntimeError):
        AsyncioTimer().call_later(1, lambda: None)
