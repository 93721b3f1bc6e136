# src/seqflow/cli/main.py

"""
CLI entrypoint.

Initializes logging, then runs the steps given on the command line on one QueueRunner:

    seqflow "hello" sleep:500 ts log:bye

Step syntax:
- log:<text>  print text (a bare word is the same as log:<word>)
- ts          print the current timestamp
- sleep:<ms>  pause the chain
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import threading
from collections.abc import Sequence
from typing import Any

from ..config import Settings, get_settings
from ..core.timers import AsyncioTimer, ThreadingTimer
from ..logging_setup import setup_logging
from ..tasks.task_runner import QueueRunner

logger = logging.getLogger(__name__)

Step = tuple[str, Any]


def parse_steps(raw: Sequence[str]) -> list[Step]:
    """Turn CLI words into (kind, arg) steps. Raises ValueError on a malformed step."""
    steps: list[Step] = []
    for word in raw:
        kind, sep, arg = word.partition(":")
        kind = kind.strip().lower()

        if word.strip().lower() == "ts":
            steps.append(("ts", None))
        elif sep and kind == "sleep":
            try:
                period = float(arg)
            except ValueError:
                raise ValueError(f"Invalid sleep period: {arg!r}") from None
            if period < 0:
                raise ValueError(f"Sleep period must be >= 0: {arg!r}")
            steps.append(("sleep", period))
        elif sep and kind == "log":
            steps.append(("log", arg))
        else:
            steps.append(("log", word))
    return steps


def apply_steps(runner: QueueRunner, steps: Sequence[Step]) -> QueueRunner:
    for kind, arg in steps:
        if kind == "ts":
            runner.ts()
        elif kind == "sleep":
            runner.sleep(arg)
        else:
            runner.log(arg)
    return runner


def _run_threaded(steps: Sequence[Step], settings: Settings) -> None:
    # Use an Event so main can wait without a busy while-loop.
    done = threading.Event()
    runner = QueueRunner(ThreadingTimer(), settings=settings)
    apply_steps(runner, steps).sync(done.set)
    done.wait()


async def _run_on_loop(steps: Sequence[Step], settings: Settings) -> None:
    done = asyncio.Event()
    runner = QueueRunner(AsyncioTimer(asyncio.get_running_loop()), settings=settings)
    apply_steps(runner, steps).sync(done.set)
    await done.wait()


def main(argv: Sequence[str] | None = None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(prog="seqflow", description="Run steps one after another.")
    parser.add_argument("steps", nargs="*", help="log:<text> | ts | sleep:<ms> | <text>")
    parser.add_argument("--log-level", default=settings.log_level, help="console log level")
    args = parser.parse_args(argv)

    console_level = getattr(logging, str(args.log_level).upper(), logging.INFO)
    setup_logging(log_dir=settings.log_dir, console_level=console_level, to_file=settings.log_to_file)

    try:
        steps = parse_steps(args.steps)
    except ValueError as e:
        logger.error("%s", e)
        return 2

    logger.info("Starting %s with %d step(s)...", settings.app_name, len(steps))

    try:
        if settings.timer_backend == "asyncio":
            asyncio.run(_run_on_loop(steps, settings))
        else:
            _run_threaded(steps, settings)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down...")
        return 130

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
