# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest

from seqflow.config import Settings
from seqflow.tasks.task_runner import QueueRunner

from .fakes import FakeTimer, RecordingPrinter


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Explicit settings for tests.

    We intentionally build Settings by hand rather than reading the environment,
    to keep unit tests isolated and deterministic.
    """
    return Settings(
        app_name="seqflow-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        default_delay_ms=1000,
        timer_backend="thread",
        ts_format="%H:%M:%S",
    )


@pytest.fixture()
def timer() -> FakeTimer:
    return FakeTimer()


@pytest.fixture()
def printer() -> RecordingPrinter:
    return RecordingPrinter()


@pytest.fixture()
def runner(settings: Settings, timer: FakeTimer, printer: RecordingPrinter) -> QueueRunner:
    """QueueRunner wired with a manual clock and a recording printer."""
    return QueueRunner(timer, out=printer, settings=settings)
