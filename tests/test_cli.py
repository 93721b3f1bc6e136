# tests/test_cli.py

from __future__ import annotations

import logging

import pytest

from seqflow.cli import main as cli
from seqflow.config import Settings
from seqflow.logging_setup import _ConsoleNoiseFilter, setup_logging
from seqflow.tasks.task_runner import QueueRunner

from .fakes import FakeTimer, RecordingPrinter


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
    logging.captureWarnings(False)


def test_parse_steps() -> None:
    assert cli.parse_steps(["hello", "ts", "sleep:250", "log:a:b", "TS"]) == [
        ("log", "hello"),
        ("ts", None),
        ("sleep", 250.0),
        ("log", "a:b"),
        ("ts", None),
    ]


@pytest.mark.parametrize("bad", ["sleep:soon", "sleep:-1"])
def test_parse_steps_rejects_bad_sleep(bad: str) -> None:
    with pytest.raises(ValueError):
        cli.parse_steps([bad])


def test_apply_steps_builds_chain(settings: Settings) -> None:
    timer = FakeTimer()
    out = RecordingPrinter()
    runner = QueueRunner(timer, out=out, settings=settings)

    cli.apply_steps(runner, [("log", "a"), ("sleep", 10.0), ("log", "b")])
    assert out.lines == ["a"]
    timer.advance(10)
    assert out.lines == ["a", "b"]


def test_main_runs_steps(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["one", "sleep:1", "log:two"]) == 0
    assert capsys.readouterr().out.splitlines() == ["one", "two"]


def test_main_rejects_bad_step() -> None:
    assert cli.main(["sleep:x"]) == 2


def test_setup_logging_writes_file(tmp_path) -> None:
    log_file = setup_logging(log_dir=tmp_path, to_file=True)
    logging.getLogger("seqflow.test").info("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert log_file is not None
    assert "hello file" in log_file.read_text("utf-8")


@pytest.mark.parametrize(
    ("name", "level", "shown"),
    [
        ("seqflow.tasks.task_runner", logging.DEBUG, True),
        ("py.warnings", logging.WARNING, True),
        ("py.warnings", logging.INFO, False),
        ("thirdparty", logging.WARNING, False),
        ("thirdparty", logging.ERROR, True),
    ],
)
def test_console_filter_thresholds(name: str, level: int, shown: bool) -> None:
    record = logging.LogRecord(name, level, __file__, 1, "msg", None, None)
    assert _ConsoleNoiseFilter().filter(record) is shown
