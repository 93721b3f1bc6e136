# src/seqflow/tasks/task_models.py

from __future__ import annotations

from enum import StrEnum
from typing import Final

DEFAULT_DELAY_MS: Final[int] = 1000
DEFAULT_TS_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class _Unset:
    """Marker for "argument omitted" where None is a legitimate value."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Final = _Unset()


class RunnerState(StrEnum):
    """
    Queue runner lifecycle.

    IDLE: no drain loop active, the next append starts a new batch.
    DRAINING: a drain loop is active, appends join the current batch.
    """

    IDLE = "idle"
    DRAINING = "draining"

    @classmethod
    def from_flag(cls, running: bool) -> RunnerState:
        return cls.DRAINING if running else cls.IDLE
