# src/seqflow/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole library (normal "settings layer").
- Nothing required at import time; malformed values fall back to defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .tasks.task_models import DEFAULT_DELAY_MS, DEFAULT_TS_FORMAT

ENV_PREFIX = "SEQFLOW"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except ImportError:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path
    log_to_file: bool

    # ---- Runner defaults ----
    default_delay_ms: int
    timer_backend: str
    ts_format: str

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "seqflow").strip() or "seqflow"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_dir = _env_path(_k("LOG_DIR"), Path(".local/seqflow"))
        log_to_file = _env_bool(_k("LOG_TO_FILE"), False)

        default_delay_ms = _env_int(_k("DEFAULT_DELAY_MS"), DEFAULT_DELAY_MS)
        if default_delay_ms < 0:
            default_delay_ms = DEFAULT_DELAY_MS

        timer_backend = _env(_k("TIMER"), "thread").strip().lower() or "thread"
        ts_format = _env(_k("TS_FORMAT"), DEFAULT_TS_FORMAT) or DEFAULT_TS_FORMAT

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            log_to_file=log_to_file,
            default_delay_ms=default_delay_ms,
            timer_backend=timer_backend,
            ts_format=ts_format,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
