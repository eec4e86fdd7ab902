# src/task_analyzer/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read at import time except the .env file.
- Every value has a working default, so the tool runs with no configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ENV_PREFIX = "TASK_ANALYZER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _first_env(*names: str, default: str | None = None) -> str | None:
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip() != "":
            return v
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


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
    log_to_file: bool

    # ---- Local data (log file lives here; gitignored) ----
    data_dir: Path

    # ---- Input ----
    # None -> bundled sample tasks
    tasks_path: Optional[Path]

    # ---- Analysis ----
    # Raw string; parsed (with fallback) in cli.bootstrap.
    overlap_mode: str

    # ---- Console ----
    console_enabled: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-analyzer")
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        log_to_file = _env_bool(_k("LOG_TO_FILE"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/task_analyzer"))

        # Accept the shorter TASKS_FILE as an alias.
        tasks_raw = _first_env(_k("TASKS_PATH"), _k("TASKS_FILE"), default=None)
        tasks_path = Path(tasks_raw).expanduser() if tasks_raw else None

        overlap_mode = _env(_k("OVERLAP_MODE"), "adjacent").strip().lower()
        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), False)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_to_file=log_to_file,
            data_dir=data_dir,
            tasks_path=tasks_path,
            overlap_mode=overlap_mode,
            console_enabled=console_enabled,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
