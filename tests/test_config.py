# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from task_analyzer.config import Settings

_VARS = (
    "APP_NAME",
    "LOG_LEVEL",
    "LOG_TO_FILE",
    "DATA_DIR",
    "TASKS_PATH",
    "TASKS_FILE",
    "OVERLAP_MODE",
    "CONSOLE_ENABLED",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for suffix in _VARS:
        monkeypatch.delenv(f"TASK_ANALYZER_{suffix}", raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    s = Settings.from_env()

    assert s.app_name == "task-analyzer"
    assert s.log_level == "INFO"
    assert s.log_to_file is True
    assert s.data_dir == Path(".local/task_analyzer")
    assert s.tasks_path is None
    assert s.overlap_mode == "adjacent"
    assert s.console_enabled is False


def test_env_overrides(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASK_ANALYZER_LOG_LEVEL", "DEBUG")
    clean_env.setenv("TASK_ANALYZER_LOG_TO_FILE", "no")
    clean_env.setenv("TASK_ANALYZER_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASK_ANALYZER_TASKS_PATH", str(tmp_path / "day.json"))
    clean_env.setenv("TASK_ANALYZER_OVERLAP_MODE", " Sweep ")
    clean_env.setenv("TASK_ANALYZER_CONSOLE_ENABLED", "yes")

    s = Settings.from_env()

    assert s.log_level == "DEBUG"
    assert s.log_to_file is False
    assert s.data_dir == tmp_path
    assert s.tasks_path == tmp_path / "day.json"
    assert s.overlap_mode == "sweep"
    assert s.console_enabled is True


def test_tasks_file_alias(clean_env) -> None:
    clean_env.setenv("TASK_ANALYZER_TASKS_FILE", "week.json")
    assert Settings.from_env().tasks_path == Path("week.json")

    clean_env.setenv("TASK_ANALYZER_TASKS_PATH", "day.json")
    assert Settings.from_env().tasks_path == Path("day.json")
