# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from task_analyzer.cli.bootstrap import create_initial_state
from task_analyzer.core.state import AppState
from task_analyzer.tasks.task_models import Task

from .fakes import FakeTaskSource

SAMPLE_TASKS = [
    Task("Email Team", 900, 1000, "High"),
    Task("Client Meeting", 930, 1030, "High"),
    Task("Code Review", 1100, 1200, "Medium"),
    Task("Lunch", 1200, 1300, "Low"),
    Task("Project Sync", 1230, 1330, "High"),
    Task("Documentation", 1400, 1600, "Medium"),
]


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and CLI.

    We intentionally use a SimpleNamespace rather than the real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="task-analyzer-test",
        log_level="INFO",
        log_to_file=False,
        data_dir=tmp_path / "data",
        tasks_path=None,
        overlap_mode="adjacent",
        console_enabled=False,
    )


@pytest.fixture()
def sample_tasks() -> list[Task]:
    return list(SAMPLE_TASKS)


@pytest.fixture()
def state(settings: SimpleNamespace, sample_tasks: list[Task]) -> AppState:
    return create_initial_state(settings=settings, source=FakeTaskSource(sample_tasks))
