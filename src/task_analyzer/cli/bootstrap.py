# src/task_analyzer/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- picks the task source (JSON file from settings, else the bundled sample),
- loads the tasks and wires everything into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.ports import TaskSource
from ..core.state import AppState
from ..tasks.task_models import OverlapMode
from ..tasks.task_source import JsonFileTaskSource, SampleTaskSource

logger = logging.getLogger(__name__)


def resolve_overlap_mode(raw: str | None) -> OverlapMode:
    try:
        return OverlapMode.parse(raw)
    except ValueError:
        logger.warning("Unknown overlap mode %r; falling back to %s.", raw, OverlapMode.ADJACENT.value)
        return OverlapMode.ADJACENT


def select_task_source(settings) -> TaskSource:
    tasks_path = getattr(settings, "tasks_path", None)
    if tasks_path:
        return JsonFileTaskSource(tasks_path)
    return SampleTaskSource()


def create_initial_state(*, settings=None, source: TaskSource | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Settings and source are injectable for tests; if settings is None, falls back to get_settings().
    Raises TaskSourceError when the tasks cannot be loaded.
    """
    if settings is None:
        settings = get_settings()

    if source is None:
        source = select_task_source(settings)

    tasks = source.load()
    logger.debug("Task source %s yielded %d tasks", source.describe(), len(tasks))

    return AppState(
        settings=settings,
        tasks=tuple(tasks),
        source_name=source.describe(),
        overlap_mode=resolve_overlap_mode(getattr(settings, "overlap_mode", None)),
    )
