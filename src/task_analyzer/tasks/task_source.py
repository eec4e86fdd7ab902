# src/task_analyzer/tasks/task_source.py

"""
Task sources.

Turns raw records (JSON files, plain mappings) into Task values for the analysis core.
This is the only place where input shape is checked; the core trusts what it gets.
A start/end pair with end <= start is passed through on purpose.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from importlib import resources
from pathlib import Path
from typing import Any

from .task_models import Task

logger = logging.getLogger(__name__)

SAMPLE_RESOURCE = "sample_tasks.json"

_REQUIRED_KEYS = ("name", "start", "end", "priority")


class TaskSourceError(ValueError):
    """Raised when raw task data cannot be turned into Task records."""


def _as_time(raw: Any, field: str) -> int:
    # bool is an int subclass; "start": true is almost certainly a data bug.
    if isinstance(raw, bool):
        raise TaskSourceError(f"{field} must be an integer HHMM value, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise TaskSourceError(f"{field} must be an integer HHMM value, got {raw!r}")


def task_from_mapping(raw: Mapping[str, Any]) -> Task:
    if not isinstance(raw, Mapping):
        raise TaskSourceError(f"task record must be an object, got {type(raw).__name__}")

    missing = [k for k in _REQUIRED_KEYS if k not in raw]
    if missing:
        raise TaskSourceError(f"task record is missing {', '.join(missing)}")

    return Task(
        name=str(raw["name"]),
        start=_as_time(raw["start"], "start"),
        end=_as_time(raw["end"], "end"),
        priority=str(raw["priority"]),
    )


def tasks_from_records(records: Iterable[Any], *, origin: str = "<records>") -> list[Task]:
    out: list[Task] = []
    for i, raw in enumerate(records):
        try:
            out.append(task_from_mapping(raw))
        except TaskSourceError as e:
            raise TaskSourceError(f"{origin}: item {i}: {e}") from e
    return out


def _parse_json_array(text: str, origin: str) -> list[Task]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise TaskSourceError(f"{origin}: invalid JSON ({e})") from e

    if not isinstance(data, list):
        raise TaskSourceError(f"{origin}: expected a JSON array of task objects")

    return tasks_from_records(data, origin=origin)


def load_tasks_from_json(path: str | Path) -> list[Task]:
    path = Path(path)
    try:
        text = path.read_text("utf-8")
    except OSError as e:
        raise TaskSourceError(f"{path}: cannot read task file ({e})") from e

    tasks = _parse_json_array(text, str(path))
    logger.info("Loaded %d tasks from %s", len(tasks), path)
    return tasks


def load_sample_tasks() -> list[Task]:
    """Bundled demo data (six tasks, two conflicts)."""
    text = resources.files(__package__).joinpath(SAMPLE_RESOURCE).read_text("utf-8")
    return _parse_json_array(text, SAMPLE_RESOURCE)


class JsonFileTaskSource:
    """TaskSource backed by a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def describe(self) -> str:
        return str(self.path)

    def load(self) -> list[Task]:
        return load_tasks_from_json(self.path)


class SampleTaskSource:
    """TaskSource returning the bundled sample tasks."""

    def describe(self) -> str:
        return f"bundled {SAMPLE_RESOURCE}"

    def load(self) -> list[Task]:
        return load_sample_tasks()
