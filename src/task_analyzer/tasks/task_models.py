# src/task_analyzer/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class Priority(StrEnum):
    """
    Canonical priority tiers.

    Notes:
    - Task.priority stays a plain string, so labels outside this set
      are carried through untouched (they get their own group bucket).
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


CANONICAL_PRIORITIES: tuple[str, ...] = tuple(p.value for p in Priority)


class OverlapMode(StrEnum):
    """
    How overlap detection scans the sorted task list.

    - ADJACENT: compare each task with its immediate successor only.
      Misses an overlap hidden behind a shorter task in between.
    - SWEEP: compare each task with the task holding the latest end seen so far.
      This is a behavioral change relative to ADJACENT.
    """

    ADJACENT = "adjacent"
    SWEEP = "sweep"

    @classmethod
    def parse(cls, raw: str | None, default: OverlapMode | None = None) -> OverlapMode:
        if not raw:
            return default or cls.ADJACENT
        try:
            return cls(raw.strip().lower())
        except ValueError:
            if default is not None:
                return default
            raise


@dataclass(frozen=True, slots=True)
class Task:
    # start/end are HHMM integers (930 == 09:30), compared as plain ints.
    name: str
    start: int
    end: int
    priority: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "start": self.start,
            "end": self.end,
            "priority": self.priority,
        }


CONFLICT_STATUS = "Conflict"


@dataclass(frozen=True, slots=True)
class ConflictRecord:
    """One detected overlap between two tasks (in sorted scan order)."""

    task1: str
    task2: str
    time: str
    status: str = CONFLICT_STATUS

    def to_dict(self) -> dict[str, str]:
        return {
            "status": self.status,
            "task1": self.task1,
            "task2": self.task2,
            "time": self.time,
        }
