# src/task_analyzer/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..diagnostics import estimate_memory_bytes
from .task_analysis import detect_overlaps, group_by_priority, sort_tasks
from .task_models import ConflictRecord, OverlapMode, Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AnalysisReport:
    """Everything one analysis pass produces, ready for a reporter."""

    tasks: tuple[Task, ...]
    sorted_tasks: tuple[Task, ...]
    groups: dict[str, list[Task]]
    conflicts: tuple[ConflictRecord, ...]
    mode: OverlapMode
    memory_bytes: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "sorted": [t.to_dict() for t in self.sorted_tasks],
            "groups": {k: [t.to_dict() for t in v] for k, v in self.groups.items()},
            "conflicts": [c.to_dict() for c in self.conflicts],
            "memory_bytes": self.memory_bytes,
        }


def analyze_tasks(
    tasks: Sequence[Task],
    *,
    mode: OverlapMode = OverlapMode.ADJACENT,
) -> AnalysisReport:
    """
    Convenience helper: run sort, grouping, overlap detection and the size estimate
    over the same input. The caller's sequence is left as it was.
    """
    snapshot = tuple(tasks)
    report = AnalysisReport(
        tasks=snapshot,
        sorted_tasks=tuple(sort_tasks(snapshot)),
        groups=group_by_priority(snapshot),
        conflicts=tuple(detect_overlaps(snapshot, mode)),
        mode=OverlapMode(mode),
        memory_bytes=estimate_memory_bytes(snapshot),
    )
    logger.info(
        "Analyzed %d tasks: %d conflicts (mode=%s)",
        len(snapshot),
        len(report.conflicts),
        report.mode.value,
    )
    return report
