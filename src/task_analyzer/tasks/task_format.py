# src/task_analyzer/tasks/task_format.py

"""Plain-text rendering of analysis results for console output."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .task_api import AnalysisReport
from .task_models import ConflictRecord, Task


def format_task_list(tasks: Sequence[Task]) -> str:
    lines = ["--- Initial Task List ---"]
    for t in tasks:
        lines.append(f"{t.name} [{t.priority}] {t.start}-{t.end}")
    if not tasks:
        lines.append("(no tasks)")
    return "\n".join(lines)


def format_sorted(tasks: Sequence[Task]) -> str:
    lines = ["--- Sorted Tasks ---"]
    lines.extend(f"{t.start}: {t.name}" for t in tasks)
    return "\n".join(lines)


def format_groups(groups: Mapping[str, Sequence[Task]]) -> str:
    lines = ["--- Grouped by Priority ---"]
    for key, bucket in groups.items():
        lines.append(f"{key} ({len(bucket)}):")
        if not bucket:
            lines.append("  (none)")
            continue
        for t in bucket:
            lines.append(f"  {t.start}-{t.end} {t.name}")
    return "\n".join(lines)


def format_overlaps(conflicts: Sequence[ConflictRecord]) -> str:
    lines = ["--- Overlap Detection ---"]
    if not conflicts:
        lines.append("No conflicts detected.")
    for c in conflicts:
        lines.append(f"{c.status}: {c.task1} / {c.task2} ({c.time})")
    return "\n".join(lines)


def format_memory(size_bytes: int) -> str:
    return f"Approximate Memory Usage: {size_bytes} bytes"


def format_report(report: AnalysisReport) -> str:
    sections = [
        format_task_list(report.tasks),
        format_sorted(report.sorted_tasks),
        format_groups(report.groups),
        format_overlaps(report.conflicts) + f"\n(mode: {report.mode.value})",
        format_memory(report.memory_bytes),
    ]
    return "\n\n".join(sections)
