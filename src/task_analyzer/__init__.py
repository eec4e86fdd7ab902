"""
task_analyzer: sort, group and conflict-check a list of time-boxed tasks.

Times are HHMM integers (930 == 09:30) compared as plain ints, so a schedule
must not cross midnight.
"""

from __future__ import annotations

from .diagnostics import estimate_memory_bytes
from .tasks.task_analysis import detect_overlaps, group_by_priority, sort_tasks
from .tasks.task_api import AnalysisReport, analyze_tasks
from .tasks.task_models import ConflictRecord, OverlapMode, Priority, Task

__all__ = [
    "AnalysisReport",
    "ConflictRecord",
    "OverlapMode",
    "Priority",
    "Task",
    "analyze_tasks",
    "detect_overlaps",
    "estimate_memory_bytes",
    "group_by_priority",
    "sort_tasks",
]
