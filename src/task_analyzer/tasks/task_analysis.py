# src/task_analyzer/tasks/task_analysis.py

from __future__ import annotations

"""
Task analysis core.

Three pure functions over an immutable sequence of Task records:
- sort_tasks: chronological copy (stable on equal start),
- group_by_priority: priority buckets (unknown labels pass through),
- detect_overlaps: conflicts found by scanning the sorted copy once.

None of them mutate their input or perform I/O. There is no validation here:
malformed records (non-numeric start/end) fail at the comparison site.
"""

import logging
from collections import defaultdict
from collections.abc import Sequence
from operator import attrgetter

from .task_models import CANONICAL_PRIORITIES, ConflictRecord, OverlapMode, Task

logger = logging.getLogger(__name__)

_by_start = attrgetter("start")


def sort_tasks(tasks: Sequence[Task]) -> list[Task]:
    """Return a new list ordered by start time; ties keep input order."""
    return sorted(tasks, key=_by_start)


def group_by_priority(tasks: Sequence[Task]) -> dict[str, list[Task]]:
    """
    Bucket tasks by their priority label.

    High/Medium/Low are always present (possibly empty), in that order.
    Any other label gets a bucket of its own, created on first sight.
    """
    groups: defaultdict[str, list[Task]] = defaultdict(list)
    for key in CANONICAL_PRIORITIES:
        groups[key] = []

    for task in tasks:
        groups[task.priority].append(task)

    return dict(groups)


def _conflict(earlier: Task, later: Task) -> ConflictRecord:
    return ConflictRecord(
        task1=earlier.name,
        task2=later.name,
        time=f"{later.start} - {earlier.end}",
    )


def _scan_adjacent(ordered: list[Task]) -> list[ConflictRecord]:
    overlaps: list[ConflictRecord] = []
    for current, nxt in zip(ordered, ordered[1:]):
        # Strict: a task starting exactly when the previous one ends is fine.
        if nxt.start < current.end:
            overlaps.append(_conflict(current, nxt))
    return overlaps


def _scan_sweep(ordered: list[Task]) -> list[ConflictRecord]:
    overlaps: list[ConflictRecord] = []
    if not ordered:
        return overlaps

    active = ordered[0]
    for nxt in ordered[1:]:
        if nxt.start < active.end:
            overlaps.append(_conflict(active, nxt))
        if nxt.end > active.end:
            active = nxt
    return overlaps


def detect_overlaps(
    tasks: Sequence[Task],
    mode: OverlapMode = OverlapMode.ADJACENT,
) -> list[ConflictRecord]:
    """
    Report scheduling conflicts in sorted scan order.

    ADJACENT (default) checks only immediate chronological neighbours:
    for T1 900-1100, T2 1000-1020, T3 1050-1200 it reports T1/T2 and never T1/T3.
    SWEEP compares each task against the latest-ending task seen so far and
    does report T1/T3 in that case.
    """
    mode = OverlapMode(mode)
    ordered = sort_tasks(tasks)

    if mode == OverlapMode.SWEEP:
        overlaps = _scan_sweep(ordered)
    else:
        overlaps = _scan_adjacent(ordered)

    logger.debug(
        "detect_overlaps mode=%s tasks=%d conflicts=%d", mode.value, len(ordered), len(overlaps)
    )
    return overlaps
