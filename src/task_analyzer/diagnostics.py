# src/task_analyzer/diagnostics.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from .tasks.task_models import Task

logger = logging.getLogger(__name__)


def estimate_memory_bytes(tasks: Sequence[Task]) -> int:
    """
    Rough size of the task list: UTF-8 length of its compact JSON form.

    This is a diagnostic figure, not the interpreter's real footprint.
    """
    payload = json.dumps(
        [t.to_dict() for t in tasks],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    size = len(payload.encode("utf-8"))
    logger.debug("estimate_memory_bytes tasks=%d bytes=%d", len(tasks), size)
    return size
