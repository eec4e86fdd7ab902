# src/task_analyzer/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import OverlapMode, Task


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    tasks: tuple[Task, ...]
    source_name: str
    overlap_mode: OverlapMode = OverlapMode.ADJACENT
