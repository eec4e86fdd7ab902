# src/task_analyzer/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) around the analysis core.

The core itself is a handful of pure functions; the CLI talks to task sources
and reporters through these Protocols so either side can be swapped in tests.
"""

from typing import Protocol

from ..tasks.task_models import Task


class TaskSource(Protocol):
    """Supplies the initial task sequence (file, bundled sample, fixture...)."""

    def describe(self) -> str: ...
    def load(self) -> list[Task]: ...


class Reporter(Protocol):
    """
    Display-side port: where rendered analysis text goes.

    The console connector prints it; tests capture it.
    """

    def send_text(self, text: str) -> None: ...
