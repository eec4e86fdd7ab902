# src/task_analyzer/cli/commands.py

from __future__ import annotations

import json
import logging
from collections.abc import Callable

from ..core.state import AppState
from ..diagnostics import estimate_memory_bytes
from ..tasks.task_analysis import detect_overlaps, group_by_priority, sort_tasks
from ..tasks.task_api import analyze_tasks
from ..tasks.task_format import (
    format_groups,
    format_memory,
    format_overlaps,
    format_report,
    format_sorted,
    format_task_list,
)
from ..tasks.task_models import OverlapMode

CommandHandler = Callable[[AppState, list[str]], str]

logger = logging.getLogger(__name__)

MODE_USAGE = "Overlap mode must be one of: adjacent, sweep."


class CommandRegistry:
    """Simple slash-command registry used by the CLI and the console loop (/help, /report, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def has(self, name: str) -> bool:
        return name.lower() in self._handlers

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _mode_from_args(state: AppState, args: list[str]) -> OverlapMode | None:
    """Mode given as first arg, else the session mode. None means the arg was invalid."""
    if not args:
        return state.overlap_mode
    try:
        return OverlapMode.parse(args[0])
    except ValueError:
        return None


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_tasks(state: AppState, args: list[str]) -> str:
    return f"Source: {state.source_name}\n" + format_task_list(state.tasks)


def cmd_sorted(state: AppState, args: list[str]) -> str:
    return format_sorted(sort_tasks(state.tasks))


def cmd_groups(state: AppState, args: list[str]) -> str:
    return format_groups(group_by_priority(state.tasks))


def cmd_overlaps(state: AppState, args: list[str]) -> str:
    """
    /overlaps           -> detect with the session mode
    /overlaps sweep     -> detect with the sweep scan (reports non-adjacent overlaps)
    /overlaps adjacent  -> detect comparing neighbours only
    """
    mode = _mode_from_args(state, args)
    if mode is None:
        return f"Usage: /overlaps [adjacent|sweep]. {MODE_USAGE}"
    text = format_overlaps(detect_overlaps(state.tasks, mode))
    return f"{text}\n(mode: {mode.value})"


def cmd_memory(state: AppState, args: list[str]) -> str:
    return format_memory(estimate_memory_bytes(state.tasks))


def cmd_report(state: AppState, args: list[str]) -> str:
    mode = _mode_from_args(state, args)
    if mode is None:
        return f"Usage: /report [adjacent|sweep]. {MODE_USAGE}"
    return format_report(analyze_tasks(state.tasks, mode=mode))


def cmd_json(state: AppState, args: list[str]) -> str:
    mode = _mode_from_args(state, args)
    if mode is None:
        return f"Usage: /json [adjacent|sweep]. {MODE_USAGE}"
    report = analyze_tasks(state.tasks, mode=mode)
    return json.dumps(report.to_dict(), ensure_ascii=False, indent=2)


def cmd_mode(state: AppState, args: list[str]) -> str:
    """
    /mode           -> show current overlap mode
    /mode sweep     -> switch this session to the sweep scan
    """
    if not args:
        return f"Overlap mode is {state.overlap_mode.value}. Use /mode adjacent or /mode sweep."

    mode = _mode_from_args(state, args)
    if mode is None:
        return MODE_USAGE

    logger.debug("Overlap mode %s -> %s", state.overlap_mode.value, mode.value)
    state.overlap_mode = mode
    if mode == OverlapMode.SWEEP:
        return "Overlap mode set to sweep (reports overlaps between non-adjacent tasks too)."
    return "Overlap mode set to adjacent."


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("tasks", cmd_tasks, help_text="Show the loaded task list.")
registry.register("sorted", cmd_sorted, help_text="Tasks in chronological order.", aliases=["sort"])
registry.register("groups", cmd_groups, help_text="Tasks grouped by priority.", aliases=["group"])
registry.register(
    "overlaps",
    cmd_overlaps,
    help_text="Scheduling conflicts: /overlaps [adjacent|sweep].",
    aliases=["conflicts"],
)
registry.register("memory", cmd_memory, help_text="Approximate size of the task list in bytes.")
registry.register("report", cmd_report, help_text="Full analysis report: /report [adjacent|sweep].")
registry.register("json", cmd_json, help_text="Full analysis as JSON: /json [adjacent|sweep].")
registry.register("mode", cmd_mode, help_text="Show/set overlap mode: /mode adjacent | /mode sweep.")
