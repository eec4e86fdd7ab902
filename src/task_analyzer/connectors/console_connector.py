# src/task_analyzer/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime
from typing import TextIO

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


class ConsoleReporter:
    """Reporter that writes rendered text to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def send_text(self, text: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(text + "\n")
        stream.flush()


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    reporter: ConsoleReporter | None = None,
) -> None:
    reporter = reporter or ConsoleReporter()
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "task-analyzer"))

    logger.info("Console started (%d tasks from %s).", len(state.tasks), state.source_name)
    reporter.send_text(f"[{_ts_local()}] [{app_name}] Use /help for commands. Use /exit to quit.")

    while True:
        try:
            line = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            reporter.send_text("")
            break

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        # Bare words are treated as commands too ("report" == "/report").
        if not line.startswith("/"):
            line = "/" + line

        try:
            response = command_registry.handle(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is not None:
            reporter.send_text(response)

    logger.info("Console finished.")
