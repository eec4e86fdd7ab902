# src/task_analyzer/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState from settings, then either:
- runs one command given on the command line (default: report), or
- starts the interactive console when console_enabled is set.

Examples:
    task-analyzer
    task-analyzer overlaps sweep
    TASK_ANALYZER_TASKS_PATH=day.json task-analyzer json
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..connectors.console_connector import ConsoleReporter, run_console_loop
from ..core.ports import Reporter
from ..logging_setup import setup_logging
from ..tasks.task_source import TaskSourceError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SOURCE_ERROR = 1
EXIT_USAGE = 2


def main(
    argv: Sequence[str] | None = None,
    *,
    settings=None,
    reporter: Reporter | None = None,
    configure_logging: bool = True,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()
    if reporter is None:
        reporter = ConsoleReporter()

    if configure_logging:
        # choose console log level from settings.log_level
        level_name = str(getattr(settings, "log_level", "INFO")).upper()
        console_level = getattr(logging, level_name, logging.INFO)

        log_dir = settings.data_dir if getattr(settings, "log_to_file", False) else None
        setup_logging(log_dir=log_dir, console_level=console_level)

    logger.debug("Starting %s...", getattr(settings, "app_name", "task-analyzer"))

    try:
        state = create_initial_state(settings=settings)
    except TaskSourceError as e:
        logger.error("Cannot load tasks: %s", e)
        return EXIT_SOURCE_ERROR

    if getattr(settings, "console_enabled", False):
        run_console_loop(state)
        return EXIT_OK

    words = [w for w in argv if w.strip()] or ["report"]
    name = words[0].lstrip("/")
    if not command_registry.has(name):
        reporter.send_text(f"Unknown command: {name}.\n{command_registry.build_help()}")
        return EXIT_USAGE

    response = command_registry.handle(state, "/" + " ".join([name, *words[1:]]))
    if response is not None:
        reporter.send_text(response)
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
