# src/todoapp/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then either:
- runs a single command given on the command line (`todoapp list active`), or
- starts the console REPL in the main thread.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry as command_registry
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Best-effort shutdown (no exceptions should escape)."""
    try:
        state.task_store.close()
    except Exception:
        logger.debug("TaskStore close failed.", exc_info=True)


def run_once(state: AppState, argv: list[str]) -> int:
    """Run one command (leading slash optional). Returns a process exit code."""
    line = " ".join(argv).strip()
    if not line.startswith("/"):
        line = "/" + line

    response = command_registry.handle(state, line)
    if response is None or response.startswith("Unknown command"):
        print(response or command_registry.build_help(), file=sys.stderr)
        return 2
    print(response)
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    if argv is None:
        argv = sys.argv[1:]

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)
    try:
        if argv:
            return run_once(state, argv)
        run_console_loop(state)
        return 0
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    sys.exit(main())
