# src/todoapp/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    if sys.stdout.isatty():
        sys.stdout.write("\033[1A\033[2K\r")
        sys.stdout.write(line + "\n")
        sys.stdout.flush()
    else:
        print(line)


def run_console_loop(
    state: AppState,
    *,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    logger.info("Console started.")
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "todoapp"))
    interactive = input_fn is input

    def emit(text: str) -> None:
        output_fn(f"[{_ts_local()}] {text}")

    emit(f"[{app_name}] Use /help for commands, /list to see tasks, /exit to quit.\n")

    while True:
        try:
            line = input_fn(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if interactive:
            _rewrite_prev_line(f"[{_ts_local()}] >>> {line}")

        if not line:
            continue

        if line.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = command_registry.handle(state, line, emit=output_fn, ask=input_fn)
        except Exception:
            logger.exception("Command handler crashed.")
            response = "Internal error while handling a command."

        if response is None:
            response = "Not a command. Use /add to create a task or /help for all commands."

        emit(response)

    logger.info("Console finished.")
