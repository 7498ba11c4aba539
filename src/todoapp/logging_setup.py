# src/todoapp/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "todoapp"

# Per-call storage/repository logs (every save, cache load, migration) go to
# the file only; on the console they would land between REPL prompts.
CONSOLE_QUIET_BELOW_WARNING = ("todoapp.data",)

LOG_FILE_NAME = "todoapp.log"


def _under(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


class _ReplConsoleFilter(logging.Filter):
    """
    Console filter for the REPL:
    - todoapp logs pass at the handler level,
    - except the data layer, which needs WARNING+,
    - third-party loggers (and captured py.warnings) need ERROR+.
    """

    def __init__(self, quiet_prefixes: tuple[str, ...] = CONSOLE_QUIET_BELOW_WARNING) -> None:
        super().__init__()
        self._quiet_prefixes = quiet_prefixes

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name
        if not _under(name, APP_LOGGER):
            return record.levelno >= logging.ERROR
        if any(_under(name, p) for p in self._quiet_prefixes):
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    *,
    log_dir: str | Path = ".local/todoapp",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Configure the root logger for a console session and return the log file path.

    The console gets short lines (the REPL prints its own timestamps); the file
    gets timestamps and everything down to `file_level`.
    Call this ONCE, before the first log call.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(min(console_level, file_level))

    for h in list(root.handlers):
        root.removeHandler(h)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    console.addFilter(_ReplConsoleFilter())
    root.addHandler(console)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
