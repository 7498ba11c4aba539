# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from todoapp.cli.bootstrap import create_initial_state
from todoapp.core.state import AppState
from todoapp.data.task_store import TaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="todoapp-test",
        log_level="DEBUG",
        data_dir=tmp_path / "data",
        tasks_db_path=tmp_path / "data" / "tasks.sqlite3",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture()
def store(tmp_path: Path) -> TaskStore:
    return TaskStore(tmp_path / "tasks.sqlite3")


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """
    AppState wired by the real composition root.

    NOTE: We keep the real SQLite store here because its behaviour under the
    repository is part of what we want to test.
    """
    return create_initial_state(settings=settings)
