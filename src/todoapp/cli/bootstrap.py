# src/todoapp/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the local store and the remote source into a TasksRepository on AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..data.remote import InMemoryRemoteDataSource
from ..data.repository import TasksRepository
from ..data.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.tasks_db_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    task_store = TaskStore(settings.tasks_db_path)
    # The remote starts as a mirror of the local store, so /refresh does not drop
    # tasks saved in earlier sessions. The console loop is synchronous: no latency.
    remote = InMemoryRemoteDataSource(task_store.list_tasks(), latency_seconds=0.0)

    state = AppState(
        settings=settings,
        tasks_repository=TasksRepository(local=task_store, remote=remote),
        task_store=task_store,
    )
    logger.debug("AppState created (db=%s)", settings.tasks_db_path)
    return state
