# src/todoapp/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..data.repository import TasksRepository
from ..data.task_models import TasksFilter
from ..data.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (todoapp.config.Settings or a test stand-in).
    settings: Any

    tasks_repository: TasksRepository
    task_store: TaskStore

    # Last filter used by /list; /list without args reuses it.
    current_filter: TasksFilter = TasksFilter.ALL
