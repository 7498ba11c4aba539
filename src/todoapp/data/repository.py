# src/todoapp/data/repository.py

from __future__ import annotations

"""
Tasks repository.

Loads tasks from the local store or the remote source, whichever answers first
with data, and keeps an in-memory cache of everything it has seen:
- once fully loaded, the cache answers get_tasks() immediately,
- refresh_tasks() marks the cache dirty so the next get_tasks() goes to remote,
- writes go through to remote, local and cache.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

from ..core.ports import GetTaskCallback, LoadTasksCallback, TasksDataSource
from .task_models import Task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _GetTaskRelay:
    loaded: Callable[[Task], None]
    missing: Callable[[], None]

    def on_task_loaded(self, task: Task) -> None:
        self.loaded(task)

    def on_data_not_available(self) -> None:
        self.missing()


@dataclass(slots=True)
class _LoadTasksRelay:
    loaded: Callable[[list[Task]], None]
    missing: Callable[[], None]

    def on_tasks_loaded(self, tasks: list[Task]) -> None:
        self.loaded(tasks)

    def on_data_not_available(self) -> None:
        self.missing()


class TasksRepository:
    def __init__(self, local: TasksDataSource, remote: TasksDataSource) -> None:
        self._local = local
        self._remote = remote
        self._cache: dict[str, Task] = {}
        # Writes and single lookups add to the cache before any full load;
        # only a full load makes it a complete picture of the tasks.
        self._cache_loaded = False
        self._cache_is_dirty = False

    # ---- reads ----

    def get_tasks(self, callback: LoadTasksCallback) -> None:
        if self._cache_loaded and not self._cache_is_dirty:
            callback.on_tasks_loaded(list(self._cache.values()))
            return

        if self._cache_is_dirty:
            self._get_tasks_from_remote(callback)
            return

        def from_local(tasks: list[Task]) -> None:
            self._refresh_cache(tasks)
            callback.on_tasks_loaded(list(self._cache.values()))

        self._local.get_tasks(
            _LoadTasksRelay(from_local, lambda: self._get_tasks_from_remote(callback))
        )

    def get_task(self, task_id: str, callback: GetTaskCallback) -> None:
        cached = self._cache.get(task_id)
        if cached is not None:
            callback.on_task_loaded(replace(cached))
            return

        def loaded(task: Task) -> None:
            self._cache[task.id] = task
            callback.on_task_loaded(replace(task))

        def from_remote() -> None:
            logger.debug("Task %s not in local store, asking remote", task_id)
            self._remote.get_task(task_id, _GetTaskRelay(loaded, callback.on_data_not_available))

        self._local.get_task(task_id, _GetTaskRelay(loaded, from_remote))

    # ---- writes ----

    def save_task(self, task: Task) -> None:
        self._remote.save_task(task)
        self._local.save_task(task)
        self._cache[task.id] = replace(task)
        logger.info("Task saved id=%s", task.id)

    def complete_task(self, task_id: str) -> None:
        self._remote.complete_task(task_id)
        self._local.complete_task(task_id)
        if task_id in self._cache:
            self._cache[task_id] = replace(self._cache[task_id], completed=True)

    def activate_task(self, task_id: str) -> None:
        self._remote.activate_task(task_id)
        self._local.activate_task(task_id)
        if task_id in self._cache:
            self._cache[task_id] = replace(self._cache[task_id], completed=False)

    def clear_completed_tasks(self) -> None:
        self._remote.clear_completed_tasks()
        self._local.clear_completed_tasks()
        self._cache = {tid: t for tid, t in self._cache.items() if not t.completed}

    def refresh_tasks(self) -> None:
        self._cache_is_dirty = True

    def delete_all_tasks(self) -> None:
        self._remote.delete_all_tasks()
        self._local.delete_all_tasks()
        self._cache.clear()

    def delete_task(self, task_id: str) -> None:
        self._remote.delete_task(task_id)
        self._local.delete_task(task_id)
        self._cache.pop(task_id, None)

    # ---- helpers ----

    def _get_tasks_from_remote(self, callback: LoadTasksCallback) -> None:
        def loaded(tasks: list[Task]) -> None:
            self._refresh_cache(tasks)
            self._refresh_local(tasks)
            callback.on_tasks_loaded(list(self._cache.values()))

        self._remote.get_tasks(_LoadTasksRelay(loaded, callback.on_data_not_available))

    def _refresh_cache(self, tasks: list[Task]) -> None:
        self._cache = {t.id: t for t in tasks}
        self._cache_loaded = True
        self._cache_is_dirty = False

    def _refresh_local(self, tasks: list[Task]) -> None:
        self._local.delete_all_tasks()
        for task in tasks:
            self._local.save_task(task)
