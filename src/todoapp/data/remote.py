# src/todoapp/data/remote.py

from __future__ import annotations

"""
In-memory "remote" data source.

Stands in for a backend service: data lives in a dict keyed by task id and
lookups answer after `latency_seconds`, scheduled on the asyncio loop with
call_later (the caller is never blocked). With zero latency the callback runs
before the call returns.
"""

import asyncio
import logging
from collections.abc import Callable, Iterable
from dataclasses import replace
from typing import Any

from ..core.ports import GetTaskCallback, LoadTasksCallback
from .task_models import Task

logger = logging.getLogger(__name__)


class InMemoryRemoteDataSource:
    def __init__(
        self,
        tasks: Iterable[Task] = (),
        *,
        latency_seconds: float = 0.0,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._tasks: dict[str, Task] = {t.id: t for t in tasks}
        self._latency = max(0.0, float(latency_seconds))
        self._loop = loop

    def _deliver(self, fn: Callable[..., Any], *args: Any) -> None:
        if self._latency <= 0:
            fn(*args)
            return
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(self._latency, fn, *args)

    def get_tasks(self, callback: LoadTasksCallback) -> None:
        tasks = [replace(t) for t in self._tasks.values()]
        logger.debug("Remote get_tasks count=%s latency=%.3fs", len(tasks), self._latency)
        # Mirrors a backend that always answers with a (possibly empty) list.
        self._deliver(callback.on_tasks_loaded, tasks)

    def get_task(self, task_id: str, callback: GetTaskCallback) -> None:
        task = self._tasks.get(task_id)
        logger.debug("Remote get_task id=%s found=%s", task_id, task is not None)
        if task is None:
            self._deliver(callback.on_data_not_available)
        else:
            self._deliver(callback.on_task_loaded, replace(task))

    def save_task(self, task: Task) -> None:
        self._tasks[task.id] = replace(task)

    def complete_task(self, task_id: str) -> None:
        task = self._tasks.get(task_id)
        if task is not None:
            self._tasks[task_id] = replace(task, completed=True)

    def activate_task(self, task_id: str) -> None:
        task = self._tasks.get(task_id)
        if task is not None:
            self._tasks[task_id] = replace(task, completed=False)

    def clear_completed_tasks(self) -> None:
        self._tasks = {tid: t for tid, t in self._tasks.items() if not t.completed}

    def refresh_tasks(self) -> None:
        return

    def delete_all_tasks(self) -> None:
        self._tasks.clear()

    def delete_task(self, task_id: str) -> None:
        self._tasks.pop(task_id, None)
