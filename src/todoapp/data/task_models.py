# src/todoapp/data/task_models.py

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum


def _new_task_id() -> str:
    return str(uuid.uuid4())


class TasksFilter(StrEnum):
    """Which tasks a list view shows."""

    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def from_text(cls, raw: str | None) -> TasksFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.ALL


@dataclass(slots=True)
class Task:
    """
    A todo item.

    A task built without an id gets a freshly generated one, so a new task is
    already addressable by the time it reaches the data layer.
    """

    title: str
    description: str
    id: str = field(default_factory=_new_task_id)
    completed: bool = False

    @property
    def is_empty(self) -> bool:
        return not (self.title or "").strip() and not (self.description or "").strip()

    @property
    def is_active(self) -> bool:
        return not self.completed

    @property
    def title_for_list(self) -> str:
        if (self.title or "").strip():
            return self.title
        return self.description

    def matches(self, tasks_filter: TasksFilter) -> bool:
        if tasks_filter is TasksFilter.ACTIVE:
            return self.is_active
        if tasks_filter is TasksFilter.COMPLETED:
            return self.completed
        return True
