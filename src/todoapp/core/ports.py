# src/todoapp/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the presenters.

Presenters depend on Protocols instead of concrete implementations.
This keeps views/storage swappable and makes testing easier.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..data.task_models import Task


class GetTaskCallback(Protocol):
    """Result sink for a single-task lookup. Exactly one method is called per request."""

    def on_task_loaded(self, task: Task) -> None: ...
    def on_data_not_available(self) -> None: ...


class LoadTasksCallback(Protocol):
    def on_tasks_loaded(self, tasks: list[Task]) -> None: ...
    def on_data_not_available(self) -> None: ...


class TasksDataSource(Protocol):
    """
    Task persistence/retrieval.

    Lookups answer through a callback, which may run before the call returns
    (local storage) or later on the event loop (remote).
    """

    def get_tasks(self, callback: LoadTasksCallback) -> None: ...
    def get_task(self, task_id: str, callback: GetTaskCallback) -> None: ...
    def save_task(self, task: Task) -> None: ...

    def complete_task(self, task_id: str) -> None: ...
    def activate_task(self, task_id: str) -> None: ...
    def clear_completed_tasks(self) -> None: ...

    def refresh_tasks(self) -> None: ...
    def delete_all_tasks(self) -> None: ...
    def delete_task(self, task_id: str) -> None: ...


class AddEditTaskView(Protocol):
    """
    View side of the add/edit screen.

    is_active() reports whether the view can still take UI updates
    (False once the screen has been left or torn down).
    """

    def set_title(self, title: str) -> None: ...
    def set_description(self, description: str) -> None: ...
    def show_empty_task_error(self) -> None: ...
    def show_tasks_list(self) -> None: ...
    def is_active(self) -> bool: ...


class AddEditTaskContract(Protocol):
    """Presenter side of the add/edit screen, as seen by the view."""

    def start(self) -> None: ...
    def save_task(self, title: str, description: str) -> None: ...
    def populate_task(self) -> None: ...
    def is_data_missing(self) -> bool: ...
