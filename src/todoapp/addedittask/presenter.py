# src/todoapp/addedittask/presenter.py

from __future__ import annotations

import logging

from ..core.ports import AddEditTaskView, TasksDataSource
from ..data.task_models import Task

logger = logging.getLogger(__name__)


class AddEditTaskPresenter:
    """
    Listens to user actions from the add/edit view, loads or saves the task
    through the repository and updates the view as required.

    Also acts as the GetTaskCallback for its own populate_task() request.

    Args:
        task_id: id of the task to edit, or None for a new task.
        tasks_repository: where tasks are loaded from and saved to.
        view: the add/edit view.
        should_load_data_from_repo: False when the view already holds the task
            fields (e.g. restored after being rebuilt), so start() skips the load.
    """

    def __init__(
        self,
        task_id: str | None,
        tasks_repository: TasksDataSource,
        view: AddEditTaskView,
        should_load_data_from_repo: bool = True,
    ) -> None:
        self._task_id = task_id
        self._tasks_repository = tasks_repository
        self._view = view
        self._should_load_data_from_repo = should_load_data_from_repo

    @property
    def task_id(self) -> str | None:
        return self._task_id

    def start(self) -> None:
        if self._task_id is not None and self._should_load_data_from_repo:
            self.populate_task()

    def save_task(self, title: str, description: str) -> None:
        if self._task_id is None:
            self._create_task(title, description)
        else:
            self._update_task(title, description)

    def populate_task(self) -> None:
        if self._task_id is None:
            raise RuntimeError("populate_task() was called but task is new.")
        logger.debug("Loading task id=%s for edit", self._task_id)
        self._tasks_repository.get_task(self._task_id, self)

    # ---- GetTaskCallback ----

    def on_task_loaded(self, task: Task) -> None:
        # The view may not be able to handle UI updates anymore.
        if self._view.is_active():
            self._view.set_title(task.title)
            self._view.set_description(task.description)
        self._should_load_data_from_repo = False

    def on_data_not_available(self) -> None:
        logger.info("Task id=%s not available", self._task_id)
        # The view may not be able to handle UI updates anymore.
        if self._view.is_active():
            self._view.show_empty_task_error()

    def is_data_missing(self) -> bool:
        return self._should_load_data_from_repo

    # ---- save paths ----

    def _create_task(self, title: str, description: str) -> None:
        new_task = Task(title, description)
        if new_task.is_empty:
            self._view.show_empty_task_error()
            return
        self._tasks_repository.save_task(new_task)
        logger.debug("Created task id=%s", new_task.id)
        self._view.show_tasks_list()

    def _update_task(self, title: str, description: str) -> None:
        if self._task_id is None:
            raise RuntimeError("update_task() was called but task is new.")
        self._tasks_repository.save_task(Task(title, description, id=self._task_id))
        logger.debug("Updated task id=%s", self._task_id)
        # After an edit, go back to the list.
        self._view.show_tasks_list()
