# src/todoapp/connectors/console_view.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..addedittask.presenter import AddEditTaskPresenter
from ..core.ports import TasksDataSource

logger = logging.getLogger(__name__)

EMPTY_TASK_MESSAGE = "Tasks cannot be empty."


class ConsoleAddEditTaskView:
    """
    Add/edit screen rendered on the terminal.

    run() owns the screen lifecycle: it activates the view, lets the presenter
    load the task (when editing), prompts for title/description until the
    presenter accepts them, and deactivates on show_tasks_list() or when the
    user aborts with EOF/Ctrl+C. While editing, an empty answer keeps the
    current value.
    """

    def __init__(
        self,
        tasks_repository: TasksDataSource,
        task_id: str | None = None,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        should_load_data_from_repo: bool = True,
    ) -> None:
        self._input = input_fn
        self._output = output_fn
        self._active = False
        self._saved = False
        self.title = ""
        self.description = ""
        self.presenter = AddEditTaskPresenter(
            task_id, tasks_repository, self, should_load_data_from_repo
        )

    # ---- AddEditTaskView ----

    def set_title(self, title: str) -> None:
        self.title = title
        self._output(f"Title: {title}")

    def set_description(self, description: str) -> None:
        self.description = description
        self._output(f"Description: {description}")

    def show_empty_task_error(self) -> None:
        self._output(EMPTY_TASK_MESSAGE)

    def show_tasks_list(self) -> None:
        self._saved = True
        self._active = False

    def is_active(self) -> bool:
        return self._active

    # ---- screen lifecycle ----

    def _ask(self, label: str, current: str) -> str:
        prompt = f"{label} [{current}]: " if current else f"{label}: "
        answer = self._input(prompt).strip()
        return answer or current

    def run(self) -> bool:
        """Show the screen until the task is saved or the user aborts. Returns True if saved."""
        editing = self.presenter.task_id is not None
        self._active = True
        self._saved = False
        self.presenter.start()

        if editing and self.presenter.is_data_missing():
            # Nothing to edit: the presenter already reported it.
            logger.debug("Edit screen closed, task id=%s not loaded", self.presenter.task_id)
            self._active = False
            return False

        while self._active:
            try:
                title = self._ask("Title", self.title)
                description = self._ask("Description", self.description)
            except (EOFError, KeyboardInterrupt):
                self._active = False
                self._output("Edit cancelled.")
                return False
            self.title, self.description = title, description
            self.presenter.save_task(title, description)

        return self._saved
