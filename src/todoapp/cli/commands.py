# src/todoapp/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..connectors.console_view import ConsoleAddEditTaskView
from ..core.state import AppState
from ..data.task_models import Task, TasksFilter

CommandEmitter = Callable[[str], None]
CommandPrompt = Callable[[str], str]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler4 = Callable[[AppState, list[str], CommandEmitter, CommandPrompt], str]
CommandHandler = CommandHandler2 | CommandHandler4

SHORT_ID_LEN = 8

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /list, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter = print,
        ask: CommandPrompt = input,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.

        Interactive handlers (4 params) also get `emit` for output and `ask` for input.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        nparams = len(inspect.signature(handler).parameters)
        if nparams >= 4:
            h4 = cast(CommandHandler4, handler)
            return h4(state, args, emit, ask)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


class _TasksCollector:
    """LoadTasksCallback that keeps whatever the repository answers with."""

    def __init__(self) -> None:
        self.tasks: list[Task] = []

    def on_tasks_loaded(self, tasks: list[Task]) -> None:
        self.tasks = list(tasks)

    def on_data_not_available(self) -> None:
        self.tasks = []


def _load_tasks(state: AppState) -> list[Task]:
    collector = _TasksCollector()
    state.tasks_repository.get_tasks(collector)
    return collector.tasks


def _format_task(task: Task) -> str:
    mark = "x" if task.completed else " "
    return f"[{mark}] {task.id[:SHORT_ID_LEN]}  {task.title_for_list}"


def _resolve_task_id(state: AppState, args: list[str]) -> tuple[str | None, str]:
    """Match a full id or a unique id prefix. Returns (task_id, error_message)."""
    if not args:
        return None, "Task id is required."
    prefix = args[0].strip()
    matches = [t.id for t in _load_tasks(state) if t.id.startswith(prefix)]
    if not matches:
        return None, f"No task matches id '{prefix}'."
    if prefix in matches:
        return prefix, ""
    if len(matches) > 1:
        return None, f"Id prefix '{prefix}' is ambiguous ({len(matches)} tasks)."
    return matches[0], ""


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str]) -> str:
    """
    /list            -> tasks with the last used filter
    /list active     -> only active tasks
    /list completed  -> only completed tasks
    /list all        -> everything
    """
    if args:
        state.current_filter = TasksFilter.from_text(args[0])

    tasks = [t for t in _load_tasks(state) if t.matches(state.current_filter)]
    if not tasks:
        return f"No tasks ({state.current_filter.value})."

    lines = [f"Tasks ({state.current_filter.value}):"]
    lines.extend(f"  {_format_task(t)}" for t in tasks)
    return "\n".join(lines)


def cmd_add(
    state: AppState,
    args: list[str],
    emit: CommandEmitter,
    ask: CommandPrompt,
) -> str:
    view = ConsoleAddEditTaskView(state.tasks_repository, None, input_fn=ask, output_fn=emit)
    if view.run():
        return "Task saved.\n" + cmd_list(state, [])
    return "Nothing saved."


def cmd_edit(
    state: AppState,
    args: list[str],
    emit: CommandEmitter,
    ask: CommandPrompt,
) -> str:
    task_id, error = _resolve_task_id(state, args)
    if task_id is None:
        return error

    view = ConsoleAddEditTaskView(state.tasks_repository, task_id, input_fn=ask, output_fn=emit)
    if view.run():
        return "Task updated.\n" + cmd_list(state, [])
    return "Nothing saved."


def cmd_done(state: AppState, args: list[str]) -> str:
    task_id, error = _resolve_task_id(state, args)
    if task_id is None:
        return error
    state.tasks_repository.complete_task(task_id)
    return f"Task {task_id[:SHORT_ID_LEN]} marked complete."


def cmd_undo(state: AppState, args: list[str]) -> str:
    task_id, error = _resolve_task_id(state, args)
    if task_id is None:
        return error
    state.tasks_repository.activate_task(task_id)
    return f"Task {task_id[:SHORT_ID_LEN]} marked active."


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id, error = _resolve_task_id(state, args)
    if task_id is None:
        return error
    state.tasks_repository.delete_task(task_id)
    return f"Task {task_id[:SHORT_ID_LEN]} deleted."


def cmd_clear(state: AppState, args: list[str]) -> str:
    state.tasks_repository.clear_completed_tasks()
    return "Completed tasks cleared."


def cmd_refresh(state: AppState, args: list[str]) -> str:
    state.tasks_repository.refresh_tasks()
    return cmd_list(state, [])


def cmd_status(state: AppState, args: list[str]) -> str:
    tasks = _load_tasks(state)
    active = sum(1 for t in tasks if t.is_active)
    db_path = getattr(state.settings, "tasks_db_path", "?")
    return (
        "Status:\n"
        f"  Tasks: {len(tasks)} ({active} active, {len(tasks) - active} completed)\n"
        f"  Filter: {state.current_filter.value}\n"
        f"  Database: {db_path}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register(
    "list", cmd_list, help_text="List tasks: /list [all|active|completed].", aliases=["ls"]
)
registry.register("add", cmd_add, help_text="Add a new task.", aliases=["new"])
registry.register("edit", cmd_edit, help_text="Edit a task: /edit <id>.")
registry.register("done", cmd_done, help_text="Mark a task complete: /done <id>.")
registry.register("undo", cmd_undo, help_text="Mark a task active again: /undo <id>.")
registry.register("delete", cmd_delete, help_text="Delete a task: /delete <id>.", aliases=["rm"])
registry.register("clear", cmd_clear, help_text="Delete all completed tasks.")
registry.register("refresh", cmd_refresh, help_text="Reload tasks from the remote source.")
registry.register("status", cmd_status, help_text="Show task counts and storage location.")
