# tests/test_add_edit_task_presenter.py

from __future__ import annotations

import pytest

from todoapp.addedittask.presenter import AddEditTaskPresenter
from todoapp.data.task_models import Task

from .fakes import FakeAddEditTaskView, FakeTasksRepository


def _presenter(
    task_id: str | None,
    *,
    should_load: bool = True,
    active: bool = True,
) -> tuple[AddEditTaskPresenter, FakeTasksRepository, FakeAddEditTaskView]:
    repo = FakeTasksRepository()
    view = FakeAddEditTaskView(active=active)
    return AddEditTaskPresenter(task_id, repo, view, should_load), repo, view


def test_save_new_task_persists_and_shows_list() -> None:
    presenter, repo, view = _presenter(None)

    presenter.save_task("Buy milk", "2 litres")

    assert len(repo.saved) == 1
    assert repo.saved[0].title == "Buy milk"
    assert repo.saved[0].description == "2 litres"
    assert view.calls == [("show_tasks_list", None)]


def test_save_new_task_with_only_description_is_not_empty() -> None:
    presenter, repo, view = _presenter(None)

    presenter.save_task("", "just a note")

    assert len(repo.saved) == 1
    assert view.called("show_tasks_list")


@pytest.mark.parametrize("title,description", [("", ""), ("   ", "\t")])
def test_save_empty_new_task_shows_error_and_saves_nothing(title: str, description: str) -> None:
    presenter, repo, view = _presenter(None)

    presenter.save_task(title, description)

    assert repo.saved == []
    assert view.calls == [("show_empty_task_error", None)]


def test_save_existing_task_updates_with_same_id() -> None:
    presenter, repo, view = _presenter("task-1")

    presenter.save_task("New title", "New description")

    assert len(repo.saved) == 1
    saved = repo.saved[0]
    assert saved.id == "task-1"
    assert (saved.title, saved.description) == ("New title", "New description")
    assert view.calls == [("show_tasks_list", None)]


def test_save_existing_task_persists_even_when_empty() -> None:
    presenter, repo, view = _presenter("task-1")

    presenter.save_task("", "")

    assert [t.id for t in repo.saved] == ["task-1"]
    assert not view.called("show_empty_task_error")
    assert view.called("show_tasks_list")


def test_start_with_id_fetches_exactly_once() -> None:
    presenter, repo, _ = _presenter("task-1", should_load=True)

    presenter.start()

    assert repo.get_task_requests == ["task-1"]


def test_start_without_reload_flag_fetches_nothing() -> None:
    presenter, repo, _ = _presenter("task-1", should_load=False)

    presenter.start()

    assert repo.get_task_requests == []


def test_start_for_new_task_fetches_nothing() -> None:
    presenter, repo, _ = _presenter(None)

    presenter.start()

    assert repo.get_task_requests == []


def test_populate_task_for_new_task_is_a_programming_error() -> None:
    presenter, repo, _ = _presenter(None)

    with pytest.raises(RuntimeError, match="populate_task"):
        presenter.populate_task()
    assert repo.get_task_requests == []


def test_task_loaded_fills_view_and_clears_missing_flag() -> None:
    presenter, repo, view = _presenter("task-1")
    presenter.start()
    assert presenter.is_data_missing() is True

    repo.answer_loaded(Task("Title", "Description", id="task-1"))

    assert view.calls == [("set_title", "Title"), ("set_description", "Description")]
    assert presenter.is_data_missing() is False


def test_second_start_after_load_does_not_fetch_again() -> None:
    presenter, repo, _ = _presenter("task-1")
    presenter.start()
    repo.answer_loaded(Task("Title", "Description", id="task-1"))

    presenter.start()

    assert repo.get_task_requests == ["task-1"]


def test_data_not_available_shows_error_and_keeps_missing_flag() -> None:
    presenter, repo, view = _presenter("task-1")
    presenter.start()

    repo.answer_missing()

    assert view.calls == [("show_empty_task_error", None)]
    assert presenter.is_data_missing() is True


def test_inactive_view_is_not_touched_when_task_loads() -> None:
    presenter, repo, view = _presenter("task-1")
    presenter.start()
    view.active = False

    repo.answer_loaded(Task("Title", "Description", id="task-1"))

    assert view.calls == []
    # The load still counts as done.
    assert presenter.is_data_missing() is False


def test_inactive_view_is_not_touched_when_task_is_missing() -> None:
    presenter, repo, view = _presenter("task-1")
    presenter.start()
    view.active = False

    repo.answer_missing()

    assert view.calls == []
    assert presenter.is_data_missing() is True


def test_synchronous_repository_answers_during_start() -> None:
    task = Task("Title", "Description", id="task-1")
    repo = FakeTasksRepository([task], auto_answer=True)
    view = FakeAddEditTaskView()
    presenter = AddEditTaskPresenter("task-1", repo, view, True)

    presenter.start()

    assert view.calls == [("set_title", "Title"), ("set_description", "Description")]
    assert presenter.is_data_missing() is False
