# tests/test_tasks_repository.py

from __future__ import annotations

import asyncio

import pytest

from todoapp.addedittask.presenter import AddEditTaskPresenter
from todoapp.data.remote import InMemoryRemoteDataSource
from todoapp.data.repository import TasksRepository
from todoapp.data.task_models import Task
from todoapp.data.task_store import TaskStore

from .fakes import FakeAddEditTaskView, RecordingTaskCallback, RecordingTasksCallback


def test_get_task_falls_back_to_remote_and_caches(store: TaskStore) -> None:
    remote_task = Task("From remote", "desc")
    remote = InMemoryRemoteDataSource([remote_task])
    repo = TasksRepository(local=store, remote=remote)

    cb = RecordingTaskCallback()
    repo.get_task(remote_task.id, cb)

    assert [t.id for t in cb.loaded] == [remote_task.id]

    # Served from cache even after the remote forgets it.
    remote.delete_task(remote_task.id)
    cb2 = RecordingTaskCallback()
    repo.get_task(remote_task.id, cb2)
    assert cb2.loaded[0].title == "From remote"


def test_get_task_missing_everywhere(store: TaskStore) -> None:
    repo = TasksRepository(local=store, remote=InMemoryRemoteDataSource())

    cb = RecordingTaskCallback()
    repo.get_task("nope", cb)

    assert cb.loaded == []
    assert cb.missing == 1


def test_save_task_writes_through(store: TaskStore) -> None:
    remote = InMemoryRemoteDataSource()
    repo = TasksRepository(local=store, remote=remote)
    task = Task("Title", "Description")

    repo.save_task(task)

    assert store.find_task(task.id) == task
    remote_cb = RecordingTaskCallback()
    remote.get_task(task.id, remote_cb)
    assert remote_cb.loaded == [task]


def test_get_tasks_prefers_local_then_serves_cache(store: TaskStore) -> None:
    local_task = Task("local", "")
    store.save_task(local_task)
    remote = InMemoryRemoteDataSource([Task("remote only", "")])
    repo = TasksRepository(local=store, remote=remote)

    cb = RecordingTasksCallback()
    repo.get_tasks(cb)
    assert [t.title for t in cb.loaded[0]] == ["local"]

    # Local changes behind the repository's back are not seen until refresh.
    store.delete_all_tasks()
    cb2 = RecordingTasksCallback()
    repo.get_tasks(cb2)
    assert [t.title for t in cb2.loaded[0]] == ["local"]


def test_refresh_reloads_from_remote_and_rewrites_local(store: TaskStore) -> None:
    store.save_task(Task("stale local", ""))
    remote = InMemoryRemoteDataSource([Task("fresh remote", "")])
    repo = TasksRepository(local=store, remote=remote)

    repo.refresh_tasks()
    cb = RecordingTasksCallback()
    repo.get_tasks(cb)

    assert [t.title for t in cb.loaded[0]] == ["fresh remote"]
    assert [t.title for t in store.list_tasks()] == ["fresh remote"]


def test_complete_activate_clear_and_delete(store: TaskStore) -> None:
    remote = InMemoryRemoteDataSource()
    repo = TasksRepository(local=store, remote=remote)
    a = Task("a", "")
    b = Task("b", "")
    repo.save_task(a)
    repo.save_task(b)

    repo.complete_task(a.id)
    completed_cb = RecordingTaskCallback()
    repo.get_task(a.id, completed_cb)
    assert completed_cb.loaded[0].completed is True

    repo.activate_task(a.id)
    active_cb = RecordingTaskCallback()
    repo.get_task(a.id, active_cb)
    assert active_cb.loaded[0].completed is False

    repo.complete_task(b.id)
    repo.clear_completed_tasks()
    cleared_cb = RecordingTaskCallback()
    repo.get_task(b.id, cleared_cb)
    assert cleared_cb.loaded == []
    assert cleared_cb.missing == 1
    assert [t.id for t in store.list_tasks()] == [a.id]

    repo.delete_task(a.id)
    assert store.count_tasks() == 0

    repo.save_task(Task("c", ""))
    repo.delete_all_tasks()
    cb = RecordingTasksCallback()
    remote.get_tasks(cb)
    assert cb.loaded == [[]]


@pytest.mark.asyncio
async def test_remote_latency_answers_later_on_the_loop() -> None:
    task = Task("slow", "")
    remote = InMemoryRemoteDataSource([task], latency_seconds=0.01)

    cb = RecordingTaskCallback()
    remote.get_task(task.id, cb)
    assert cb.loaded == []

    await asyncio.sleep(0.05)
    assert [t.id for t in cb.loaded] == [task.id]


@pytest.mark.asyncio
async def test_presenter_with_slow_remote_skips_view_left_before_answer(store: TaskStore) -> None:
    task = Task("remote title", "remote description")
    remote = InMemoryRemoteDataSource([task], latency_seconds=0.01)
    repo = TasksRepository(local=store, remote=remote)
    view = FakeAddEditTaskView()
    presenter = AddEditTaskPresenter(task.id, repo, view, True)

    presenter.start()
    assert presenter.is_data_missing() is True

    # The user leaves the screen before the remote answers.
    view.active = False
    await asyncio.sleep(0.05)

    assert view.calls == []
    assert presenter.is_data_missing() is False


@pytest.mark.asyncio
async def test_presenter_with_slow_remote_fills_active_view(store: TaskStore) -> None:
    task = Task("remote title", "remote description")
    remote = InMemoryRemoteDataSource([task], latency_seconds=0.01)
    repo = TasksRepository(local=store, remote=remote)
    view = FakeAddEditTaskView()
    presenter = AddEditTaskPresenter(task.id, repo, view, True)

    presenter.start()
    await asyncio.sleep(0.05)

    assert view.calls == [
        ("set_title", "remote title"),
        ("set_description", "remote description"),
    ]


def test_get_tasks_after_save_still_includes_stored_tasks(store: TaskStore) -> None:
    earlier = Task("from an earlier session", "")
    store.save_task(earlier)
    repo = TasksRepository(local=store, remote=InMemoryRemoteDataSource([earlier]))

    # A write and a single lookup before any full load must not count as a loaded cache.
    fresh = Task("fresh", "")
    repo.save_task(fresh)
    repo.get_task(fresh.id, RecordingTaskCallback())

    cb = RecordingTasksCallback()
    repo.get_tasks(cb)

    assert {t.title for t in cb.loaded[0]} == {"from an earlier session", "fresh"}
