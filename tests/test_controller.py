# tests/test_controller.py

from __future__ import annotations

from pathlib import Path

import pytest

from tasking.core.controller import TaskController
from tasking.core.intents import (
    AddTask,
    ChangeStatus,
    ClearAllTasks,
    DeleteTask,
    SetInputText,
    TaskView,
)
from tasking.tasks.task_models import TaskStatus
from tasking.tasks.task_repository import JsonTaskRepository
from tasking.tasks.task_store import TaskStore


def _add(ctl: TaskController, text: str):
    ctl.handle(SetInputText(text))
    return ctl.handle(AddTask())


def test_full_lifecycle_scenario(fake_repo) -> None:
    ctl = TaskController(fake_repo)

    snap = _add(ctl, "Buy milk")
    assert snap.items == (TaskView(1, "Buy milk", "新規", TaskStatus.NEW),)
    assert snap.input_text == ""
    assert not snap.is_empty

    seen = []
    for _ in range(4):
        seen.append(ctl.handle(ChangeStatus(1)).items[0].status)
    assert seen == [TaskStatus.IN_PROGRESS, TaskStatus.STOPPED, TaskStatus.DONE, TaskStatus.NEW]

    snap = ctl.handle(DeleteTask(1))
    assert snap.is_empty
    assert snap.items == ()
    assert ctl.store.id_counter == 1

    snap = _add(ctl, "Walk dog")
    assert [v.id for v in snap.items] == [2]


def test_clear_then_add_does_not_reuse_ids(fake_repo) -> None:
    ctl = TaskController(fake_repo)
    _add(ctl, "a")
    _add(ctl, "b")

    snap = ctl.handle(ClearAllTasks())
    assert snap.is_empty
    assert ctl.store.id_counter == 2

    snap = _add(ctl, "c")
    assert [v.id for v in snap.items] == [3]


def test_every_mutation_is_saved(fake_repo) -> None:
    ctl = TaskController(fake_repo)

    _add(ctl, "a")
    ctl.handle(ChangeStatus(1))
    ctl.handle(DeleteTask(1))
    ctl.handle(ClearAllTasks())

    assert len(fake_repo.saved) == 4
    assert fake_repo.saved[0].tasks[0].content == "a"
    assert fake_repo.saved[1].tasks[0].status is TaskStatus.IN_PROGRESS
    assert fake_repo.saved[-1] == TaskStore(id_counter=1)


def test_set_input_text_does_not_save(fake_repo) -> None:
    ctl = TaskController(fake_repo)
    snap = ctl.handle(SetInputText("draft"))
    assert snap.input_text == "draft"
    assert fake_repo.saved == []


def test_empty_add_is_rejected_without_consuming_id(fake_repo) -> None:
    ctl = TaskController(fake_repo)

    snap = ctl.handle(AddTask())

    assert snap.is_empty
    assert ctl.store.id_counter == 0
    assert fake_repo.saved == []


def test_change_status_unknown_id_is_silent_noop(fake_repo) -> None:
    ctl = TaskController(fake_repo)
    _add(ctl, "a")
    fake_repo.saved.clear()

    snap = ctl.handle(ChangeStatus(99))

    assert snap.items[0].status is TaskStatus.NEW
    assert fake_repo.saved == []


def test_delete_unknown_id_keeps_tasks(fake_repo) -> None:
    ctl = TaskController(fake_repo)
    _add(ctl, "a")
    fake_repo.saved.clear()

    snap = ctl.handle(DeleteTask(99))

    assert [v.id for v in snap.items] == [1]
    # Unlike ChangeStatus, delete saves even when nothing matched.
    assert len(fake_repo.saved) == 1
    assert fake_repo.saved[0] == ctl.store


def test_loads_initial_store_from_repo(fake_repo) -> None:
    initial = TaskStore()
    initial.create_task("from disk")
    initial.generate_id()
    fake_repo.initial = initial

    ctl = TaskController(fake_repo)

    assert [v.content for v in ctl.snapshot().items] == ["from disk"]
    assert [v.id for v in _add(ctl, "next").items] == [1, 3]


def test_save_failure_keeps_memory_and_reports_error(fake_repo) -> None:
    ctl = TaskController(fake_repo)
    _add(ctl, "saved")
    fake_repo.fail = True

    snap = _add(ctl, "unsaved")

    assert [v.content for v in snap.items] == ["saved", "unsaved"]
    assert snap.error == "disk full"
    assert ctl.last_error == "disk full"

    fake_repo.fail = False
    snap = ctl.handle(ChangeStatus(2))
    assert snap.error is None
    assert fake_repo.saved[-1] == ctl.store


def test_snapshot_is_immutable(fake_repo) -> None:
    ctl = TaskController(fake_repo)
    snap = _add(ctl, "a")

    with pytest.raises(AttributeError):
        snap.items[0].content = "b"  # type: ignore[misc]

    ctl.handle(ChangeStatus(1))
    assert snap.items[0].status is TaskStatus.NEW


def test_unknown_intent_raises(fake_repo) -> None:
    ctl = TaskController(fake_repo)
    with pytest.raises(TypeError):
        ctl.handle("add")  # type: ignore[arg-type]


def test_state_survives_restart(tmp_path: Path) -> None:
    path = tmp_path / "task.json"
    ctl = TaskController(JsonTaskRepository(path))
    _add(ctl, "Buy milk")
    _add(ctl, "Walk dog")
    ctl.handle(ChangeStatus(2))
    ctl.handle(DeleteTask(1))

    restarted = TaskController(JsonTaskRepository(path))

    assert restarted.store == ctl.store
    assert restarted.snapshot().items == (TaskView(2, "Walk dog", "実行中", TaskStatus.IN_PROGRESS),)
    assert [v.id for v in _add(restarted, "Call mom").items] == [2, 3]
