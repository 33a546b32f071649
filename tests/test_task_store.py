# tests/test_task_store.py

from __future__ import annotations

from tasking.tasks.task_models import Task, TaskStatus
from tasking.tasks.task_store import TaskStore


def test_generate_id_is_strictly_increasing_from_one() -> None:
    store = TaskStore()
    ids = [store.generate_id() for _ in range(5)]
    assert ids == [1, 2, 3, 4, 5]
    assert store.id_counter == 5


def test_add_then_find_returns_equal_live_task() -> None:
    store = TaskStore()
    task = Task.create(store.generate_id(), "Buy milk")
    store.add(task)

    found = store.find_by_id(task.id)
    assert found == Task(id=1, content="Buy milk", status=TaskStatus.NEW)

    # find_by_id hands back the stored object, so status changes stick.
    assert found is not None
    found.advance()
    assert store.tasks[0].status is TaskStatus.IN_PROGRESS


def test_find_missing_returns_none() -> None:
    store = TaskStore()
    store.create_task("a")
    assert store.find_by_id(42) is None


def test_remove_then_find_is_none_and_unknown_remove_is_noop() -> None:
    store = TaskStore()
    a = store.create_task("a")
    b = store.create_task("b")

    store.remove_by_id(a.id)
    assert store.find_by_id(a.id) is None
    assert [t.id for t in store] == [b.id]

    store.remove_by_id(999)
    assert [t.id for t in store] == [b.id]


def test_insertion_order_is_preserved() -> None:
    store = TaskStore()
    for text in ("one", "two", "three"):
        store.create_task(text)
    store.remove_by_id(2)
    assert [t.content for t in store] == ["one", "three"]


def test_clear_keeps_counter() -> None:
    store = TaskStore()
    store.create_task("a")
    store.create_task("b")

    store.clear()
    assert store.is_empty()
    assert len(store) == 0
    assert store.id_counter == 2

    assert store.create_task("c").id == 3


def test_is_empty() -> None:
    store = TaskStore()
    assert store.is_empty()
    store.create_task("a")
    assert not store.is_empty()


def test_equality_compares_counter_and_tasks() -> None:
    a = TaskStore()
    b = TaskStore()
    a.create_task("x")
    b.create_task("x")
    assert a == b

    b.tasks[0].advance()
    assert a != b

    c = TaskStore()
    c.create_task("x")
    c.generate_id()
    assert a != c
