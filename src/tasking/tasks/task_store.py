# src/tasking/tasks/task_store.py

from __future__ import annotations

from collections.abc import Iterator

from .task_models import Task


class TaskStore:
    """
    In-memory ordered task collection plus the id generator.

    Invariants:
    - ids are unique (only generate_id() may supply them)
    - id_counter never decreases, so ids are never reused, even after clear()
    - insertion order is display order
    """

    def __init__(self, id_counter: int = 0, tasks: list[Task] | None = None) -> None:
        self.id_counter = id_counter
        self.tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskStore):
            return NotImplemented
        return self.id_counter == other.id_counter and self.tasks == other.tasks

    def __repr__(self) -> str:
        return f"TaskStore(id_counter={self.id_counter}, tasks={self.tasks!r})"

    def generate_id(self) -> int:
        self.id_counter += 1
        return self.id_counter

    def add(self, task: Task) -> None:
        self.tasks.append(task)

    def create_task(self, content: str) -> Task:
        task = Task.create(self.generate_id(), content)
        self.add(task)
        return task

    def find_by_id(self, task_id: int) -> Task | None:
        return next((t for t in self.tasks if t.has_id(task_id)), None)

    def remove_by_id(self, task_id: int) -> None:
        self.tasks[:] = [t for t in self.tasks if not t.has_id(task_id)]

    def clear(self) -> None:
        # id_counter is not reset
        self.tasks.clear()

    def is_empty(self) -> bool:
        return not self.tasks
