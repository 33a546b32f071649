# src/tasking/core/intents.py

"""User intents delivered by a connector, and the snapshot it renders."""

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_models import TaskStatus


@dataclass(frozen=True, slots=True)
class AddTask:
    """Create a task from the buffered input text."""


@dataclass(frozen=True, slots=True)
class ClearAllTasks:
    pass


@dataclass(frozen=True, slots=True)
class ChangeStatus:
    task_id: int


@dataclass(frozen=True, slots=True)
class DeleteTask:
    task_id: int


@dataclass(frozen=True, slots=True)
class SetInputText:
    text: str


Intent = AddTask | ClearAllTasks | ChangeStatus | DeleteTask | SetInputText


@dataclass(frozen=True, slots=True)
class TaskView:
    id: int
    content: str
    status_label: str
    status: TaskStatus


@dataclass(frozen=True, slots=True)
class TaskListSnapshot:
    input_text: str
    items: tuple[TaskView, ...]
    is_empty: bool
    # Message of the last failed save; None once a save succeeds.
    error: str | None = None
