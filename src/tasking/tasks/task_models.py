# src/tasking/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class TaskStatus(StrEnum):
    """
    Task lifecycle status.

    Values are the wire tags stored in task.json. The cycle is fixed:
    NEW -> IN_PROGRESS -> STOPPED -> DONE -> NEW.
    """

    NEW = "New"
    IN_PROGRESS = "Progress"
    STOPPED = "Stop"
    DONE = "Done"

    def label(self) -> str:
        return _LABELS[self]

    def successor(self) -> TaskStatus:
        return _SUCCESSORS[self]


_LABELS: dict[TaskStatus, str] = {
    TaskStatus.NEW: "新規",
    TaskStatus.IN_PROGRESS: "実行中",
    TaskStatus.STOPPED: "停止",
    TaskStatus.DONE: "完了",
}

_SUCCESSORS: dict[TaskStatus, TaskStatus] = {
    TaskStatus.NEW: TaskStatus.IN_PROGRESS,
    TaskStatus.IN_PROGRESS: TaskStatus.STOPPED,
    TaskStatus.STOPPED: TaskStatus.DONE,
    TaskStatus.DONE: TaskStatus.NEW,
}


@dataclass(slots=True)
class Task:
    id: int
    content: str
    status: TaskStatus = TaskStatus.NEW

    @classmethod
    def create(cls, task_id: int, content: str) -> Task:
        """Caller guarantees a store-unique id and non-empty content."""
        return cls(id=task_id, content=content, status=TaskStatus.NEW)

    def has_id(self, task_id: int) -> bool:
        return self.id == task_id

    def set_status(self, new_status: TaskStatus) -> None:
        # Any value is accepted; advance() is the cyclic path.
        self.status = new_status

    def advance(self) -> TaskStatus:
        self.set_status(self.status.successor())
        return self.status
