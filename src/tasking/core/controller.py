# src/tasking/core/controller.py

from __future__ import annotations

import logging

from ..errors import StorageError
from ..tasks.task_store import TaskStore
from .intents import (
    AddTask,
    ChangeStatus,
    ClearAllTasks,
    DeleteTask,
    Intent,
    SetInputText,
    TaskListSnapshot,
    TaskView,
)
from .ports import TaskRepo

logger = logging.getLogger(__name__)


class TaskController:
    """
    Applies user intents to the task store and persists after each mutation.

    One intent is handled to completion (save included) before the next.
    A failed save keeps the in-memory change and is reported through
    snapshot().error instead of raising.
    """

    def __init__(self, repo: TaskRepo, store: TaskStore | None = None) -> None:
        self._repo = repo
        self._store = store if store is not None else repo.load()
        self._input_text = ""
        self._last_error: str | None = None

    @property
    def store(self) -> TaskStore:
        return self._store

    @property
    def input_text(self) -> str:
        return self._input_text

    @property
    def last_error(self) -> str | None:
        return self._last_error

    def handle(self, intent: Intent) -> TaskListSnapshot:
        logger.debug("Handling intent %r", intent)

        if isinstance(intent, SetInputText):
            self._input_text = intent.text

        elif isinstance(intent, AddTask):
            if self._input_text:
                task = self._store.create_task(self._input_text)
                self._input_text = ""
                logger.info("Added task id=%d", task.id)
                self._save()

        elif isinstance(intent, ClearAllTasks):
            self._store.clear()
            logger.info("Cleared all tasks (id_counter=%d)", self._store.id_counter)
            self._save()

        elif isinstance(intent, ChangeStatus):
            task = self._store.find_by_id(intent.task_id)
            if task is not None:
                new_status = task.advance()
                logger.info("Task id=%d -> %s", task.id, new_status.value)
                self._save()

        elif isinstance(intent, DeleteTask):
            self._store.remove_by_id(intent.task_id)
            logger.info("Deleted task id=%d", intent.task_id)
            self._save()

        else:
            raise TypeError(f"Unsupported intent: {intent!r}")

        return self.snapshot()

    def snapshot(self) -> TaskListSnapshot:
        items = tuple(
            TaskView(id=t.id, content=t.content, status_label=t.status.label(), status=t.status)
            for t in self._store
        )
        return TaskListSnapshot(
            input_text=self._input_text,
            items=items,
            is_empty=self._store.is_empty(),
            error=self._last_error,
        )

    def _save(self) -> None:
        try:
            self._repo.save(self._store)
        except StorageError as e:
            logger.exception("Saving tasks failed; keeping unsaved changes in memory.")
            self._last_error = str(e)
            return
        self._last_error = None
