# src/tasking/tasks/task_repository.py

"""
JSON file persistence for the task list.

File layout (one document, rewritten in full on every save):

    {"id_counter": 2, "tasks": [{"id": 2, "content": "...", "status": "New"}]}

Loading never raises: a missing, unreadable or malformed file yields an
empty TaskStore. Saving raises StorageError so the caller can keep its
in-memory state and tell the user.
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any

from ..errors import StorageError
from .task_models import Task, TaskStatus
from .task_store import TaskStore

logger = logging.getLogger(__name__)

SAVE_FILENAME = "task.json"


class _MalformedTaskFile(ValueError):
    pass


def resolve_storage_path(filename: str = SAVE_FILENAME) -> Path:
    """
    Place the save file beside the running program, not the working directory.

    Frozen builds use the executable itself; otherwise the launched entry
    script. Falls back to the bare filename when neither can be determined.
    """
    try:
        if getattr(sys, "frozen", False):
            program = Path(sys.executable)
        elif sys.argv and sys.argv[0]:
            program = Path(sys.argv[0])
        else:
            return Path(filename)
        return program.resolve().parent / filename
    except (OSError, RuntimeError, ValueError):
        logger.debug("Could not resolve program directory; using %s", filename, exc_info=True)
        return Path(filename)


U32_MAX = 0xFFFFFFFF


def _is_uint(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= U32_MAX


def store_to_dict(store: TaskStore) -> dict[str, Any]:
    return {
        "id_counter": store.id_counter,
        "tasks": [
            {"id": t.id, "content": t.content, "status": t.status.value} for t in store.tasks
        ],
    }


def _task_from_dict(raw: Any) -> Task:
    if not isinstance(raw, dict):
        raise _MalformedTaskFile("task entry is not an object")

    task_id = raw.get("id")
    content = raw.get("content")
    status = raw.get("status")

    if not _is_uint(task_id):
        raise _MalformedTaskFile(f"bad task id: {task_id!r}")
    if not isinstance(content, str):
        raise _MalformedTaskFile(f"bad content for task {task_id}")
    if not isinstance(status, str):
        raise _MalformedTaskFile(f"bad status for task {task_id}: {status!r}")
    try:
        parsed_status = TaskStatus(status)
    except ValueError as e:
        raise _MalformedTaskFile(f"unknown status for task {task_id}: {status!r}") from e

    return Task(id=task_id, content=content, status=parsed_status)


def store_from_dict(data: Any) -> TaskStore:
    """Inverse of store_to_dict(). Raises ValueError on any structural mismatch."""
    if not isinstance(data, dict):
        raise _MalformedTaskFile("top level is not an object")

    id_counter = data.get("id_counter")
    raw_tasks = data.get("tasks")
    if not _is_uint(id_counter):
        raise _MalformedTaskFile(f"bad id_counter: {id_counter!r}")
    if not isinstance(raw_tasks, list):
        raise _MalformedTaskFile("tasks is not a list")

    tasks = [_task_from_dict(raw) for raw in raw_tasks]

    seen: set[int] = set()
    for t in tasks:
        if t.id in seen:
            raise _MalformedTaskFile(f"duplicate task id {t.id}")
        seen.add(t.id)

    # Ids above the counter are kept; the counter is raised so they are never reissued.
    max_id = max(seen, default=0)
    if max_id > id_counter:
        logger.warning("id_counter %d is below task id %d; raising it.", id_counter, max_id)
        id_counter = max_id

    return TaskStore(id_counter=id_counter, tasks=tasks)


class JsonTaskRepository:
    """Saves and loads a TaskStore as a single JSON file."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else resolve_storage_path()
        logger.info("Task storage file: %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> TaskStore:
        try:
            raw = self._path.read_text("utf-8")
        except FileNotFoundError:
            logger.debug("No task file at %s; starting empty.", self._path)
            return TaskStore()
        except (OSError, UnicodeDecodeError):
            logger.warning("Failed to read task file %s; starting empty.", self._path, exc_info=True)
            return TaskStore()

        try:
            store = store_from_dict(json.loads(raw))
        except (ValueError, RecursionError) as e:
            # json.JSONDecodeError is a ValueError; deep nesting raises RecursionError
            logger.warning("Ignoring malformed task file %s: %s", self._path, e)
            return TaskStore()

        logger.info("Loaded %d tasks from %s (id_counter=%d)", len(store), self._path, store.id_counter)
        return store

    def save(self, store: TaskStore) -> None:
        try:
            serialized = json.dumps(store_to_dict(store), ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Could not serialize tasks: {e}", path=self._path) from e

        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(serialized + "\n", "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise StorageError(f"Could not write {self._path}: {e.strerror or e}", path=self._path) from e

        logger.debug("Saved %d tasks to %s", len(store), self._path)
