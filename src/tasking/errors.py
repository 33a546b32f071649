# src/tasking/errors.py

from __future__ import annotations

from pathlib import Path


class TaskingError(Exception):
    """Base class for errors raised by tasking."""


class StorageError(TaskingError):
    """Saving the task list to disk failed. In-memory state is still valid."""

    def __init__(self, message: str, *, path: str | Path | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None
