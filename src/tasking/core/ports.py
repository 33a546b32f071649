# src/tasking/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The controller depends on a Protocol instead of the JSON repository,
so tests can swap in an in-memory or failing repository.
"""

from typing import Protocol

from ..tasks.task_store import TaskStore


class TaskRepo(Protocol):
    """Persistence gateway: full-store load/save."""

    def load(self) -> TaskStore: ...

    # Raises StorageError on failure.
    def save(self, store: TaskStore) -> None: ...
