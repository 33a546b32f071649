# tests/conftest.py

from __future__ import annotations

import copy
from pathlib import Path
from types import SimpleNamespace

import pytest

from tasking.cli.bootstrap import create_initial_state
from tasking.core.state import AppState
from tasking.errors import StorageError
from tasking.tasks.task_store import TaskStore


class FakeTaskRepo:
    """
    In-memory TaskRepo for controller tests.

    Keeps a deep copy of every save so tests can check exactly what would
    have been written, and can be switched into a failing mode.
    """

    def __init__(self, initial: TaskStore | None = None) -> None:
        self.initial = initial or TaskStore()
        self.saved: list[TaskStore] = []
        self.fail = False

    def load(self) -> TaskStore:
        return copy.deepcopy(self.initial)

    def save(self, store: TaskStore) -> None:
        if self.fail:
            raise StorageError("disk full", path="task.json")
        self.saved.append(copy.deepcopy(store))


@pytest.fixture()
def fake_repo() -> FakeTaskRepo:
    return FakeTaskRepo()


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the console.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment.
    """
    return SimpleNamespace(
        app_name="Tasking!",
        log_level="WARNING",
        log_dir=tmp_path / "logs",
        storage_path=tmp_path / "task.json",
        color=False,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired with the real JSON repository in tmp_path."""
    return create_initial_state(settings=settings)
