# src/tasking/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- wires the JSON repository and the controller into AppState,
- hydrates the task store from disk (empty on first run or corrupt file).
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.controller import TaskController
from ..core.state import AppState
from ..tasks.task_repository import JsonTaskRepository

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    repo = JsonTaskRepository(settings.storage_path)
    controller = TaskController(repo, repo.load())

    return AppState(
        settings=settings,
        controller=controller,
        color=bool(getattr(settings, "color", True)),
    )
