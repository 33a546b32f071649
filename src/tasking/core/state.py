# src/tasking/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from .controller import TaskController


@dataclass
class AppState:
    # Settings object (tasking.config.Settings or a test double).
    settings: object

    controller: TaskController
    color: bool = True
    running: bool = True
