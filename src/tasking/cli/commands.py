# src/tasking/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.intents import AddTask, ChangeStatus, ClearAllTasks, DeleteTask, SetInputText
from ..core.state import AppState
from .render import render_snapshot

# (state, args, raw argument text with inner whitespace preserved)
CommandHandler = Callable[[AppState, list[str], str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        body = line[1:].strip()
        parts = body.split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]
        rest = body[len(parts[0]) :].strip()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args, rest)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Any other text is added as a new task.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_task_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    try:
        task_id = int(args[0])
    except ValueError:
        return None
    return task_id if task_id >= 0 else None


def _render(state: AppState, snapshot) -> str:
    return render_snapshot(snapshot, color=state.color)


def add_text(state: AppState, text: str) -> str:
    """SetInputText + AddTask, the same pair of intents a text box and button emit."""
    ctl = state.controller
    ctl.handle(SetInputText(text))
    before = len(ctl.store)
    snapshot = ctl.handle(AddTask())
    if len(ctl.store) == before:
        return "Task text is empty; nothing added."
    return _render(state, snapshot)


def cmd_help(state: AppState, args: list[str], rest: str) -> str:
    return registry.build_help()


def cmd_list(state: AppState, args: list[str], rest: str) -> str:
    return _render(state, state.controller.snapshot())


def cmd_add(state: AppState, args: list[str], rest: str) -> str:
    """/add <text>"""
    return add_text(state, rest)


def cmd_next(state: AppState, args: list[str], rest: str) -> str:
    """/next <id> -> advance the task to its next status"""
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /next <id>"
    if state.controller.store.find_by_id(task_id) is None:
        return f"No task with id {task_id}."
    return _render(state, state.controller.handle(ChangeStatus(task_id)))


def cmd_delete(state: AppState, args: list[str], rest: str) -> str:
    """/del <id>"""
    task_id = _parse_task_id(args)
    if task_id is None:
        return "Usage: /del <id>"
    return _render(state, state.controller.handle(DeleteTask(task_id)))


def cmd_clear(state: AppState, args: list[str], rest: str) -> str:
    return _render(state, state.controller.handle(ClearAllTasks()))


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.")
registry.register(
    "next", cmd_next, help_text="Advance a task's status: /next <id>.", aliases=["status"]
)
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["delete", "rm"])
registry.register("clear", cmd_clear, help_text="Delete all tasks (ids are not reused).")
