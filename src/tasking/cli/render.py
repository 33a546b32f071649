# src/tasking/cli/render.py

"""Plain-text rendering of a TaskListSnapshot for the console."""

from __future__ import annotations

from ..core.intents import TaskListSnapshot, TaskView
from ..tasks.task_models import TaskStatus

EMPTY_TEXT = "タスクがありません"
RESET = "\033[0m"

# Status -> ANSI style (background;foreground), one entry per variant.
STATUS_STYLES: dict[TaskStatus, str] = {
    TaskStatus.NEW: "\033[46;30m",
    TaskStatus.IN_PROGRESS: "\033[44;97m",
    TaskStatus.STOPPED: "\033[100;97m",
    TaskStatus.DONE: "\033[41;97m",
}

ERROR_STYLE = "\033[31m"


def _paint(text: str, style: str, color: bool) -> str:
    if not color:
        return text
    return f"{style}{text}{RESET}"


def render_task(view: TaskView, *, color: bool = True) -> str:
    badge = _paint(f" {view.status_label} ", STATUS_STYLES[view.status], color)
    return f"  [{view.id:>3}] {badge} {view.content}"


def render_snapshot(snapshot: TaskListSnapshot, *, color: bool = True) -> str:
    lines: list[str] = []
    if snapshot.is_empty:
        lines.append(f"  {EMPTY_TEXT}")
    else:
        lines.extend(render_task(v, color=color) for v in snapshot.items)

    if snapshot.error:
        lines.append(_paint(f"  ! {snapshot.error} (changes are kept in memory)", ERROR_STYLE, color))
    return "\n".join(lines)
