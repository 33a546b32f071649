# src/tasking/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_text
from ..cli.commands import registry as command_registry
from ..cli.render import render_snapshot
from ..core.state import AppState

logger = logging.getLogger(__name__)

PROMPT = "> "
EXIT_COMMANDS = ("/exit", "/quit")


def handle_line(state: AppState, line: str) -> str | None:
    """
    Map one input line to intents and return the text to show.

    Slash commands go through the registry; any other non-empty text
    becomes a new task. Returns None for blank lines.
    """
    line = line.strip()
    if not line:
        return None

    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply

    return add_text(state, line)


def run_console_loop(
    state: AppState,
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "Tasking!"))
    logger.info("Console connector started.")

    write(f"{app_name}  (/help for commands, /exit to quit)")
    write(render_snapshot(state.controller.snapshot(), color=state.color))

    while state.running:
        try:
            user_input = read(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if user_input.strip().lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = handle_line(state, user_input)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply:
            write(reply)

    state.running = False
    logger.info("Console connector finished.")
