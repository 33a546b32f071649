# src/tasking/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (task store loaded from disk), then
runs the console connector in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    console_level = logging.getLevelNamesMapping().get(settings.log_level.upper(), logging.WARNING)

    log_file = setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (log file %s)...", settings.app_name, log_file)

    state = create_initial_state(settings=settings)

    try:
        run_console_loop(state)
    finally:
        # Every mutation was already saved; nothing to flush here.
        last_error = state.controller.last_error
        if last_error:
            logger.warning("Exiting with unsaved changes: %s", last_error)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
