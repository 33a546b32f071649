# src/tasking/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "tasking"
LOG_FILENAME = "tasking.log"


class _AppOnlyFilter(logging.Filter):
    """Pass records from the tasking package; everything else stays in the log file."""

    def filter(self, record: logging.LogRecord) -> bool:
        return record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + ".")


def setup_logging(
    *,
    log_dir: str | Path = ".local/tasking",
    console_level: int = logging.WARNING,
) -> Path:
    """
    Send tasking's own warnings to stderr and every record to <log_dir>/tasking.log.

    The console sits under the task list prompt, so it only shows tasking
    records at console_level or above (save failures, ignored task files).
    Python warnings and any other logger go to the file only.

    Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    console.addFilter(_AppOnlyFilter())
    root.addHandler(console)

    file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(fmt)
    root.addHandler(file_handler)

    logging.captureWarnings(True)
    return log_file
