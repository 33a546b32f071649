# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKING_APP_NAME": "Title shown above the task list (default: Tasking!).",
    "TASKING_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "TASKING_LOG_DIR": "Directory for tasking.log (default: .local/tasking).",
    # Storage
    "TASKING_STORAGE_PATH": (
        "Task list JSON file (default: task.json next to the program, or ./task.json)."
    ),
    # Console
    "TASKING_COLOR": "Colour status labels (true/false). Defaults to false when NO_COLOR is set.",
}
