# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening src/todo_tracker/config.py.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "Program name shown in help and logs (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TODO_LOG_TO_FILE": "Also write DEBUG logs to <data_dir>/todo.log (true/false, default: false).",
    # Paths
    "TODO_DATA_DIR": "Local data directory for the log file (default: .local/todo).",
    "TODO_TASKS_FILE": "Task file path (default: tasks.json in the working directory).",
    # Task defaults
    "TODO_DEFAULT_PRIORITY": "Priority used by `add` without --priority (default: Medium).",
}
