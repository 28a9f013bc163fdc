"""
Where the tasks directory lives.
"""
import os
from pathlib import Path

DEFAULT_TASKS_DIRNAME = "tasks"
TASKS_DIR_ENV = "MTD_TASKS_DIR"


def resolve_tasks_dir(explicit: str | Path | None = None, cwd: str | Path | None = None) -> Path:
    """Explicit path, else $MTD_TASKS_DIR, else ``<cwd>/tasks``; always absolute."""
    base = Path(cwd) if cwd is not None else Path.cwd()
    if explicit:
        path = Path(explicit)
    elif os.environ.get(TASKS_DIR_ENV):
        path = Path(os.environ[TASKS_DIR_ENV])
    else:
        path = Path(DEFAULT_TASKS_DIRNAME)
    if not path.is_absolute():
        path = base / path
    return path
