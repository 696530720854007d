"""
Storage module for saving and loading the todo list.

ARCHITECTURE NOTES:
- This module handles ALL file system operations
- main.py calls these functions but doesn't know HOW they work
- Uses models.py to parse and serialize the TodoList

File format (pretty-printed JSON):
    {"todos": [{"id": 1, "task": "...", "priority": 3, "created": 1700000000}]}

Every save rewrites the whole file. There is no locking: one process
works on a given file at a time.
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from .models import TodoList


logger = logging.getLogger(__name__)


class StorageError(Exception):
    """The store file could not be read, decoded or written."""


def load_todo_list(path: Path) -> TodoList:
    """
    Load the todo list from `path`.

    A missing file is the first-run case and gives an empty list.
    Anything else that goes wrong is fatal: unreadable files and content
    that does not parse into a valid TodoList raise StorageError, and
    nothing is guessed or repaired.

    Raises:
        StorageError: If the file exists but can't be read or decoded
    """
    path = Path(path)

    try:
        if not path.exists():
            logger.debug("No store at %s, starting empty", path)
            return TodoList()
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageError(f"Unable to read todo list file {path}: {e}") from e

    try:
        todo_list = TodoList.model_validate_json(contents)
    except ValidationError as e:
        raise StorageError(f"Unable to parse todo list file {path}: {e}") from e

    logger.debug("Loaded %d task(s) from %s", len(todo_list.todos), path)
    return todo_list


def save_todo_list(todo_list: TodoList, path: Path) -> Path:
    """
    Write the whole todo list to `path`, replacing any previous contents.

    Parent directories are created if needed.

    Returns:
        The path written to

    Raises:
        StorageError: If the file can't be written
    """
    path = Path(path)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(todo_list.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Unable to write todo list file {path}: {e}") from e

    logger.info("Saved %d task(s) to %s", len(todo_list.todos), path)
    return path
