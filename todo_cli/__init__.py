"""
Todo CLI - a simple command-line todo list with priorities.

LEARNING NOTES:
- __version__ is a convention for storing package version
- __all__ lists what gets imported with "from package import *"

Each invocation loads the list from a JSON file, applies one command,
saves the file if the command changed anything, and prints a report.

CLI Usage:
    $ todo add "Write the report" 4
    $ todo prioritize
    $ todo remove 1

Programmatic Usage:
    from pathlib import Path
    from todo_cli import add_todo, load_todo_list, save_todo_list

    path = Path("todos.json")
    change = add_todo(load_todo_list(path), "Write the report", 4)
    if change.changed:
        save_todo_list(change.todo_list, path)
"""

__version__ = "0.1.0"

# Re-export key names for programmatic use
from .models import Task, TodoList
from .storage import StorageError, load_todo_list, save_todo_list
from .store import (
    Change,
    add_todo,
    by_creation,
    by_priority,
    clear_todos,
    edit_todo,
    remove_todo,
)

__all__ = [
    # Version info
    "__version__",
    # Models
    "Task",
    "TodoList",
    "Change",
    # Store operations
    "add_todo",
    "remove_todo",
    "edit_todo",
    "clear_todos",
    "by_priority",
    "by_creation",
    # Persistence
    "load_todo_list",
    "save_todo_list",
    "StorageError",
]
