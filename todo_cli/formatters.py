"""
Output formatting for task lists.

LEARNING NOTES:
- The models know what a task IS; formatters know how to DISPLAY it
- Every formatter takes an already-ordered list of tasks, so the same
  code prints the canonical list, the priority view and the schedule view

Supports three output formats:
- Text: one line per task, the default terminal output
- Table: a Rich table with every field, for a wider terminal
- JSON: machine-readable, good for piping to other tools
"""

import json
from datetime import datetime, timezone

from rich.table import Table
from rich.text import Text

from .models import Task


EMPTY_MESSAGE = "No tasks left!"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f"


def format_timestamp(created: int) -> str:
    """Render epoch seconds as a UTC date-time string: '2023-11-14 22:13:20.000000'."""
    return datetime.fromtimestamp(created, tz=timezone.utc).strftime(TIMESTAMP_FORMAT)


def format_as_text(tasks: list[Task]) -> str:
    """
    Format tasks as plain lines: '1: Buy milk, created: 2023-11-14 22:13:20.000000'.

    Returns EMPTY_MESSAGE when there is nothing to show.
    """
    if not tasks:
        return EMPTY_MESSAGE

    return "\n".join(
        f"{task.id}: {task.task}, created: {format_timestamp(task.created)}"
        for task in tasks
    )


def format_as_json(tasks: list[Task], indent: int = 2) -> str:
    """
    Format tasks as a pretty-printed JSON array.

    LEARNING NOTE:
    model_dump() turns each Task into a plain dict using the same field
    names as the store file, so this output can be read back with
    Task.model_validate().
    """
    return json.dumps([task.model_dump() for task in tasks], indent=indent)


def build_table(tasks: list[Task], title: str = "Tasks") -> Table:
    """Build a Rich table with one row per task."""
    table = Table(title=title)
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Task", style="white")
    table.add_column("Priority", justify="center")
    table.add_column("Created (UTC)", style="dim")

    for task in tasks:
        table.add_row(
            str(task.id),
            Text(task.task),
            _get_priority_badge(task.priority),
            format_timestamp(task.created),
        )

    return table


def _get_priority_badge(priority: int) -> str:
    """Rich markup for a priority level; 4 and 5 are highlighted."""
    if priority >= 5:
        return f"[red bold]{priority}[/red bold]"
    if priority >= 4:
        return f"[yellow]{priority}[/yellow]"
    return str(priority)
