"""
Task store operations: add, remove, edit, clear, and the sorted views.

ARCHITECTURE NOTES:
- Every function takes a TodoList and returns a NEW value; the input is
  never modified. main.py decides whether the result gets saved.
- Bad user input (invalid priority, unknown id) is not an exception.
  It comes back as a Change with rejected=True and a message to print.
- Ids are positional: after a removal the survivors are renumbered 1..N,
  so the next add can always use len + 1.

Single Responsibility: this file knows nothing about files or the terminal.
"""

import logging
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from .models import Task, TodoList, is_valid_priority


logger = logging.getLogger(__name__)


class Change(BaseModel):
    """
    Result of applying one operation to a TodoList.

    LEARNING NOTE:
    Returning a small result object (instead of printing from inside the
    operation) keeps these functions testable: a test can look at
    `changed` and `message` without capturing stdout.
    """

    todo_list: TodoList = Field(
        description="The store after the operation"
    )

    changed: bool = Field(
        default=False,
        description="True if the store differs from the input and should be saved"
    )

    rejected: bool = Field(
        default=False,
        description="True if the input was invalid and nothing was applied"
    )

    message: str = Field(
        default="",
        description="Report for the user (success summary or rejection notice)"
    )


def _now() -> int:
    return int(datetime.now(timezone.utc).timestamp())


def _renumber(todos: list[Task]) -> list[Task]:
    return [todo.model_copy(update={"id": new_id}) for new_id, todo in enumerate(todos, start=1)]


# ============================================================================
# Mutating operations
# ============================================================================

def add_todo(todo_list: TodoList, task: str, priority: int, now: int | None = None) -> Change:
    """
    Append a task with id len + 1.

    Priorities outside 1-5 (0, negatives, 6+) are rejected: the task is not
    added and no id is used up.

    Args:
        todo_list: Current store
        task: Task description
        priority: Priority level, must be 1-5
        now: Creation timestamp override (seconds since epoch), mostly for tests

    Returns:
        Change with the new store, or a rejection
    """
    if not is_valid_priority(priority):
        logger.info("Rejected task %r with priority %d", task, priority)
        return Change(
            todo_list=todo_list,
            rejected=True,
            message=f"Invalid priority: {priority} for task: {task}. Not Added",
        )

    new_task = Task(
        id=len(todo_list.todos) + 1,
        task=task,
        priority=priority,
        created=_now() if now is None else now,
    )
    logger.debug("Adding task %d", new_task.id)
    return Change(
        todo_list=TodoList(todos=[*todo_list.todos, new_task]),
        changed=True,
        message=f"Added task {new_task.id}: {task} (priority {priority})",
    )


def remove_todo(todo_list: TodoList, todo_id: int) -> Change:
    """
    Delete the task with `todo_id` and renumber the rest 1..N.

    Survivors keep their relative order. An id that matches no task
    (including any id on an empty list) is rejected and nothing changes.
    """
    survivors = [todo for todo in todo_list.todos if todo.id != todo_id]

    if len(survivors) == len(todo_list.todos):
        logger.info("No task with id %d to remove", todo_id)
        return Change(
            todo_list=todo_list,
            rejected=True,
            message="Invalid ID. Nothing deleted.",
        )

    logger.debug("Removed task %d, renumbering %d remaining", todo_id, len(survivors))
    return Change(
        todo_list=TodoList(todos=_renumber(survivors)),
        changed=True,
        message=f"Removed task {todo_id}.",
    )


def edit_todo(todo_list: TodoList, new_task: str, todo_id: int) -> Change:
    """
    Replace the description of task `todo_id`.

    Only the description changes; id, priority and creation time stay as
    they were. Ids outside 1..N are rejected, and that includes 0: there
    is no task 0, so it is never read as "the first task".
    """
    if not 1 <= todo_id <= len(todo_list.todos):
        logger.info("No task with id %d to edit", todo_id)
        return Change(todo_list=todo_list, rejected=True, message="Invalid ID")

    todos = list(todo_list.todos)
    index = todo_id - 1
    todos[index] = todos[index].model_copy(update={"task": new_task})
    return Change(
        todo_list=TodoList(todos=todos),
        changed=True,
        message=f"Updated task {todo_id}: {new_task}",
    )


def clear_todos(todo_list: TodoList) -> Change:
    """Empty the store. Clearing an empty store is a no-op, not an error."""
    count = len(todo_list.todos)
    return Change(
        todo_list=TodoList(),
        changed=count > 0,
        message=f"Cleared {count} task(s).",
    )


# ============================================================================
# Display-only views
# ============================================================================
# LEARNING NOTE:
# sorted() returns a new list and is guaranteed stable, even with
# reverse=True: tasks with equal keys keep their insertion order.

def by_priority(todo_list: TodoList) -> list[Task]:
    """Tasks ordered by priority, highest first."""
    return sorted(todo_list.todos, key=lambda todo: todo.priority, reverse=True)


def by_creation(todo_list: TodoList) -> list[Task]:
    """Tasks ordered by creation time, earliest first."""
    return sorted(todo_list.todos, key=lambda todo: todo.created)
