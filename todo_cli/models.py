"""
Pydantic models for the todo list.

LEARNING NOTES:
- Pydantic models validate data on construction, so a Task can never
  hold a priority outside 1-5 once it exists
- The same models parse the JSON file back into objects (model_validate_json)
  and write it out again (model_dump_json)

These models define the schema for:
- A single todo item (Task)
- The whole ordered collection (TodoList), which is also the file format
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


MIN_PRIORITY = 1
MAX_PRIORITY = 5


def is_valid_priority(priority: int) -> bool:
    """True if `priority` is inside the accepted 1-5 range."""
    return MIN_PRIORITY <= priority <= MAX_PRIORITY


class Task(BaseModel):
    """
    A single todo item.

    LEARNING NOTE:
    The field names double as the JSON keys on disk, so renaming a field
    changes the file format. `id` is positional: it is the task's slot in
    the list (1-based), not a permanent handle.

    Example:
        task = Task(id=1, task="Complete the assignment", priority=3, created=1700000000)
    """

    # JSON types must match exactly; unknown keys are an error, not dropped
    model_config = ConfigDict(strict=True, extra="forbid")

    id: int = Field(
        ge=1,
        description="1-based position of the task in the list"
    )

    task: str = Field(
        description="Free-form task description"
    )

    priority: int = Field(
        ge=MIN_PRIORITY,
        le=MAX_PRIORITY,
        description="Priority level, 1 (lowest) to 5 (highest)"
    )

    created: int = Field(
        description="Creation time in seconds since the Unix epoch (UTC)"
    )

    @field_validator("created")
    @classmethod
    def check_representable(cls, value: int) -> int:
        try:
            datetime.fromtimestamp(value, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"created timestamp {value} is out of range") from e
        return value


class TodoList(BaseModel):
    """
    The ordered collection of tasks.

    Insertion order is the canonical order: it is what gets written to
    disk. Sorted views (by priority, by creation time) are separate lists
    built from this one and are never stored back.

    LEARNING NOTE:
    @model_validator(mode="after") runs once all fields are parsed.
    We use it to enforce that ids are exactly 1..N in order. A file that
    breaks this rule fails to load rather than being silently renumbered.
    """

    model_config = ConfigDict(strict=True, extra="forbid")

    todos: list[Task] = Field(
        default_factory=list,
        description="Tasks in insertion order"
    )

    @model_validator(mode="after")
    def check_contiguous_ids(self) -> "TodoList":
        for expected, todo in enumerate(self.todos, start=1):
            if todo.id != expected:
                raise ValueError(
                    f"task ids must run 1..{len(self.todos)} in order; "
                    f"found id {todo.id} at position {expected}"
                )
        return self
