"""
Main CLI entry point using Typer.

LEARNING NOTES:
- Typer turns type hints on command functions into CLI arguments
- The Annotated[] syntax adds metadata (help text, option names)
- Rich provides the colored messages and the table view

This module defines the command-line interface:
- `todo add TASK PRIORITY` / `remove ID` / `edit TASK ID` / `clear` - change the list
- `todo list` / `prioritize` / `schedule` - show the list in some order
- `todo help`, `todo config`, `todo version` - utility commands

Every command runs the same pipeline:
1. Load the list from the store file (or start empty)
2. Apply one operation from store.py
3. Save, but only if the operation changed something
4. Print a report
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Callable, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from . import __version__
from .config import get_settings
from .formatters import build_table, format_as_json, format_as_text
from .models import MAX_PRIORITY, MIN_PRIORITY, Task, TodoList
from .storage import StorageError, load_todo_list, save_todo_list
from .store import Change, add_todo, by_creation, by_priority, clear_todos, edit_todo, remove_todo


logger = logging.getLogger(__name__)


USAGE = f"""\
simple command-line todo list

USAGE:
    todo [--store PATH] <command>

COMMANDS:
    add <task> <priority>     Add a task, priority {MIN_PRIORITY}-{MAX_PRIORITY} inclusive
    remove <id>               Remove the task with the given id
    list                      List the tasks
    clear                     Clear all the tasks
    prioritize                List the tasks by priority (highest to lowest)
    schedule                  List the tasks by the date they were created (UTC)
    edit <task> <id>          Change the description of the task with the given id
    help                      Print this help
"""


# ============================================================================
# Create the Typer App
# ============================================================================

app = typer.Typer(
    name="todo",
    help="Simple command-line todo list with priorities.",
    add_completion=False,
    no_args_is_help=True,
)

# Reports go to stdout, diagnostics to stderr
console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Output formats for the list views."""
    TEXT = "text"
    TABLE = "table"
    JSON = "json"


# ============================================================================
# Pipeline Helpers
# ============================================================================

def _fail(error: Exception) -> None:
    """Print a diagnostic and abort the command with exit status 1."""
    err_console.print(f"[red bold]Error:[/red bold] {escape(str(error))}", soft_wrap=True)
    raise typer.Exit(1)


def _load(path: Path) -> TodoList:
    try:
        return load_todo_list(path)
    except StorageError as e:
        _fail(e)


def _apply(ctx: typer.Context, operation: Callable[..., Change], *args) -> None:
    """Load the store, run one operation on it, save if it changed, report."""
    path: Path = ctx.obj
    change = operation(_load(path), *args)

    if change.changed:
        try:
            save_todo_list(change.todo_list, path)
        except StorageError as e:
            _fail(e)

    if change.rejected:
        console.print(f"[yellow]{escape(change.message)}[/yellow]", soft_wrap=True, highlight=False)
    else:
        console.print(f"[green]{escape(change.message)}[/green]", soft_wrap=True, highlight=False)


def _show(ctx: typer.Context, view: Callable[[TodoList], list[Task]], output_format: OutputFormat, title: str) -> None:
    """Print a view of the store. Never saves."""
    tasks = view(_load(ctx.obj))

    if output_format == OutputFormat.JSON:
        console.out(format_as_json(tasks), highlight=False)
    elif output_format == OutputFormat.TABLE and tasks:
        console.print(build_table(tasks, title=title))
    else:
        console.out(format_as_text(tasks), highlight=False)


# Lets negative numbers such as `add x -1` reach the command as arguments
NUMERIC_ARGS = {"ignore_unknown_options": True}

FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", help="Output format.")
]


# ============================================================================
# Global Options
# ============================================================================

@app.callback()
def root(
    ctx: typer.Context,
    store: Annotated[
        Optional[Path],
        typer.Option(
            "--store",
            help="Todo list file to use instead of TODO_CLI_STORE_PATH (default: ./todos.json)."
        )
    ] = None,
) -> None:
    """Simple command-line todo list with priorities."""
    try:
        settings = get_settings()
    except ValidationError as e:
        err_console.print(f"[red bold]Configuration Error:[/red bold] {escape(str(e))}")
        raise typer.Exit(1)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    ctx.obj = store.expanduser() if store is not None else settings.store_path
    logger.debug("Using store %s", ctx.obj)


# ============================================================================
# Commands That Change the List
# ============================================================================

@app.command(context_settings=NUMERIC_ARGS)
def add(
    ctx: typer.Context,
    task: Annotated[str, typer.Argument(help="Task description.")],
    priority: Annotated[
        int,
        typer.Argument(help=f"Priority, {MIN_PRIORITY} (lowest) to {MAX_PRIORITY} (highest).")
    ],
) -> None:
    """Add a task with a priority."""
    _apply(ctx, add_todo, task, priority)


@app.command(context_settings=NUMERIC_ARGS)
def remove(
    ctx: typer.Context,
    todo_id: Annotated[int, typer.Argument(metavar="ID", help="Id of the task to remove.")],
) -> None:
    """Remove a task by id. The remaining tasks are renumbered."""
    _apply(ctx, remove_todo, todo_id)


@app.command(context_settings=NUMERIC_ARGS)
def edit(
    ctx: typer.Context,
    task: Annotated[str, typer.Argument(help="New task description.")],
    todo_id: Annotated[int, typer.Argument(metavar="ID", help="Id of the task to edit.")],
) -> None:
    """Change the description of a task."""
    _apply(ctx, edit_todo, task, todo_id)


@app.command()
def clear(ctx: typer.Context) -> None:
    """Remove every task."""
    _apply(ctx, clear_todos)


# ============================================================================
# Views
# ============================================================================

@app.command(name="list")
def list_todos(ctx: typer.Context, output_format: FormatOption = OutputFormat.TEXT) -> None:
    """List the tasks in the order they were added."""
    _show(ctx, lambda todo_list: list(todo_list.todos), output_format, "Tasks")


@app.command()
def prioritize(ctx: typer.Context, output_format: FormatOption = OutputFormat.TEXT) -> None:
    """List the tasks by priority, highest first."""
    _show(ctx, by_priority, output_format, "Tasks by priority")


@app.command()
def schedule(ctx: typer.Context, output_format: FormatOption = OutputFormat.TEXT) -> None:
    """List the tasks by creation time, earliest first."""
    _show(ctx, by_creation, output_format, "Tasks by creation time")


# ============================================================================
# Utility Commands
# ============================================================================

@app.command(name="help")
def show_help() -> None:
    """Print usage for every command."""
    console.out(USAGE, highlight=False)


@app.command()
def config(ctx: typer.Context) -> None:
    """Show current configuration."""
    settings = get_settings()
    console.print(Panel(
        f"[bold]Store:[/bold] {escape(str(ctx.obj))}\n"
        f"[bold]Log Level:[/bold] {settings.log_level}",
        title="Current Configuration",
        border_style="green"
    ))


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]todo[/bold] version {__version__}")


if __name__ == "__main__":
    app()
