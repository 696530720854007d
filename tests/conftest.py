"""Shared fixtures for the todo CLI tests."""

import pytest

from todo_cli.config import reset_settings
from todo_cli.models import Task, TodoList


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Run every test in an empty directory with no TODO_CLI_* variables set."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TODO_CLI_STORE_PATH", raising=False)
    monkeypatch.delenv("TODO_CLI_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def store_path(tmp_path):
    """Path for a store file that does not exist yet."""
    return tmp_path / "todos.json"


@pytest.fixture
def sample_list():
    """Three tasks with mixed priorities and creation times."""
    return TodoList(todos=[
        Task(id=1, task="task 1", priority=1, created=1_700_000_300),
        Task(id=2, task="task 2", priority=5, created=1_700_000_100),
        Task(id=3, task="task 3", priority=3, created=1_700_000_200),
    ])
