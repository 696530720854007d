"""Tests for loading and saving the store file."""

import json
from pathlib import Path

import pytest

from todo_cli.models import Task, TodoList
from todo_cli.storage import StorageError, load_todo_list, save_todo_list
from todo_cli.store import add_todo, remove_todo


class TestLoad:
    """Test suite for load_todo_list."""

    def test_missing_file_gives_empty_list(self, store_path):
        assert not store_path.exists()
        assert load_todo_list(store_path).todos == []
        assert not store_path.exists()

    def test_load_existing_file(self, store_path):
        store_path.write_text(json.dumps({
            "todos": [
                {"id": 1, "task": "Complete the assignment", "priority": 3, "created": 1_700_000_000},
                {"id": 2, "task": "Call mom", "priority": 5, "created": 1_700_000_060},
            ]
        }))
        todo_list = load_todo_list(store_path)
        assert [t.task for t in todo_list.todos] == ["Complete the assignment", "Call mom"]
        assert todo_list.todos[1].priority == 5

    @pytest.mark.parametrize("contents", [
        "",
        "not json",
        "{\"todos\": [",
        "[]",
        "{\"todos\": [{\"id\": 1, \"task\": \"x\"}]}",
    ])
    def test_corrupt_file_is_fatal(self, store_path, contents):
        store_path.write_text(contents)
        with pytest.raises(StorageError, match="Unable to parse"):
            load_todo_list(store_path)

    def test_out_of_range_priority_is_fatal(self, store_path):
        store_path.write_text(json.dumps({
            "todos": [{"id": 1, "task": "x", "priority": 9, "created": 0}]
        }))
        with pytest.raises(StorageError):
            load_todo_list(store_path)

    def test_gap_in_ids_is_fatal(self, store_path):
        store_path.write_text(json.dumps({
            "todos": [
                {"id": 1, "task": "a", "priority": 1, "created": 0},
                {"id": 3, "task": "b", "priority": 1, "created": 0},
            ]
        }))
        with pytest.raises(StorageError):
            load_todo_list(store_path)

    def test_unreadable_path_is_fatal(self, tmp_path):
        # A directory exists but can't be read as a file
        with pytest.raises(StorageError, match="Unable to read"):
            load_todo_list(tmp_path)

    def test_out_of_range_timestamp_is_fatal(self, store_path):
        store_path.write_text(json.dumps({
            "todos": [{"id": 1, "task": "x", "priority": 1, "created": 10**12}]
        }))
        with pytest.raises(StorageError, match="Unable to parse"):
            load_todo_list(store_path)

    def test_existence_check_failure_is_fatal(self, store_path, monkeypatch):
        def denied(self, *args, **kwargs):
            raise PermissionError("Permission denied")

        monkeypatch.setattr(Path, "exists", denied)
        with pytest.raises(StorageError, match="Unable to read"):
            load_todo_list(store_path)

    def test_binary_file_is_fatal(self, store_path):
        store_path.write_bytes(b"\xff\xfe\x00garbage")
        with pytest.raises(StorageError):
            load_todo_list(store_path)


class TestSave:
    """Test suite for save_todo_list."""

    def test_save_creates_file(self, store_path, sample_list):
        assert save_todo_list(sample_list, store_path) == store_path
        assert store_path.exists()

    def test_save_writes_readable_json(self, store_path, sample_list):
        save_todo_list(sample_list, store_path)
        data = json.loads(store_path.read_text())
        assert data["todos"][1] == {
            "id": 2,
            "task": "task 2",
            "priority": 5,
            "created": 1_700_000_100,
        }
        # pretty-printed for humans
        assert "\n  " in store_path.read_text()

    def test_save_creates_parent_directories(self, tmp_path, sample_list):
        path = tmp_path / "nested" / "dir" / "todos.json"
        save_todo_list(sample_list, path)
        assert path.exists()

    def test_save_overwrites_whole_file(self, store_path, sample_list):
        save_todo_list(sample_list, store_path)
        save_todo_list(TodoList(), store_path)
        assert json.loads(store_path.read_text()) == {"todos": []}

    def test_save_to_directory_is_fatal(self, tmp_path, sample_list):
        with pytest.raises(StorageError, match="Unable to write"):
            save_todo_list(sample_list, tmp_path)


class TestRoundTrip:
    """Saving then loading gives back the same list."""

    def test_round_trip(self, store_path):
        todo_list = TodoList()
        for i, (task, priority) in enumerate([("a", 1), ("b", 5), ("ünïcode ✓", 3)]):
            todo_list = add_todo(todo_list, task, priority, now=1_700_000_000 + i).todo_list

        save_todo_list(todo_list, store_path)
        assert load_todo_list(store_path) == todo_list

    def test_round_trip_after_remove(self, store_path, sample_list):
        todo_list = remove_todo(sample_list, 2).todo_list
        save_todo_list(todo_list, store_path)
        loaded = load_todo_list(store_path)
        assert [t.id for t in loaded.todos] == [1, 2]
        assert loaded.todos == todo_list.todos

    def test_empty_round_trip(self, store_path):
        save_todo_list(TodoList(), store_path)
        assert load_todo_list(store_path) == TodoList()

    def test_loaded_tasks_keep_timestamps(self, store_path):
        todo_list = TodoList(todos=[Task(id=1, task="x", priority=2, created=1_234_567_890)])
        save_todo_list(todo_list, store_path)
        assert load_todo_list(store_path).todos[0].created == 1_234_567_890
