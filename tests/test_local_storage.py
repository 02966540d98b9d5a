# tests/test_local_storage.py

from __future__ import annotations

import sqlite3
from pathlib import Path

from sheet_tasks.storage.local_storage import LocalStorage
from sheet_tasks.tasks.task_store import TaskStore


def test_set_get_overwrite(tmp_path: Path) -> None:
    storage = LocalStorage(tmp_path / "nested" / "ls.sqlite3")

    assert storage.get_item("tasks") is None
    assert storage.keys() == []

    storage.set_item("tasks", "[]")
    storage.set_item("tasks", '[{"id": 1}]')
    assert storage.get_item("tasks") == '[{"id": 1}]'
    assert storage.keys() == ["tasks"]


def test_values_survive_a_new_instance(tmp_path: Path) -> None:
    db = tmp_path / "ls.sqlite3"
    TaskStore(LocalStorage(db)).add("Buy milk", "pending")

    reloaded = TaskStore(LocalStorage(db)).load()
    assert [t.title for t in reloaded] == ["Buy milk"]


def test_non_utf8_value_loads_as_empty(tmp_path: Path) -> None:
    db = tmp_path / "ls.sqlite3"
    storage = LocalStorage(db)

    conn = sqlite3.connect(str(db))
    try:
        conn.execute("INSERT INTO kv(key, value) VALUES ('tasks', CAST(X'5BFFFE5D' AS TEXT))")
        conn.commit()
    finally:
        conn.close()

    store = TaskStore(storage)
    assert store.load() == []

    # The next mutation overwrites the unreadable bytes.
    store.add("fresh start", "pending")
    assert [t.title for t in TaskStore(LocalStorage(db)).load()] == ["fresh start"]
