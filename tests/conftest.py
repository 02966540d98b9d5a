# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from sheet_tasks.core.app import TaskListApp
from sheet_tasks.core.notice import NoticeState, TransientNotice
from sheet_tasks.tasks.task_store import TaskStore
from sheet_tasks.view.table_view import TableView

from .fakes import MemoryStorage, RecordingSyncer


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap and the sync factory.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the process environment.
    """
    return SimpleNamespace(
        app_name="sheet-tasks-test",
        data_dir=tmp_path / "data",
        storage_path=tmp_path / "data" / "local_storage.sqlite3",
        storage_key="tasks",
        statuses=["pending", "in-progress", "done"],
        default_status="pending",
        sync_mode="off",
        sync_url=None,
        sync_timeout_seconds=5.0,
        form_url=None,
        form_fields={"title": "entry.1", "status": "entry.2", "created_at": "entry.3"},
        form_timeout_seconds=0.2,
        notice_seconds=0.05,
        export_path=tmp_path / "data" / "tasks.html",
    )


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def store(storage: MemoryStorage) -> TaskStore:
    return TaskStore(storage, key="tasks")


@pytest.fixture()
def syncer() -> RecordingSyncer:
    return RecordingSyncer()


@pytest.fixture()
def notices() -> list[NoticeState]:
    return []


@pytest.fixture()
def app(store: TaskStore, syncer: RecordingSyncer, notices: list[NoticeState]) -> TaskListApp:
    """
    TaskListApp wired with deterministic fakes.

    Storage is in-memory; the syncer records calls; notice transitions are
    collected in `notices`.
    """
    app = TaskListApp(
        store=store,
        view=TableView(),
        notice=TransientNotice(delay_seconds=0.05, listener=notices.append),
        syncer=syncer,
        statuses=["pending", "in-progress", "done"],
        default_status="pending",
    )
    app.load()
    return app


@pytest.fixture()
def offline_app(store: TaskStore, tmp_path: Path) -> TaskListApp:
    """App with sheet sync disabled (usable without an event loop)."""
    app = TaskListApp(
        store=store,
        view=TableView(),
        notice=TransientNotice(delay_seconds=0.05),
        syncer=None,
        statuses=["pending", "in-progress", "done"],
        export_path=tmp_path / "page.html",
    )
    app.load()
    return app
