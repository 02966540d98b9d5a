# src/sheet_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires concrete implementations (storage, store, view, notice, syncer)
  into a TaskListApp.
"""

from __future__ import annotations

import logging

import httpx

from ..config import get_settings
from ..core.app import TaskListApp
from ..core.notice import NoticeListener, TransientNotice
from ..storage.local_storage import LocalStorage
from ..sync.factory import build_syncer
from ..tasks.task_store import TaskStore
from ..view.table_view import TableView

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.storage_path.parent.mkdir(parents=True, exist_ok=True)


def create_app(
    *,
    settings=None,
    notice_listener: NoticeListener | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> TaskListApp:
    """
    Create a TaskListApp from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = TaskStore(LocalStorage(settings.storage_path), key=settings.storage_key)
    app = TaskListApp(
        store=store,
        view=TableView(),
        notice=TransientNotice(delay_seconds=settings.notice_seconds, listener=notice_listener),
        syncer=build_syncer(settings, transport=transport),
        statuses=settings.statuses,
        default_status=settings.default_status,
        app_title=settings.app_name,
        export_path=settings.export_path,
    )
    logger.debug("App wired: storage=%s key=%s sync_mode=%s", settings.storage_path, settings.storage_key, settings.sync_mode)
    return app
