# src/sheet_tasks/core/app.py

"""
Application controller.

Wires Store, View, Sync Adapter and the transient notice together and
exposes the contract consumed by UI glue: load, add, remove, render, sync.

Ordering on add: persist -> re-render -> schedule sync. The sync runs as a
background asyncio task; the caller never awaits it and its failure never
touches local state.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from ..sync.sync_models import SyncResult
from ..tasks.task_models import Task, TaskStatus
from ..tasks.task_store import TaskStore
from ..view.page import render_page
from .notice import FAILED_TEXT, SAVED_TEXT, TransientNotice
from .ports import TaskSyncer, TaskView

logger = logging.getLogger(__name__)


class TaskListApp:
    def __init__(
        self,
        *,
        store: TaskStore,
        view: TaskView,
        notice: TransientNotice,
        syncer: TaskSyncer | None = None,
        statuses: Sequence[str] = tuple(s.value for s in TaskStatus),
        default_status: str | None = None,
        app_title: str = "Task List",
        export_path: str | Path = "tasks.html",
    ) -> None:
        if not statuses:
            raise ValueError("at least one status is required")
        self.store = store
        self.view = view
        self.notice = notice
        self.syncer = syncer
        self.statuses = list(statuses)
        self.selected_status = default_status if default_status in self.statuses else self.statuses[0]
        self.app_title = app_title
        self.export_path = Path(export_path)
        self._pending: set[asyncio.Task[SyncResult]] = set()

        self.view.bind(self.remove)

    # ---- contract ----

    def load(self) -> list[Task]:
        tasks = self.store.load()
        self.render()
        logger.info("Task list loaded: %d tasks", len(tasks))
        return tasks

    def render(self) -> None:
        self.view.render(self.store.tasks)

    def add(self, title: str, status: str | None = None) -> Task:
        """
        Create, persist and render a task, then start the sheet sync.
        Raises TaskValidationError (nothing changes) for a blank title.
        """
        task = self.store.add(title, status or self.selected_status)
        self.render()
        self.sync(task)
        return task

    def remove(self, task_id: int) -> None:
        self.store.remove(task_id)
        self.render()

    def sync(self, task: Task) -> asyncio.Task[SyncResult] | None:
        if self.syncer is None:
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("No running event loop; sheet sync skipped for task %s", task.id)
            return None

        job = loop.create_task(self._run_sync(self.syncer, task))
        self._pending.add(job)
        job.add_done_callback(self._pending.discard)
        return job

    # ---- UI helpers ----

    def select_status(self, status: str) -> None:
        if status not in self.statuses:
            raise ValueError(f"unknown status {status!r}; choose one of: {', '.join(self.statuses)}")
        self.selected_status = status

    def page_html(self) -> str:
        state = self.notice.state
        return render_page(
            body_markup=self.view.markup,
            statuses=self.statuses,
            selected_status=self.selected_status,
            app_title=self.app_title,
            message=state.text,
            message_visible=state.visible,
            message_is_error=state.is_error,
        )

    def export_page(self, path: str | Path | None = None) -> Path:
        out = self.export_path if path is None else Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(self.page_html(), encoding="utf-8")
        logger.info("Page exported to %s", out)
        return out

    # ---- background sync ----

    @property
    def pending_syncs(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for in-flight sync attempts (shutdown / tests)."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def _run_sync(self, syncer: TaskSyncer, task: Task) -> SyncResult:
        try:
            result = await syncer.sync(task)
        except Exception:
            logger.exception("Sheet sync crashed task_id=%s", task.id)
            result = SyncResult(ok=False, detail="internal error")

        if result.ok:
            self.notice.show(SAVED_TEXT)
        else:
            self.notice.show(FAILED_TEXT, is_error=True)
        return result
