# src/sheet_tasks/tasks/task_store.py

from __future__ import annotations

import json
import logging
from collections.abc import Sequence

from ..core.ports import KeyValueStorage
from .task_models import Task, TaskStatus, format_created_at, new_task_id, normalize_title

logger = logging.getLogger(__name__)


class TaskStore:
    """
    Owner of the task list.

    The whole list is the unit of persistence: every mutation re-serializes
    it and overwrites the single value stored under `key`.

    Corrupted stored data is treated as "no data" (the list resets to empty);
    keeping the UI usable wins over preserving unparseable bytes.
    """

    def __init__(self, storage: KeyValueStorage, *, key: str = "tasks") -> None:
        self._storage = storage
        self._key = key
        self._tasks: list[Task] = []

    @property
    def key(self) -> str:
        return self._key

    @property
    def tasks(self) -> tuple[Task, ...]:
        return tuple(self._tasks)

    def count(self) -> int:
        return len(self._tasks)

    # ---- persistence ----

    def load(self) -> list[Task]:
        try:
            raw = self._storage.get_item(self._key)
        except Exception:
            # e.g. sqlite refusing to decode a non-UTF-8 value
            logger.warning("Could not read stored value under %r; starting fresh.", self._key, exc_info=True)
            self._tasks = []
            return []

        if not raw:
            self._tasks = []
            return []

        try:
            data = json.loads(raw)
        except (ValueError, RecursionError):
            logger.warning("Stored value under %r is not valid JSON; starting fresh.", self._key)
            self._tasks = []
            return []

        if not isinstance(data, list):
            logger.warning(
                "Stored value under %r is %s, not a list; starting fresh.",
                self._key,
                type(data).__name__,
            )
            self._tasks = []
            return []

        loaded: list[Task] = []
        for item in data:
            try:
                loaded.append(Task.from_dict(item))
            except ValueError as e:
                logger.warning("Skipping malformed task record: %s", e)

        self._tasks = loaded
        logger.debug("Loaded %d tasks from key=%s", len(loaded), self._key)
        return list(loaded)

    def save(self, tasks: Sequence[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False)
        self._storage.set_item(self._key, payload)
        self._tasks = list(tasks)

    # ---- mutations ----

    def add(self, title: str, status: str = TaskStatus.PENDING) -> Task:
        clean_title = normalize_title(title)

        task = Task(
            id=new_task_id(),
            title=clean_title,
            status=str(status),
            created_at=format_created_at(),
        )
        self.save([*self._tasks, task])
        logger.info("Task added id=%s status=%s", task.id, task.status)
        return task

    def remove(self, task_id: int) -> None:
        kept = [t for t in self._tasks if t.id != task_id]
        if len(kept) == len(self._tasks):
            logger.debug("remove: task id=%s not found", task_id)
        else:
            logger.info("Task removed id=%s", task_id)
        self.save(kept)
