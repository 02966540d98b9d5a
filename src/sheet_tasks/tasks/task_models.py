# src/sheet_tasks/tasks/task_models.py

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

# Locale-aware date + time, e.g. "10/18/26, 14:03:05" under the C locale.
CREATED_AT_FORMAT = "%x, %X"


class TaskValidationError(ValueError):
    """Raised before any mutation when user input cannot become a Task."""


class TaskStatus(StrEnum):
    """
    Default selector values.

    The stored status is a plain string: the selector options come from
    settings and may be relabelled without touching stored data.
    """

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    DONE = "done"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    status: str
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "status": self.status,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """
        Decode one persisted record.

        Raises TaskValidationError when the record does not have the
        expected shape; callers decide whether to skip or fail.
        """
        if not isinstance(raw, dict):
            raise TaskValidationError(f"task record must be an object, got {type(raw).__name__}")

        task_id = raw.get("id")
        # bool is an int subclass; true/false are not ids.
        if not isinstance(task_id, int) or isinstance(task_id, bool):
            raise TaskValidationError(f"task id must be an integer, got {task_id!r}")

        title = raw.get("title")
        if not isinstance(title, str) or not title.strip():
            raise TaskValidationError(f"task {task_id} has no title")

        return cls(
            id=task_id,
            title=title,
            status=str(raw.get("status", "") or ""),
            created_at=str(raw.get("createdAt", "") or ""),
        )


def normalize_title(raw: str | None) -> str:
    title = (raw or "").strip()
    if not title:
        raise TaskValidationError("Please enter a task title.")
    return title


def new_task_id() -> int:
    """Millisecond epoch. Two tasks created within the same millisecond collide."""
    return time.time_ns() // 1_000_000


def format_created_at(moment: datetime | None = None) -> str:
    moment = moment or datetime.now().astimezone()
    return moment.strftime(CREATED_AT_FORMAT)
