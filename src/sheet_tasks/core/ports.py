# src/sheet_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The core depends on Protocols instead of concrete implementations.
This keeps storage/view/sync transports swappable and makes testing easier.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..sync.sync_models import SyncResult
    from ..tasks.task_models import Task

DeleteCallback = Callable[[int], None]


class KeyValueStorage(Protocol):
    """Persistent string key/value storage (the local-storage equivalent)."""

    def get_item(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: str) -> None: ...


class TaskSyncer(Protocol):
    """
    Best-effort mirror of a newly created task to an external sheet.

    Implementations must not raise for transport problems: they log and
    return a failed SyncResult instead.
    """

    async def sync(self, task: Task) -> SyncResult: ...


class TaskView(Protocol):
    """
    Render + bind contract: project a task list and route delete intents back.

    markup/as_text are the two surfaces the app and the console read back;
    activate_delete is a delete-control click by id.
    """

    def bind(self, on_delete: DeleteCallback) -> None: ...
    def render(self, tasks: Sequence[Task]) -> None: ...
    def activate_delete(self, task_id: int) -> bool: ...
    def as_text(self) -> str: ...

    @property
    def markup(self) -> str: ...
