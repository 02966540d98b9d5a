# src/sheet_tasks/view/table_view.py

"""
Task table view.

Pure projection of the task list onto table rows, plus the delete wiring:
the view never keeps tasks of its own, only the rows of the last render and
the callback that turns a delete-control activation back into an id.
"""

from __future__ import annotations

import html
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from ..core.ports import DeleteCallback
from ..tasks.task_models import Task

logger = logging.getLogger(__name__)

COLUMNS: tuple[str, ...] = ("Title", "Status", "Created", "")
EMPTY_MESSAGE = "No tasks yet. Add one above."
DELETE_LABEL = "Delete"


@dataclass(frozen=True, slots=True)
class RenderedRow:
    """
    One rendered table row.

    cells: display text per column (unescaped, for text surfaces)
    html:  the <tr> markup with every user-supplied value escaped
    task_id: id carried by the row's delete control (None for the placeholder)
    """

    cells: tuple[str, ...]
    html: str
    task_id: int | None = None

    @property
    def is_placeholder(self) -> bool:
        return self.task_id is None


def _esc(value: object) -> str:
    return html.escape(str(value), quote=True)


def _task_row(task: Task) -> RenderedRow:
    markup = (
        "<tr>"
        f"<td>{_esc(task.title)}</td>"
        f"<td>{_esc(task.status)}</td>"
        f"<td>{_esc(task.created_at)}</td>"
        f'<td><button class="delete-btn" data-id="{task.id}">{DELETE_LABEL}</button></td>'
        "</tr>"
    )
    return RenderedRow(
        cells=(task.title, task.status, task.created_at, DELETE_LABEL),
        html=markup,
        task_id=task.id,
    )


def _placeholder_row() -> RenderedRow:
    markup = f'<tr><td colspan="{len(COLUMNS)}" class="empty-row">{_esc(EMPTY_MESSAGE)}</td></tr>'
    return RenderedRow(cells=(EMPTY_MESSAGE,), html=markup)


class TableView:
    def __init__(self) -> None:
        self._rows: list[RenderedRow] = []
        self._on_delete: DeleteCallback | None = None

    def bind(self, on_delete: DeleteCallback) -> None:
        self._on_delete = on_delete

    def render(self, tasks: Sequence[Task]) -> None:
        # Full redraw: previous rows are dropped, never patched.
        if not tasks:
            self._rows = [_placeholder_row()]
        else:
            self._rows = [_task_row(t) for t in tasks]
        logger.debug("Rendered %d rows (tasks=%d)", len(self._rows), len(tasks))

    @property
    def rows(self) -> tuple[RenderedRow, ...]:
        return tuple(self._rows)

    @property
    def task_rows(self) -> tuple[RenderedRow, ...]:
        return tuple(r for r in self._rows if not r.is_placeholder)

    @property
    def markup(self) -> str:
        """Inner HTML of the table body."""
        return "\n".join(r.html for r in self._rows)

    def activate_delete(self, task_id: int) -> bool:
        """
        Equivalent of clicking the delete control tagged with task_id.
        Returns False when no rendered row carries that id.
        """
        if not any(r.task_id == task_id for r in self._rows):
            return False
        if self._on_delete is None:
            logger.warning("Delete control activated before a handler was bound (id=%s)", task_id)
            return False
        self._on_delete(task_id)
        return True

    def as_text(self) -> str:
        """Fixed-width plain-text table for console surfaces."""
        if not self.task_rows:
            return EMPTY_MESSAGE

        header = ("ID", *COLUMNS[:3])
        body = [(str(r.task_id), *r.cells[:3]) for r in self.task_rows]
        widths = [max(len(line[i]) for line in [header, *body]) for i in range(len(header))]

        def fmt(line: Sequence[str]) -> str:
            return "  ".join(cell.ljust(widths[i]) for i, cell in enumerate(line)).rstrip()

        lines = [fmt(header), "  ".join("-" * w for w in widths)]
        lines.extend(fmt(line) for line in body)
        return "\n".join(lines)
