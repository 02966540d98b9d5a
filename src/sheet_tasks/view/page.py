# src/sheet_tasks/view/page.py

from __future__ import annotations

import html
from collections.abc import Sequence
from string import Template

from .table_view import COLUMNS

_PAGE = Template(
    """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>$app_title</title>
<style>
  body { font-family: system-ui, sans-serif; margin: 2rem; }
  table { border-collapse: collapse; width: 100%; margin-top: 1rem; }
  th, td { border-bottom: 1px solid #ddd; padding: .4rem .6rem; text-align: left; }
  .empty-row { color: #888; text-align: center; }
  #saveMessage { visibility: hidden; }
  #saveMessage.visible { visibility: visible; }
  #saveMessage.error { color: #b00020; }
</style>
</head>
<body>
<h1>$app_title</h1>
<div class="task-form">
  <input id="taskTitle" type="text" placeholder="Task title">
  <select id="taskStatus">
$options
  </select>
  <button id="addTaskButton" type="button">Add Task</button>
  <p id="saveMessage" class="$message_class">$message</p>
</div>
<table>
  <thead><tr>$headers</tr></thead>
  <tbody id="taskTableBody">
$rows
  </tbody>
</table>
</body>
</html>
"""
)


def render_page(
    *,
    body_markup: str,
    statuses: Sequence[str],
    selected_status: str | None = None,
    app_title: str = "Task List",
    message: str = "",
    message_visible: bool = False,
    message_is_error: bool = False,
) -> str:
    """Standalone HTML document around an already-rendered table body."""
    options = "\n".join(
        '    <option value="{v}"{sel}>{v}</option>'.format(
            v=html.escape(s, quote=True),
            sel=" selected" if s == selected_status else "",
        )
        for s in statuses
    )
    headers = "".join(f"<th>{html.escape(c)}</th>" for c in COLUMNS)

    classes = []
    if message_visible:
        classes.append("visible")
    if message_is_error:
        classes.append("error")

    return _PAGE.substitute(
        app_title=html.escape(app_title),
        options=options,
        headers=headers,
        rows=body_markup,
        message=html.escape(message),
        message_class=" ".join(classes),
    )
