# src/sheet_tasks/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..core.app import TaskListApp
from ..tasks.task_models import TaskValidationError

CommandEmitter = Callable[[str], None]
CommandHandler = Callable[[TaskListApp, list[str], CommandEmitter | None], str]

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "Please enter a task title."


class CommandRegistry:
    """Simple slash-command registry used by the console (/help, /rm, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        app: TaskListApp,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(app, args, emit)

    def build_help(self) -> str:
        lines = [
            "Type a task title and press Enter to add it with the selected status.",
            "Available commands:",
        ]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def add_task(app: TaskListApp, title: str) -> str:
    """Shared by plain input lines and /add."""
    try:
        task = app.add(title)
    except TaskValidationError:
        return VALIDATION_MESSAGE
    return f"Added #{task.id} [{task.status}] {task.title}\n\n{app.view.as_text()}"


def cmd_help(app: TaskListApp, args: list[str], emit: CommandEmitter | None = None) -> str:
    return registry.build_help()


def cmd_add(app: TaskListApp, args: list[str], emit: CommandEmitter | None = None) -> str:
    return add_task(app, " ".join(args))


def cmd_list(app: TaskListApp, args: list[str], emit: CommandEmitter | None = None) -> str:
    app.render()
    return app.view.as_text()


def cmd_status(app: TaskListApp, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /status         -> show selected status and options
    /status <value> -> select status for new tasks
    """
    if not args:
        return f"Selected status: {app.selected_status} (options: {', '.join(app.statuses)})"

    try:
        app.select_status(args[0])
    except ValueError as e:
        return str(e)
    return f"Selected status: {app.selected_status}"


def cmd_rm(app: TaskListApp, args: list[str], emit: CommandEmitter | None = None) -> str:
    if len(args) != 1:
        return "Usage: /rm <id>"

    raw_id = args[0].lstrip("#").rstrip(".")
    if not raw_id.isdigit():
        return "Invalid id."

    task_id = int(raw_id)
    if not app.view.activate_delete(task_id):
        logger.debug("Delete requested for unknown id=%s", task_id)
        return f"Task id {task_id} not found."
    return f"Task {task_id} removed.\n\n{app.view.as_text()}"


def cmd_export(app: TaskListApp, args: list[str], emit: CommandEmitter | None = None) -> str:
    target = Path(" ".join(args)).expanduser() if args else None
    out = app.export_page(target)
    return f"Page written to {out}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <title...>.")
registry.register("list", cmd_list, help_text="Show the task table.", aliases=["ls"])
registry.register("status", cmd_status, help_text="Show or select the status for new tasks: /status <value>.")
registry.register("rm", cmd_rm, help_text="Delete a task by id: /rm <id>.", aliases=["remove", "delete"])
registry.register("export", cmd_export, help_text="Write the task page as HTML: /export [path].")
