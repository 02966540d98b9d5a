# src/sheet_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
from datetime import datetime

from ..cli.commands import add_task, registry as command_registry
from ..core.app import TaskListApp
from ..core.notice import NoticeState
from .loop_runner import LoopRunner

logger = logging.getLogger(__name__)

PROMPT = "task> "


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}", flush=True)


def print_notice(state: NoticeState) -> None:
    """Notice listener for the console: only the visible transition is printed."""
    if not state.visible:
        return
    tag = "[SHEET][ERROR]" if state.is_error else "[SHEET]"
    _print_ts(f"{tag} {state.text}")


def handle_line(app: TaskListApp, line: str) -> str | None:
    """
    One console input line.

    Slash commands go to the registry; anything else is a task title
    (the Enter-key path of the add form).
    """
    user_input = line.strip()
    if not user_input:
        return None

    try:
        cmd_response = command_registry.handle(app, user_input, emit=_print_ts)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    if cmd_response is not None:
        return cmd_response

    try:
        return add_task(app, user_input)
    except Exception:
        logger.exception("Add task crashed.")
        return "Internal error while adding a task."


def run_console_loop(app: TaskListApp, runner: LoopRunner) -> None:
    """
    Interactive REPL in the main thread.

    Each line is handled on the runner's event loop, which keeps driving
    sheet syncs and notice timers while input() blocks here.
    """
    logger.info("Console connector started (status=%s).", app.selected_status)
    _print_ts("[CONSOLE] Type a task title to add it. Use /help for commands. Use /exit to quit.\n")
    print(runner.call(app.view.as_text), flush=True)

    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if line.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            response = runner.call(handle_line, app, line)
        except Exception:
            logger.exception("Console line handling failed.")
            response = "Internal error while handling input."

        if response is not None:
            _print_ts(response)

    logger.info("Console connector finished.")
