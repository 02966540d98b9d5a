# src/sheet_tasks/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds the app, starts the event loop thread, then:
- runs the console REPL in the main thread (default), or
- with the console disabled, loads the list, writes the HTML page and exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_app
from ..config import get_settings
from ..connectors.console_connector import print_notice, run_console_loop
from ..connectors.loop_runner import start_loop_in_background
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s (sync=%s)...", settings.app_name, settings.sync_mode)

    app = create_app(settings=settings, notice_listener=print_notice)

    runner = start_loop_in_background(app)
    if runner is None:
        raise SystemExit(1)

    try:
        runner.call(app.load)
        if settings.console_enabled:
            run_console_loop(app, runner)
        else:
            out = runner.call(app.export_page)
            logger.info("Console disabled. Page written to %s", out)
    finally:
        runner.stop()
        runner.join(timeout=15.0)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
