# src/sheet_tasks/connectors/loop_runner.py

from __future__ import annotations

import asyncio
import contextlib
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from ..core.app import TaskListApp

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class LoopRunner:
    """
    Event loop living in a background thread.

    Every app call is marshalled onto this loop, so the task list, the
    storage and the notice are only ever touched from one thread while the
    console blocks on input() in the main thread.
    """

    thread: threading.Thread
    loop: asyncio.AbstractEventLoop
    stop_event: asyncio.Event

    def call(self, fn: Callable[..., T], *args: Any, timeout: float | None = 30.0) -> T:
        async def _invoke() -> T:
            return fn(*args)

        return asyncio.run_coroutine_threadsafe(_invoke(), self.loop).result(timeout)

    def stop(self) -> None:
        try:
            self.loop.call_soon_threadsafe(self.stop_event.set)
        except Exception:
            logger.debug("Failed to signal loop stop.", exc_info=True)

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


async def _serve(app: TaskListApp, stop_event: asyncio.Event, drain_timeout: float) -> None:
    await stop_event.wait()
    if app.pending_syncs:
        logger.info("Waiting for %d sheet sync(s) to finish...", app.pending_syncs)
        try:
            await asyncio.wait_for(app.drain(), timeout=drain_timeout)
        except asyncio.TimeoutError:
            logger.warning("Sheet sync still running at shutdown; abandoning it.")


def start_loop_in_background(app: TaskListApp, *, drain_timeout: float = 10.0) -> LoopRunner | None:
    """
    Start the app event loop in a background thread (so console REPL can run in parallel).

    Why a thread:
    - console REPL is blocking (input()).
    - sheet sync and notice timers are async and want a live event loop.
    """
    ready = threading.Event()
    holder: dict[str, object] = {}

    def runner() -> None:
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        stop_event = asyncio.Event()

        holder["loop"] = loop
        holder["stop_event"] = stop_event
        ready.set()

        try:
            loop.run_until_complete(_serve(app, stop_event, drain_timeout))
        finally:
            with contextlib.suppress(Exception):
                loop.stop()
            with contextlib.suppress(Exception):
                loop.close()

    t = threading.Thread(target=runner, name="sheet-tasks-loop", daemon=True)
    t.start()

    ready.wait(timeout=5.0)
    loop = holder.get("loop")
    stop_event = holder.get("stop_event")

    if not isinstance(loop, asyncio.AbstractEventLoop) or not isinstance(stop_event, asyncio.Event):
        logger.error("Event loop thread did not initialize properly.")
        return None

    logger.info("Event loop thread started.")
    return LoopRunner(thread=t, loop=loop, stop_event=stop_event)
