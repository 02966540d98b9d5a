# src/sheet_tasks/core/notice.py

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass

logger = logging.getLogger(__name__)

SAVED_TEXT = "Saved to Sheet"
FAILED_TEXT = "Could not save to Sheet. Please try again."


@dataclass(frozen=True, slots=True)
class NoticeState:
    text: str
    visible: bool
    is_error: bool


NoticeListener = Callable[[NoticeState], None]


class TransientNotice:
    """
    Short-lived status message: hidden -> visible -> hidden.

    show() replaces the current text and restarts the hide timer; there is no
    queue, so overlapping results simply overwrite each other.
    The timer runs on the event loop; without a running loop the notice
    stays visible until hide() is called.
    """

    def __init__(self, *, delay_seconds: float = 1.8, listener: NoticeListener | None = None) -> None:
        self.delay_seconds = max(0.0, float(delay_seconds))
        self.listener = listener
        self._text = ""
        self._visible = False
        self._is_error = False
        self._timer: asyncio.TimerHandle | None = None

    @property
    def state(self) -> NoticeState:
        return NoticeState(text=self._text, visible=self._visible, is_error=self._is_error)

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_error(self) -> bool:
        return self._is_error

    def show(self, text: str, *, is_error: bool = False) -> None:
        self._cancel_timer()
        self._text = text
        self._is_error = is_error
        self._visible = True
        self._notify()

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running loop; notice %r will not auto-hide.", text)
            return
        self._timer = loop.call_later(self.delay_seconds, self.hide)

    def hide(self) -> None:
        self._cancel_timer()
        if not self._visible:
            return
        self._visible = False
        self._notify()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _notify(self) -> None:
        if self.listener is None:
            return
        try:
            self.listener(self.state)
        except Exception:
            logger.exception("Notice listener failed.")
