# tests/test_notice.py

from __future__ import annotations

import asyncio

import pytest

from sheet_tasks.core.notice import NoticeState, TransientNotice


@pytest.mark.asyncio
async def test_notice_auto_hides_after_delay() -> None:
    seen: list[NoticeState] = []
    notice = TransientNotice(delay_seconds=0.02, listener=seen.append)

    notice.show("Saved to Sheet")
    assert notice.visible
    assert notice.text == "Saved to Sheet"
    assert not notice.is_error

    await asyncio.sleep(0.08)
    assert not notice.visible
    assert [s.visible for s in seen] == [True, False]


@pytest.mark.asyncio
async def test_overlapping_show_resets_timer_and_text() -> None:
    notice = TransientNotice(delay_seconds=0.1)

    notice.show("first")
    await asyncio.sleep(0.06)
    notice.show("second", is_error=True)
    await asyncio.sleep(0.06)

    # The first timer would have fired by now; the reset keeps it visible.
    assert notice.visible
    assert notice.text == "second"
    assert notice.is_error

    await asyncio.sleep(0.1)
    assert not notice.visible


def test_show_without_loop_stays_visible_until_hidden() -> None:
    notice = TransientNotice(delay_seconds=0.01)
    notice.show("no loop")
    assert notice.visible

    notice.hide()
    assert not notice.visible


def test_listener_errors_do_not_escape() -> None:
    def boom(_state: NoticeState) -> None:
        raise RuntimeError("listener failed")

    notice = TransientNotice(listener=boom)
    notice.show("still works")
    assert notice.visible
