# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from sheet_tasks.logging_setup import _ConsoleNoiseFilter, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


@pytest.fixture()
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    httpx_level = logging.getLogger("httpx").level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
    logging.getLogger("httpx").setLevel(httpx_level)
    logging.captureWarnings(False)


def test_console_filter_keeps_app_logs_and_drops_http_chatter() -> None:
    flt = _ConsoleNoiseFilter()

    assert flt.filter(_record("sheet_tasks.sync.http_post", logging.ERROR))
    assert flt.filter(_record("sheet_tasks.core.app", logging.INFO))
    assert not flt.filter(_record("httpx", logging.INFO))
    assert not flt.filter(_record("py.warnings", logging.WARNING))
    assert flt.filter(_record("asyncio", logging.ERROR))
    assert not flt.filter(_record("sheet_tasks_other", logging.INFO))


def test_setup_logging_writes_log_file(tmp_path: Path, restore_root_logging) -> None:
    setup_logging(log_dir=tmp_path / "logs", console_level=logging.WARNING)

    logging.getLogger("sheet_tasks.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in (tmp_path / "logs" / "sheet_tasks.log").read_text(encoding="utf-8")
    assert logging.getLogger("httpx").level == logging.WARNING
