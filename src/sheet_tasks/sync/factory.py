# src/sheet_tasks/sync/factory.py

from __future__ import annotations

import logging

import httpx

from ..core.ports import TaskSyncer
from .form_submit import FormSubmitSyncer
from .http_post import HttpPostSyncer

logger = logging.getLogger(__name__)


def build_syncer(settings, *, transport: httpx.AsyncBaseTransport | None = None) -> TaskSyncer | None:
    """
    Pick the sync strategy from settings.sync_mode.

    Returns None when sync is off or the chosen mode has no endpoint, so the
    app simply skips mirroring.
    """
    mode = str(getattr(settings, "sync_mode", "off")).lower()

    if mode == "post":
        url = getattr(settings, "sync_url", None)
        if not url:
            logger.warning("Sync mode 'post' has no SHEET_TASKS_SYNC_URL; sheet sync disabled.")
            return None
        return HttpPostSyncer(
            url,
            timeout_seconds=getattr(settings, "sync_timeout_seconds", 15.0),
            transport=transport,
        )

    if mode == "form":
        url = getattr(settings, "form_url", None)
        if not url:
            logger.warning("Sync mode 'form' has no SHEET_TASKS_FORM_URL; sheet sync disabled.")
            return None
        return FormSubmitSyncer(
            url,
            fields=getattr(settings, "form_fields", None),
            timeout_seconds=getattr(settings, "form_timeout_seconds", 2.5),
            transport=transport,
        )

    logger.info("Sheet sync is off.")
    return None
