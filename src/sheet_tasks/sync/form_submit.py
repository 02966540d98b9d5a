# src/sheet_tasks/sync/form_submit.py

from __future__ import annotations

"""
Form-submit sheet sync.

For endpoints that only accept conventional form posts (hosted forms) and
whose responses are not observable. The request runs in the background;
whichever comes first, request completion or the fixed timeout, ends the
attempt and success is *assumed*. The result is therefore marked
confirmed=False: it says nothing reliable about remote persistence.
"""

import asyncio
import contextlib
import logging
from collections.abc import Mapping

import httpx

from ..tasks.task_models import Task
from .sync_models import SyncResult

logger = logging.getLogger(__name__)

DEFAULT_FORM_FIELDS: dict[str, str] = {
    "title": "entry.title",
    "status": "entry.status",
    "created_at": "entry.created_at",
}


class FormSubmitSyncer:
    def __init__(
        self,
        url: str,
        *,
        fields: Mapping[str, str] | None = None,
        timeout_seconds: float = 2.5,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not url or not url.strip():
            raise ValueError("form url is required")
        self.url = url.strip()
        self.fields = dict(DEFAULT_FORM_FIELDS if fields is None else fields)
        if float(timeout_seconds) <= 0:
            raise ValueError("form timeout must be positive")
        self.timeout_seconds = float(timeout_seconds)
        self._transport = transport

    def build_payload(self, task: Task) -> dict[str, str]:
        values = {"title": task.title, "status": task.status, "created_at": task.created_at}
        # Opaque field ids come from the form definition; blank ids are not sent.
        return {field_id: values[name] for name, field_id in self.fields.items() if field_id and name in values}

    async def _submit(self, payload: dict[str, str]) -> None:
        try:
            async with httpx.AsyncClient(transport=self._transport, follow_redirects=True) as client:
                # The response is deliberately ignored: it stands in for an
                # iframe "load" event, which fires for errors too.
                await client.post(self.url, data=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug("Form submit finished with transport error: %s", e)

    async def sync(self, task: Task) -> SyncResult:
        payload = self.build_payload(task)
        request = asyncio.create_task(self._submit(payload))

        done, _ = await asyncio.wait({request}, timeout=self.timeout_seconds)
        if done:
            signal = "load"
            # Retrieve it so a crash is logged here, not as "never retrieved".
            error = request.exception()
            if error is not None:
                logger.warning("Form submit crashed task_id=%s: %r", task.id, error)
        else:
            signal = "timeout"
            request.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await request

        logger.info("Task submitted to form id=%s signal=%s (assumed saved)", task.id, signal)
        return SyncResult(ok=True, confirmed=False, detail=signal)
