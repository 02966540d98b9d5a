# src/sheet_tasks/sync/http_post.py

from __future__ import annotations

import json
import logging

import httpx

from ..tasks.task_models import Task
from .sync_models import SyncResult

logger = logging.getLogger(__name__)

# Plain text keeps the request "simple" for script endpoints that reject
# preflighted JSON; the body is still a JSON document.
_HEADERS = {"Content-Type": "text/plain;charset=utf-8"}


class HttpPostSyncer:
    """
    Direct POST of {title, status} to a sheet-backed web endpoint.

    One attempt per task: no retries, no queue. Failures are logged and
    reported through the returned SyncResult, never raised.
    """

    def __init__(
        self,
        url: str,
        *,
        timeout_seconds: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not url or not url.strip():
            raise ValueError("sync url is required")
        self.url = url.strip()
        self.timeout_seconds = max(0.1, float(timeout_seconds))
        self._transport = transport

    @staticmethod
    def build_body(task: Task) -> bytes:
        return json.dumps({"title": task.title, "status": task.status}, ensure_ascii=False).encode("utf-8")

    async def sync(self, task: Task) -> SyncResult:
        body = self.build_body(task)
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_seconds,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.post(self.url, content=body, headers=_HEADERS)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Could not save to sheet task_id=%s: %s", task.id, e)
            return SyncResult(ok=False, detail=str(e) or e.__class__.__name__)

        if response.is_success:
            logger.info("Task synced to sheet id=%s status=%s", task.id, response.status_code)
            return SyncResult(ok=True, status_code=response.status_code)

        text = response.text
        logger.error(
            "Could not save to sheet task_id=%s (HTTP %s): %s",
            task.id,
            response.status_code,
            text,
        )
        return SyncResult(ok=False, status_code=response.status_code, detail=text)
