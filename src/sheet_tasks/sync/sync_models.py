# src/sheet_tasks/sync/sync_models.py

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SyncResult:
    """
    Outcome of one sheet sync attempt.

    ok:          whether the UI should report "saved"
    confirmed:   False when ok is an assumption (form submit cannot observe
                 the cross-origin response), True when the endpoint answered
    status_code: HTTP status when a response was read
    detail:      short diagnostic text (error, "load" or "timeout")
    """

    ok: bool
    confirmed: bool = True
    status_code: int | None = None
    detail: str = ""
