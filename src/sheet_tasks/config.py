# src/sheet_tasks/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- No endpoint required at import time (sync is optional).
- Status labels are configuration, not part of the data model.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .tasks.task_models import TaskStatus

ENV_PREFIX = "SHEET_TASKS"

DEFAULT_STATUSES = [s.value for s in TaskStatus]
SYNC_MODES = ("post", "form", "off")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _load_dotenv_if_available() -> None:
    """Load .env locally if python-dotenv is installed. Safe no-op otherwise."""
    try:
        from dotenv import load_dotenv  # type: ignore
    except Exception:
        return
    load_dotenv(override=False)


_load_dotenv_if_available()


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default)
    parts = [p.strip() for p in raw.replace(",", " ").split() if p.strip()]
    return parts


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    console_enabled: bool

    # ---- Local storage ----
    data_dir: Path
    storage_path: Path
    storage_key: str

    # ---- Status selector ----
    statuses: List[str]
    default_status: str

    # ---- Sheet sync ----
    sync_mode: str
    sync_url: Optional[str]
    sync_timeout_seconds: float
    form_url: Optional[str]
    form_fields: Dict[str, str]
    form_timeout_seconds: float

    # ---- UI ----
    notice_seconds: float
    export_path: Path

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "sheet-tasks").strip() or "sheet-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO")
        console_enabled = _env_bool(_k("CONSOLE_ENABLED"), True)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/sheet_tasks"))
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / "local_storage.sqlite3")
        storage_key = _env(_k("STORAGE_KEY"), "tasks").strip() or "tasks"

        statuses = _env_list(_k("STATUSES"), DEFAULT_STATUSES) or list(DEFAULT_STATUSES)
        default_status = _env(_k("DEFAULT_STATUS"), statuses[0]).strip()
        if default_status not in statuses:
            default_status = statuses[0]

        sync_url = _env(_k("SYNC_URL")).strip() or None
        form_url = _env(_k("FORM_URL")).strip() or None

        # Without an explicit mode, pick whichever endpoint is configured.
        default_mode = "post" if sync_url else ("form" if form_url else "off")
        sync_mode = _env(_k("SYNC_MODE"), default_mode).strip().lower()
        if sync_mode not in SYNC_MODES:
            sync_mode = default_mode

        form_fields = {
            "title": _env(_k("FORM_FIELD_TITLE"), "entry.title").strip(),
            "status": _env(_k("FORM_FIELD_STATUS"), "entry.status").strip(),
            "created_at": _env(_k("FORM_FIELD_CREATED_AT"), "entry.created_at").strip(),
        }

        # The form race needs a real window, or the request is cancelled unsent.
        form_timeout_seconds = _env_float(_k("FORM_TIMEOUT_SECONDS"), 2.5)
        if form_timeout_seconds <= 0:
            form_timeout_seconds = 2.5

        return Settings(
            app_name=app_name,
            log_level=log_level,
            console_enabled=console_enabled,
            data_dir=data_dir,
            storage_path=storage_path,
            storage_key=storage_key,
            statuses=statuses,
            default_status=default_status,
            sync_mode=sync_mode,
            sync_url=sync_url,
            sync_timeout_seconds=_env_float(_k("SYNC_TIMEOUT_SECONDS"), 15.0),
            form_url=form_url,
            form_fields=form_fields,
            form_timeout_seconds=form_timeout_seconds,
            notice_seconds=_env_float(_k("NOTICE_SECONDS"), 1.8),
            export_path=_env_path(_k("EXPORT_PATH"), data_dir / "tasks.html"),
        )


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
