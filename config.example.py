# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Do NOT commit real endpoint URLs if they grant write access to your sheet. Use:
- .env (local, gitignored)

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "SHEET_TASKS_APP_NAME": "App display name, also used as the page title (default: sheet-tasks).",
    "SHEET_TASKS_LOG_LEVEL": "Console logging level (default: INFO).",
    "SHEET_TASKS_CONSOLE_ENABLED": "Run the interactive console (true/false). Off => load, export page, exit.",
    # Local storage (gitignored)
    "SHEET_TASKS_DATA_DIR": "Local data directory (default: .local/sheet_tasks).",
    "SHEET_TASKS_STORAGE_PATH": "Key/value SQLite path (default: <data_dir>/local_storage.sqlite3).",
    "SHEET_TASKS_STORAGE_KEY": "Key holding the serialized task list (default: tasks).",
    # Status selector
    "SHEET_TASKS_STATUSES": "Comma/space separated selector options (default: pending in-progress done).",
    "SHEET_TASKS_DEFAULT_STATUS": "Initially selected option (default: first option).",
    # Sheet sync
    "SHEET_TASKS_SYNC_MODE": "post | form | off (default: inferred from which URL is set).",
    "SHEET_TASKS_SYNC_URL": "Web app URL receiving a text/plain JSON POST of {title, status}.",
    "SHEET_TASKS_SYNC_TIMEOUT_SECONDS": "HTTP timeout for the direct POST (default: 15).",
    "SHEET_TASKS_FORM_URL": "Form submission URL for the form-submit mode.",
    "SHEET_TASKS_FORM_FIELD_TITLE": "Form field id receiving the title (default: entry.title).",
    "SHEET_TASKS_FORM_FIELD_STATUS": "Form field id receiving the status (default: entry.status).",
    "SHEET_TASKS_FORM_FIELD_CREATED_AT": "Form field id receiving createdAt (default: entry.created_at).",
    "SHEET_TASKS_FORM_TIMEOUT_SECONDS": "Seconds before a form submit is assumed saved (default: 2.5).",
    # UI
    "SHEET_TASKS_NOTICE_SECONDS": "How long the save notice stays visible (default: 1.8).",
    "SHEET_TASKS_EXPORT_PATH": "Where /export writes the HTML page (default: <data_dir>/tasks.html).",
}
