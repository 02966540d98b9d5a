"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskStatus, TaskValidationError)
- task_store.py: list owner persisted as one JSON value in key/value storage
"""
