"""Ports - interfaces/protocols for external dependencies."""

from .task_store import TaskStore, StorageError, LoadingError, SavingError

__all__ = [
    "TaskStore",
    "StorageError",
    "LoadingError",
    "SavingError",
]
