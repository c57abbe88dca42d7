"""Task storage interface."""

from collections.abc import Iterable
from typing import Protocol

from taskbot.core.tasks import Task


class StorageError(Exception):
    """Base class for persisted-store failures."""


class LoadingError(StorageError):
    """The persisted store is missing, unreadable or corrupt."""


class SavingError(StorageError):
    """The persisted store could not be written."""


class TaskStore(Protocol):
    """Interface for loading and saving the task sequence."""

    def check_file(self) -> None:
        """Ensure the store exists, creating an empty one if absent. Raises LoadingError."""
        ...

    def read_file(self) -> list[Task]:
        """Return the persisted task sequence. Raises LoadingError."""
        ...

    def save_file(self, tasks: Iterable[Task]) -> None:
        """Overwrite the persisted state. Raises SavingError."""
        ...
