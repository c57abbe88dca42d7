"""File-based task storage adapter."""

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from taskbot.core.tasks import Task, task_from_record, to_record
from taskbot.ports.task_store import LoadingError, SavingError

logger = logging.getLogger(__name__)


class FileTaskStore:
    """
    JSON file task storage.

    Implements TaskStore protocol. The file holds a flat list of task records.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def check_file(self) -> None:
        """Create an empty store if none exists yet."""
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]\n")
        except OSError as e:
            raise LoadingError(f"Could not create {self.path}: {e}") from e
        logger.debug(f"Created empty task file at {self.path}")

    @property
    def backup_path(self) -> Path:
        """Where a corrupt task file is moved before it can be overwritten."""
        return self.path.with_name(self.path.name + ".bak")

    def _corrupt(self, reason: str) -> LoadingError:
        """Move the unreadable file aside and build the error to raise."""
        try:
            self.path.replace(self.backup_path)
        except OSError as e:
            logger.error(f"Could not move corrupt {self.path} aside: {e}")
            return LoadingError(f"{reason} (could not back it up: {e})")
        logger.warning(f"Moved corrupt task file to {self.backup_path}")
        return LoadingError(f"{reason}; original kept at {self.backup_path}")

    def read_file(self) -> list[Task]:
        """
        Load every task in file order.

        A file that exists but can't be decoded is renamed to ``backup_path``
        so a later save doesn't destroy it.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise self._corrupt(f"{self.path} is not valid UTF-8: {e}") from e
        except OSError as e:
            raise LoadingError(f"Could not read {self.path}: {e}") from e

        if not raw.strip():
            return []

        try:
            records = json.loads(raw)
        except (json.JSONDecodeError, RecursionError) as e:
            raise self._corrupt(f"{self.path} is not valid JSON: {e}") from e

        if not isinstance(records, list):
            raise self._corrupt(f"{self.path} does not contain a list of tasks")

        try:
            tasks = [task_from_record(record) for record in records]
        except (KeyError, TypeError, ValueError) as e:
            raise self._corrupt(f"{self.path} contains a malformed task: {e!r}") from e

        logger.debug(f"Loaded {len(tasks)} tasks from {self.path}")
        return tasks

    def save_file(self, tasks: Iterable[Task]) -> None:
        """Overwrite the file with the given tasks."""
        records = [to_record(task) for task in tasks]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to save tasks to {self.path}: {e}")
            raise SavingError(f"Could not write {self.path}: {e}") from e
        logger.debug(f"Saved {len(records)} tasks to {self.path}")
