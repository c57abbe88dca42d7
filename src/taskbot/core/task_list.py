"""The ordered task collection."""

import copy
from collections.abc import Iterable

from .results import ErrorKind, Failure
from .tasks import Event, Task, format_task


class TaskList:
    """
    Owns the ordered sequence of tasks.

    Insertion order is display order and persisted order. Index arguments are
    0-based and assumed already bounds-checked (see ``parser.parse_index``).
    """

    def __init__(self, tasks: Iterable[Task] = ()):
        self._tasks: list[Task] = list(tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def size(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[Task, ...]:
        """
        Snapshot for rendering and persistence.

        Holds copies, so marking a task from the snapshot leaves the list alone.
        """
        return tuple(copy.copy(t) for t in self._tasks)

    def clashes_with(self, event: Event) -> Event | None:
        """First existing event whose window overlaps ``event``, if any."""
        for task in self._tasks:
            if isinstance(task, Event) and task.overlaps(event):
                return task
        return None

    def add(self, task: Task) -> Failure | None:
        """Append a task. Events overlapping an existing event are rejected."""
        if isinstance(task, Event):
            clash = self.clashes_with(task)
            if clash is not None:
                return Failure(ErrorKind.DATE_CLASH, format_task(clash))
        self._tasks.append(task)
        return None

    def get(self, index: int) -> Task:
        return self._tasks[index]

    def remove(self, index: int) -> Task:
        return self._tasks.pop(index)

    def mark(self, index: int) -> Task:
        """Toggle the done-state of the task at ``index`` and return it."""
        task = self._tasks[index]
        task.mark()
        return task

    def find(self, keyword: str) -> list[Task]:
        """Tasks whose description contains ``keyword`` (case-sensitive), in order."""
        return [t for t in self._tasks if keyword in t.description]
