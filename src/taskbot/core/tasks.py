"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

DISPLAY_FORMAT = "%b %d %Y %H:%M"


class TaskKind(Enum):
    """Tag identifying a task variant."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


class _Checkable:
    """Done-state and description handling shared by every task variant."""

    description: str
    is_done: bool

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValueError("Task description cannot be empty")

    def mark(self) -> None:
        """Toggle the done-state."""
        self.is_done = not self.is_done

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "


@dataclass
class ToDo(_Checkable):
    """A task with only a description."""

    description: str
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass
class Deadline(_Checkable):
    """A task that must be done by a given time."""

    description: str
    due_at: datetime
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.DEADLINE


@dataclass
class Event(_Checkable):
    """A task occupying a time window."""

    description: str
    starts_at: datetime
    ends_at: datetime
    is_done: bool = False

    kind: ClassVar[TaskKind] = TaskKind.EVENT

    def overlaps(self, other: "Event") -> bool:
        """Check if this event's window overlaps another's. Touching endpoints don't count."""
        return self.starts_at < other.ends_at and other.starts_at < self.ends_at


Task = ToDo | Deadline | Event


def _fmt(dt: datetime) -> str:
    return dt.strftime(DISPLAY_FORMAT)


def format_task(task: Task) -> str:
    """Render a task as a single line, e.g. ``[D][ ] submit report (by: Dec 01 2024 18:00)``."""
    match task:
        case Deadline():
            return f"[D][{task.status_icon}] {task.description} (by: {_fmt(task.due_at)})"
        case Event():
            return (
                f"[E][{task.status_icon}] {task.description} "
                f"(from: {_fmt(task.starts_at)} to: {_fmt(task.ends_at)})"
            )
        case _:
            return f"[T][{task.status_icon}] {task.description}"


def to_record(task: Task) -> dict:
    """Flatten a task into a JSON-friendly record."""
    record: dict = {
        "type": task.kind.value,
        "description": task.description,
        "done": task.is_done,
    }
    match task:
        case Deadline():
            record["by"] = task.due_at.isoformat()
        case Event():
            record["from"] = task.starts_at.isoformat()
            record["to"] = task.ends_at.isoformat()
    return record


def task_from_record(record: dict) -> Task:
    """
    Rebuild a task from a record produced by ``to_record``.

    Raises KeyError, TypeError or ValueError on malformed records.
    """
    if not isinstance(record, dict):
        raise TypeError(f"Task record must be a mapping, got {type(record).__name__}")
    done = record.get("done", False)
    if not isinstance(done, bool):
        raise TypeError(f"Task done-state must be true or false, got {done!r}")
    description = record["description"]
    if not isinstance(description, str):
        raise TypeError("Task description must be a string")

    match TaskKind(record["type"]):
        case TaskKind.TODO:
            return ToDo(description, is_done=done)
        case TaskKind.DEADLINE:
            return Deadline(description, datetime.fromisoformat(record["by"]), is_done=done)
        case TaskKind.EVENT:
            return Event(
                description,
                datetime.fromisoformat(record["from"]),
                datetime.fromisoformat(record["to"]),
                is_done=done,
            )
