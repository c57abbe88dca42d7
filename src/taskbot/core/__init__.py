"""Functional core - pure business logic with no I/O."""

from .tasks import Task, TaskKind, ToDo, Deadline, Event, format_task, to_record, task_from_record
from .results import ErrorKind, Failure
from .parser import split_command, parse_todo, parse_deadline, parse_event, parse_index
from .task_list import TaskList

__all__ = [
    # Tasks
    "Task",
    "TaskKind",
    "ToDo",
    "Deadline",
    "Event",
    "format_task",
    "to_record",
    "task_from_record",
    # Results
    "ErrorKind",
    "Failure",
    # Parser
    "split_command",
    "parse_todo",
    "parse_deadline",
    "parse_event",
    "parse_index",
    # Task list
    "TaskList",
]
