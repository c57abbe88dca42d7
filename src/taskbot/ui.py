"""Response text for every command outcome."""

from collections.abc import Sequence

from .core.results import ErrorKind, Failure
from .core.tasks import Task, format_task


def _count(n: int) -> str:
    return f"Now you have {n} {'task' if n == 1 else 'tasks'} in the list."


def _numbered(tasks: Sequence[Task]) -> str:
    return "\n".join(f"{i}.{format_task(t)}" for i, t in enumerate(tasks, start=1))


def greet(bot_name: str) -> str:
    return f"Hello! I'm {bot_name}\nWhat can I do for you?"


def goodbye() -> str:
    return "Bye. Hope to see you again soon!"


def display_list(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "Your list is empty."
    return f"Here are the tasks in your list:\n{_numbered(tasks)}"


def confirm_addition(task: Task, size: int) -> str:
    return f"Got it. I've added this task:\n  {format_task(task)}\n{_count(size)}"


def confirm_removal(task: Task, size: int) -> str:
    return f"Noted. I've removed this task:\n  {format_task(task)}\n{_count(size)}"


def mark_as_done(task: Task) -> str:
    return f"Nice! I've marked this task as done:\n  {format_task(task)}"


def unmark_as_done(task: Task) -> str:
    return f"OK, I've marked this task as not done yet:\n  {format_task(task)}"


def show_find_result(tasks: Sequence[Task]) -> str:
    if not tasks:
        return "No matching tasks found."
    return f"Here are the matching tasks in your list:\n{_numbered(tasks)}"


def show_failure(failure: Failure) -> str:
    """Describe a failed command."""
    match failure.kind:
        case ErrorKind.ILLEGAL_ARGUMENT:
            return "OOPS!!! The description of a todo cannot be empty."
        case ErrorKind.INCOMPLETE_ARGUMENT:
            if failure.detail == "event":
                usage = "event <description> from <yyyy-mm-dd HHmm> to <yyyy-mm-dd HHmm>"
            else:
                usage = "deadline <description> by <yyyy-mm-dd HHmm>"
            return f"OOPS!!! Some details are missing. Try: {usage}"
        case ErrorKind.DATETIME_PARSE:
            return (
                f"OOPS!!! I couldn't read the date {failure.detail!r}. "
                "Please use the format yyyy-mm-dd HHmm, e.g. 2024-12-01 1800."
            )
        case ErrorKind.DATE_CLASH:
            return f"OOPS!!! This event clashes with:\n  {failure.detail}"
        case ErrorKind.OUT_OF_BOUNDS:
            return "OOPS!!! There is no task with that number."
        case ErrorKind.INVALID_INDEX:
            return f"OOPS!!! {failure.detail!r} is not a task number."
    return "OOPS!!! Something went wrong."


def show_loading_error() -> str:
    return "I couldn't load your saved tasks, so we're starting with an empty list."


def show_saving_error() -> str:
    return "I couldn't save your tasks. Your changes from this session may be lost."


def do_not_understand() -> str:
    return "OOPS!!! I'm sorry, but I don't know what that means :-("
