"""Command dispatch between the parser, the task list and the store.

``respond`` is one transaction: parse, validate, mutate, render. It never
raises for user input; every outcome comes back as text.
"""

import logging
from dataclasses import dataclass

from . import ui
from .config import DEFAULT_BOT_NAME
from .core.parser import parse_deadline, parse_event, parse_index, parse_todo, split_command
from .core.results import Failure
from .core.task_list import TaskList
from .core.tasks import Task
from .ports.task_store import LoadingError, StorageError, TaskStore

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """Everything a running chat needs, built once by ``open_session``."""

    task_list: TaskList
    store: TaskStore
    bot_name: str = DEFAULT_BOT_NAME
    loading_error: str | None = None
    finished: bool = False


def open_session(store: TaskStore, bot_name: str = DEFAULT_BOT_NAME) -> Session:
    """Load persisted tasks. Loading failures start an empty list instead of aborting."""
    loading_error = None

    try:
        store.check_file()
    except LoadingError as e:
        logger.warning(f"Task store check failed: {e}")
        loading_error = str(e)

    try:
        tasks = store.read_file()
    except LoadingError as e:
        logger.warning(f"Could not load tasks, starting empty: {e}")
        loading_error = str(e)
        tasks = []

    return Session(
        task_list=TaskList(tasks),
        store=store,
        bot_name=bot_name,
        loading_error=loading_error,
    )


def save_session(session: Session) -> None:
    """Persist the current task sequence. Raises SavingError."""
    session.store.save_file(session.task_list.tasks)


def greet(session: Session) -> str:
    text = ui.greet(session.bot_name)
    if session.loading_error:
        text = f"{text}\n{ui.show_loading_error()}"
    return text


def respond(session: Session, line: str) -> str:
    """Handle one line of input and return the response text."""
    command, rest = split_command(line)

    match command:
        case "bye":
            return _bye(session)
        case "list":
            return ui.display_list(session.task_list.tasks)
        case "mark" | "unmark":
            return _mark(session, rest)
        case "todo":
            return _add(session, parse_todo(rest))
        case "deadline":
            return _add(session, parse_deadline(rest))
        case "event":
            return _add(session, parse_event(rest))
        case "delete":
            return _delete(session, rest)
        case "find":
            return ui.show_find_result(session.task_list.find(rest))
        case _:
            logger.debug(f"Unrecognized command: {command!r}")
            return ui.do_not_understand()


def get_response(session: Session, line: str) -> str:
    """``respond`` with the bot's name in front."""
    return f"{session.bot_name}: {respond(session, line)}"


def _reject(command: str, failure: Failure) -> str:
    logger.debug(f"Rejected {command}: {failure.kind.value} {failure.detail!r}")
    return ui.show_failure(failure)


def _add(session: Session, parsed: Task | Failure) -> str:
    if isinstance(parsed, Failure):
        return _reject("add", parsed)

    failure = session.task_list.add(parsed)
    if failure is not None:
        return _reject("add", failure)
    return ui.confirm_addition(parsed, session.task_list.size)


def _mark(session: Session, rest: str) -> str:
    index = parse_index(rest, session.task_list.size)
    if isinstance(index, Failure):
        return _reject("mark", index)

    task = session.task_list.mark(index)
    if task.is_done:
        return ui.mark_as_done(task)
    return ui.unmark_as_done(task)


def _delete(session: Session, rest: str) -> str:
    index = parse_index(rest, session.task_list.size)
    if isinstance(index, Failure):
        return _reject("delete", index)

    removed = session.task_list.remove(index)
    return ui.confirm_removal(removed, session.task_list.size)


def _bye(session: Session) -> str:
    session.finished = True
    try:
        save_session(session)
    except StorageError as e:
        logger.error(f"Could not save tasks on exit: {e}")
        return f"{ui.show_saving_error()}\n{ui.goodbye()}"
    return ui.goodbye()
