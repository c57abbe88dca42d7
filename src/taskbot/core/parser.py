"""Command parsing - pure functions of the input text."""

import re
from datetime import datetime

from .results import ErrorKind, Failure
from .tasks import Deadline, Event, ToDo

INPUT_FORMAT = "%Y-%m-%d %H%M"

# Greedy description so the last separator wins ("stand by me by 2024-12-01 1800").
_DEADLINE_RE = re.compile(r"^(?P<description>.*\S)\s+/?by\s+(?P<by>.+)$")
_EVENT_RE = re.compile(
    r"^(?P<description>.*\S)\s+/?from\s+(?P<start>.+?)\s+/?to\s+(?P<end>.+)$"
)
# Plain ASCII digits; a leading minus is a number, just never a valid one.
_INDEX_RE = re.compile(r"-?[0-9]+")


def split_command(line: str) -> tuple[str, str]:
    """Split a line into its leading command word and the trimmed remainder."""
    parts = line.strip().split(maxsplit=1)
    if not parts:
        return "", ""
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def parse_datetime(text: str) -> datetime | Failure:
    """Parse ``YYYY-MM-DD HHMM`` (e.g. ``2024-12-01 1800``)."""
    try:
        return datetime.strptime(text.strip(), INPUT_FORMAT)
    except ValueError:
        return Failure(ErrorKind.DATETIME_PARSE, text.strip())


def parse_todo(rest: str) -> ToDo | Failure:
    description = rest.strip()
    if not description:
        return Failure(ErrorKind.ILLEGAL_ARGUMENT, "todo")
    return ToDo(description)


def parse_deadline(rest: str) -> Deadline | Failure:
    """Parse ``<description> by <datetime>``."""
    match = _DEADLINE_RE.match(rest.strip())
    if not match:
        return Failure(ErrorKind.INCOMPLETE_ARGUMENT, "deadline")

    due_at = parse_datetime(match["by"])
    if isinstance(due_at, Failure):
        return due_at
    return Deadline(match["description"], due_at)


def parse_event(rest: str) -> Event | Failure:
    """Parse ``<description> from <datetime> to <datetime>``."""
    match = _EVENT_RE.match(rest.strip())
    if not match:
        return Failure(ErrorKind.INCOMPLETE_ARGUMENT, "event")

    starts_at = parse_datetime(match["start"])
    if isinstance(starts_at, Failure):
        return starts_at
    ends_at = parse_datetime(match["end"])
    if isinstance(ends_at, Failure):
        return ends_at
    return Event(match["description"], starts_at, ends_at)


def parse_index(rest: str, size: int) -> int | Failure:
    """
    Convert a 1-based task number into a 0-based list index.

    Non-numeric text is INVALID_INDEX; a number outside [1, size] is OUT_OF_BOUNDS.
    """
    text = rest.strip()
    if not _INDEX_RE.fullmatch(text):
        return Failure(ErrorKind.INVALID_INDEX, text)

    number = int(text)
    if not 1 <= number <= size:
        return Failure(ErrorKind.OUT_OF_BOUNDS, str(number))
    return number - 1
