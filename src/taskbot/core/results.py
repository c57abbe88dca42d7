"""Validation outcomes returned (not raised) by the parser and task list."""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    """Why a command could not be carried out."""

    ILLEGAL_ARGUMENT = "illegal_argument"  # empty todo description
    INCOMPLETE_ARGUMENT = "incomplete_argument"  # missing separator or field
    DATETIME_PARSE = "datetime_parse"
    DATE_CLASH = "date_clash"
    OUT_OF_BOUNDS = "out_of_bounds"
    INVALID_INDEX = "invalid_index"  # index is not a number


@dataclass(frozen=True)
class Failure:
    """A recoverable command failure."""

    kind: ErrorKind
    detail: str = ""
