from listequals.checkers import (
    ErrorKind, SequenceValidationError, ListEquals, check, assert_list_equals
)
from listequals.algorithms.utils import DiffKind, DiffEntry


__all__ = [
    "ErrorKind", "SequenceValidationError", "ListEquals", "check", "assert_list_equals",
    "DiffKind", "DiffEntry"
]
