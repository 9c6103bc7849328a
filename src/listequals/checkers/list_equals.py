"""ListEquals: positional list equality with a readable difference report.

Naive list equality is O(n) while the LCS diff is O(n*m), so equality is
checked first and the diff is only computed once the lists are known to
differ.
"""
import logging
from collections.abc import Hashable, Sequence as SequenceABC
from enum import Enum
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple, TypeVar

from listequals.algorithms.lcs import diff_entries
from listequals.formatters.base import FormatterConfig
from listequals.formatters.report import format_report

T = TypeVar('T')

logger = logging.getLogger(__name__)

_INT_SEQUENCES = (bytes, bytearray, range)


class ErrorKind(str, Enum):
    NOT_A_SEQUENCE = 'not_a_sequence'
    TYPE_MISMATCH = 'type_mismatch'
    NOT_COMPARABLE = 'not_comparable'


class SequenceValidationError(ValueError):
    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


def is_sequence(value: Any) -> bool:
    # Text is a value, not a list of characters
    if isinstance(value, str):
        return False
    return isinstance(value, SequenceABC)


def element_type(seq: Sequence[Any]) -> Optional[type]:
    """Return the element type of *seq*.

    Mixed element types give ``object``; an empty sequence gives ``None``.
    """
    if isinstance(seq, _INT_SEQUENCES):
        return int
    found = None
    for item in seq:
        item_type = type(item)
        if found is None:
            found = item_type
        elif item_type is not found:
            return object
    return found


def is_comparable(t: type) -> bool:
    """Whether elements of type *t* can be compared with ``==``.

    Hashable types always can. Unhashable builtins such as ``list``, ``dict``
    and ``set`` cannot; a user type that defines its own ``__eq__`` (a plain
    ``@dataclass`` for instance) can.
    """
    if issubclass(t, Hashable):
        return True
    owner = next(c for c in t.__mro__ if "__eq__" in c.__dict__)
    return owner.__module__ != "builtins"


def validate(obtained: Any, expected: Any) -> Optional[type]:
    if not is_sequence(expected):
        raise SequenceValidationError(ErrorKind.NOT_A_SEQUENCE, "expected value is not a slice")
    if not is_sequence(obtained):
        raise SequenceValidationError(ErrorKind.NOT_A_SEQUENCE, "obtained value is not a slice")

    exp_type = element_type(expected)
    obt_type = element_type(obtained)
    # An empty side takes the element type of the other
    if exp_type is None:
        exp_type = obt_type
    elif obt_type is None:
        obt_type = exp_type

    if exp_type is not obt_type:
        raise SequenceValidationError(ErrorKind.TYPE_MISMATCH, "element types are not equal")
    if exp_type is not None and not is_comparable(exp_type):
        raise SequenceValidationError(ErrorKind.NOT_COMPARABLE, "element type is not comparable")
    return exp_type


def sequences_equal(obtained: Sequence[T], expected: Sequence[T]) -> bool:
    if len(obtained) != len(expected):
        return False
    for i in range(len(expected)):
        if obtained[i] != expected[i]:
            return False
    return True


def generate_diff(obtained: Sequence[T], expected: Sequence[T],
                  config: Optional[FormatterConfig] = None) -> str:
    return format_report(diff_entries(obtained, expected), config)


def check(obtained: Sequence[T], expected: Sequence[T],
          config: Optional[FormatterConfig] = None) -> Tuple[bool, str]:
    try:
        validate(obtained, expected)
    except SequenceValidationError as e:
        logger.debug("List comparison rejected (%s): %s", e.kind.value, e)
        return False, str(e)

    if sequences_equal(obtained, expected):
        return True, ""

    logger.debug("Lists differ (len %d vs %d), computing diff", len(obtained), len(expected))
    return False, generate_diff(obtained, expected, config)


class CheckerInfo(NamedTuple):
    name: str
    params: Tuple[str, ...]


class ListEqualsChecker:
    def __init__(self, config: Optional[FormatterConfig] = None):
        self.info = CheckerInfo("ListEquals", ("obtained", "expected"))
        self.config = config

    def check(self, params: List[Any], names: Optional[List[str]] = None) -> Tuple[bool, str]:
        if len(params) != len(self.info.params):
            raise ValueError(
                f"{self.info.name} takes {len(self.info.params)} parameters, got {len(params)}"
            )
        obtained, expected = params
        return check(obtained, expected, self.config)

    def __repr__(self) -> str:
        return f"{self.info.name}({', '.join(self.info.params)})"


ListEquals = ListEqualsChecker()


def assert_list_equals(obtained: Sequence[T], expected: Sequence[T], msg: Optional[str] = None):
    equal, error = check(obtained, expected)
    if not equal:
        raise AssertionError(error if msg is None else f"{msg}\n{error}")
