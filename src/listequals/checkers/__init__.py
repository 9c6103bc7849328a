from listequals.checkers.list_equals import (
    ErrorKind, SequenceValidationError, CheckerInfo, ListEqualsChecker, ListEquals,
    is_sequence, element_type, is_comparable, validate, sequences_equal, generate_diff, check,
    assert_list_equals
)


__all__ = [
    "ErrorKind", "SequenceValidationError", "CheckerInfo", "ListEqualsChecker", "ListEquals",
    "is_sequence", "element_type", "is_comparable", "validate", "sequences_equal", "generate_diff", "check",
    "assert_list_equals"
]
