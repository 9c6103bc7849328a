from helpers.reference import (
    EntryApplier,
    naive_equal,
    brute_lcs_length,
    apply_entries,
    is_ascending,
)


__all__ = [
    "EntryApplier",
    "naive_equal",
    "brute_lcs_length",
    "apply_entries",
    "is_ascending",
]
