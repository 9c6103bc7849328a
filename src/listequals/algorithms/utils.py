from typing import TypeVar, List, NamedTuple, Optional, Dict
from enum import Enum

T = TypeVar('T')


class DiffKind(str, Enum):
    ADDED = 'added'
    REMOVED = 'removed'
    CHANGED = 'changed'


class DiffEntry(NamedTuple):
    """One difference, positioned in the coordinate space of *expected*.

    ``value`` is the element that was added or removed; for CHANGED it is the
    obtained element and ``original`` holds the expected one.
    """
    kind: DiffKind
    index: int
    value: object
    original: Optional[object] = None

    def __str__(self) -> str:
        if self.kind == DiffKind.ADDED:
            return f"at index {self.index}: unexpected element {self.value}"
        if self.kind == DiffKind.REMOVED:
            return f"at index {self.index}: missing element {self.value}"
        if self.kind == DiffKind.CHANGED:
            return f"at index {self.index}: obtained element {self.value}, expected {self.original}"
        raise ValueError(f"Unknown diff kind: {self.kind!r}")

    def __repr__(self) -> str:
        if self.kind == DiffKind.CHANGED:
            return f"DiffEntry({self.kind.value!r}, {self.index}, {self.value!r}, {self.original!r})"
        return f"DiffEntry({self.kind.value!r}, {self.index}, {self.value!r})"


EntryList = List[DiffEntry]


def make_added(index: int, element: T) -> DiffEntry:
    return DiffEntry(DiffKind.ADDED, index, element)


def make_removed(index: int, element: T) -> DiffEntry:
    return DiffEntry(DiffKind.REMOVED, index, element)


def make_changed(index: int, original: T, changed: T) -> DiffEntry:
    return DiffEntry(DiffKind.CHANGED, index, changed, original)


def count_entries(entries: EntryList) -> Dict[str, int]:
    counts = {
        'added': 0,
        'removed': 0,
        'changed': 0,
        'total': len(entries)
    }
    for entry in entries:
        counts[entry.kind.value] += 1
    return counts
