import logging
from typing import TypeVar, List, Sequence, Optional
from .utils import EntryList, DiffEntry, make_added, make_removed, make_changed

T = TypeVar('T')

logger = logging.getLogger(__name__)

Table = List[List[int]]


class LCSDiff:
    """Longest-common-subsequence diff of *obtained* against *expected*.

    The table is built on demand and kept only for the lifetime of this
    object; every index in the produced entries refers to *expected*.
    """

    def __init__(self, obtained: Sequence[T], expected: Sequence[T]):
        self.obtained = obtained
        self.expected = expected
        self.n = len(obtained)
        self.m = len(expected)
        self._table: Optional[Table] = None

    def compute(self) -> EntryList:
        return self.traceback()

    def build_table(self) -> Table:
        n, m = self.n, self.m
        logger.debug("Building %dx%d LCS table", n + 1, m + 1)
        # table[i][j] is the LCS length of obtained[:i] and expected[:j]
        table = [[0] * (m + 1) for _ in range(n + 1)]
        for i in range(1, n + 1):
            row, prev = table[i], table[i - 1]
            a = self.obtained[i - 1]
            for j in range(1, m + 1):
                if a == self.expected[j - 1]:
                    row[j] = prev[j - 1] + 1
                else:
                    row[j] = max(prev[j], row[j - 1])
        return table

    def traceback(self) -> EntryList:
        if self._table is None:
            self._table = self.build_table()
        table = self._table
        obtained, expected = self.obtained, self.expected
        i, j = self.n, self.m
        entries_reversed: List[DiffEntry] = []
        # Branch order is fixed: changed, then added, then removed.
        while i > 0 and j > 0:
            if table[i][j] == table[i - 1][j - 1] and obtained[i - 1] != expected[j - 1]:
                entries_reversed.append(make_changed(j - 1, expected[j - 1], obtained[i - 1]))
                i -= 1
                j -= 1
            elif table[i][j] == table[i - 1][j]:
                entries_reversed.append(make_added(j, obtained[i - 1]))
                i -= 1
            elif table[i][j] == table[i][j - 1]:
                entries_reversed.append(make_removed(j - 1, expected[j - 1]))
                j -= 1
            else:
                i -= 1
                j -= 1
        # Differences before the first common element
        while i > 0:
            entries_reversed.append(make_added(0, obtained[i - 1]))
            i -= 1
        while j > 0:
            entries_reversed.append(make_removed(j - 1, expected[j - 1]))
            j -= 1
        entries_reversed.reverse()
        return entries_reversed

    def get_lcs_length(self) -> int:
        if self._table is None:
            self._table = self.build_table()
        return self._table[self.n][self.m]


def diff_entries(obtained: Sequence[T], expected: Sequence[T]) -> EntryList:
    differ = LCSDiff(obtained, expected)
    return differ.compute()


def build_table(obtained: Sequence[T], expected: Sequence[T]) -> Table:
    return LCSDiff(obtained, expected).build_table()


def lcs_length(obtained: Sequence[T], expected: Sequence[T]) -> int:
    return LCSDiff(obtained, expected).get_lcs_length()
