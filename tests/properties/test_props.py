import unittest
import sys
import os
from typing import List

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from listequals.algorithms.lcs import diff_entries, lcs_length
from listequals.algorithms.utils import DiffKind, DiffEntry
from listequals.checkers.list_equals import check

from helpers.reference import naive_equal, brute_lcs_length, apply_entries, is_ascending

from properties.generators import (
    GeneratorConfig,
    GeneratorMode,
    SequenceGenerator,
    SimilarSequenceGenerator,
    CaseGenerator,
)


class TestCheckProperties(unittest.TestCase):
    def setUp(self):
        self.seq_gen = SequenceGenerator(GeneratorConfig(seed=42, max_length=25))

    def test_reflexive(self):
        for _ in range(30):
            seq = self.seq_gen.generate_ints()
            self.assertEqual(check(seq, seq), (True, ""))
            self.assertEqual(check(seq, list(seq)), (True, ""))

    def test_deterministic(self):
        for _ in range(20):
            a = self.seq_gen.generate_char_list()
            b = self.seq_gen.generate_char_list()
            self.assertEqual(check(a, b), check(a, b))

    def test_matches_naive_equality_for_random_bytes(self):
        for _ in range(200):
            a = self.seq_gen.generate_bytes(max_byte=3)
            b = self.seq_gen.generate_bytes(max_byte=3) if self.seq_gen.rng.random() < 0.7 else bytes(a)
            equal, error = check(a, b)
            self.assertEqual(equal, naive_equal(a, b), (a, b))
            self.assertEqual(error == "", equal)

    def test_bytes_equal_themselves(self):
        for _ in range(50):
            a = self.seq_gen.generate_bytes()
            self.assertEqual(check(a, a), (True, ""))
            self.assertEqual(check(bytearray(a), a), (True, ""))


class TestDiffProperties(unittest.TestCase):
    def setUp(self):
        self.config = GeneratorConfig(seed=7, max_length=20)
        self.case_gen = CaseGenerator(self.config)

    def _all_cases(self):
        cases = self.case_gen.generate_edge_cases()
        cases += self.case_gen.generate_batch(40, GeneratorMode.RANDOM)
        cases += self.case_gen.generate_batch(20, GeneratorMode.SIMILAR)
        return cases

    def test_entries_reconstruct_obtained(self):
        for case in self._all_cases():
            entries = diff_entries(case.obtained, case.expected)
            self.assertEqual(apply_entries(case.expected, entries), case.obtained, case)

    def test_entries_ascending(self):
        for case in self._all_cases():
            self.assertTrue(is_ascending(diff_entries(case.obtained, case.expected)), case)

    def test_entry_count_bounded_for_substitutions(self):
        gen = SimilarSequenceGenerator(GeneratorConfig(seed=11, max_length=20))
        rng = gen.rng
        for _ in range(30):
            expected = [f"item_{i}" for i in range(rng.randint(1, 20))]
            obtained = [f"mod_{i}" if rng.random() < 0.3 else item for i, item in enumerate(expected)]
            entries = diff_entries(obtained, expected)
            self.assertLessEqual(len(entries), max(len(obtained), len(expected)))
            self.assertTrue(all(e.kind == DiffKind.CHANGED for e in entries))
        obtained, expected = self.case_gen.edge_gen.completely_different(6)
        self.assertEqual(len(diff_entries(obtained, expected)), 6)

    def test_entry_count_can_exceed_longer_side(self):
        # Added is preferred over Removed, so a late match is kept
        entries = diff_entries(['a', 'x', 'x', 'x'], ['y', 'y', 'y', 'a'])
        self.assertEqual(len(entries), 6)
        self.assertEqual(apply_entries(['y', 'y', 'y', 'a'], entries), ['a', 'x', 'x', 'x'])

    def test_entry_count_is_edit_size(self):
        for case in self._all_cases():
            entries = diff_entries(case.obtained, case.expected)
            common = lcs_length(case.obtained, case.expected)
            added = sum(1 for e in entries if e.kind == DiffKind.ADDED)
            removed = sum(1 for e in entries if e.kind == DiffKind.REMOVED)
            changed = sum(1 for e in entries if e.kind == DiffKind.CHANGED)
            self.assertEqual(added + changed, len(case.obtained) - common, case)
            self.assertEqual(removed + changed, len(case.expected) - common, case)

    def test_no_entries_for_identical(self):
        for case in self.case_gen.generate_batch(10, GeneratorMode.RANDOM):
            self.assertEqual(diff_entries(case.obtained, list(case.obtained)), [])


class TestLCSProperties(unittest.TestCase):
    def setUp(self):
        self.seq_gen = SequenceGenerator(GeneratorConfig(seed=202, max_length=15))

    def test_lcs_length_matches_reference(self):
        for _ in range(40):
            a = self.seq_gen.generate_char_list()
            b = self.seq_gen.generate_char_list()
            self.assertEqual(lcs_length(a, b), brute_lcs_length(a, b))

    def test_lcs_length_bounds(self):
        for _ in range(30):
            a = self.seq_gen.generate_ints()
            b = self.seq_gen.generate_ints()
            self.assertLessEqual(lcs_length(a, b), min(len(a), len(b)))

    def test_lcs_symmetric(self):
        for _ in range(30):
            a = self.seq_gen.generate_char_list()
            b = self.seq_gen.generate_char_list()
            self.assertEqual(lcs_length(a, b), lcs_length(b, a))


class TestSwapProperties(unittest.TestCase):
    def _consumed(self, entries: List[DiffEntry]):
        added = sum(1 for e in entries if e.kind == DiffKind.ADDED)
        removed = sum(1 for e in entries if e.kind == DiffKind.REMOVED)
        changed = sum(1 for e in entries if e.kind == DiffKind.CHANGED)
        return added + changed, removed + changed

    def test_swapping_sides_swaps_consumed_elements(self):
        gen = SimilarSequenceGenerator(GeneratorConfig(seed=456, max_length=20))
        for _ in range(20):
            obtained, expected = gen.generate_pair()
            fwd_obtained, fwd_expected = self._consumed(diff_entries(obtained, expected))
            rev_obtained, rev_expected = self._consumed(diff_entries(expected, obtained))
            self.assertEqual(fwd_obtained, rev_expected)
            self.assertEqual(fwd_expected, rev_obtained)


if __name__ == '__main__':
    unittest.main(verbosity=2)
