"""Tests for distance primitives: Levenshtein, Hamming, and the edit distance.

This module tests the distance functions provided by fuzzystring and the
similarities derived from them.
"""

import pytest

import fuzzystring as fs


class TestLevenshtein:
    """Tests for Levenshtein distance functions."""

    def test_identical_strings(self):
        assert fs.levenshtein_distance("hello", "hello") == 0, "Identical strings should have distance 0"
        assert fs.levenshtein_distance("", "") == 0, "Two empty strings should have distance 0"

    def test_empty_strings(self):
        assert fs.levenshtein_distance("hello", "") == 5, "Distance to empty string equals string length"
        assert fs.levenshtein_distance("", "hello") == 5, "Distance from empty string equals target length"

    def test_classic_examples(self):
        # kitten -> sitten (s for k) -> sittin (i for e) -> sitting (g added) = 3 edits
        assert fs.levenshtein_distance("kitten", "sitting") == 3, "kitten->sitting requires 3 edits"
        assert fs.levenshtein_distance("saturday", "sunday") == 3, "saturday->sunday requires 3 edits"
        assert fs.levenshtein_distance("beauties", "beautiful") == 3

    def test_returns_float(self):
        assert isinstance(fs.levenshtein_distance("kitten", "sitting"), float)
        assert isinstance(fs.levenshtein_distance("", "abc"), float)

    def test_unicode(self):
        assert fs.levenshtein_distance("café", "cafe") == 1, "Accent difference is 1 edit"
        assert fs.levenshtein_distance("日本語", "日本") == 1

    def test_similarity(self):
        assert fs.levenshtein_similarity("hello", "hello") == 1.0
        assert fs.levenshtein_similarity("hello", "") == 0.0
        # "hello" vs "hallo": 1 edit out of 5 chars = 0.8 similarity
        assert fs.levenshtein_similarity("hello", "hallo") == 0.8
        assert fs.levenshtein_similarity("beauties", "beautiful") == pytest.approx(2 / 3)


class TestHamming:
    """Tests for Hamming distance and similarity."""

    def test_hamming_distance(self):
        assert fs.hamming_distance("karolin", "kathrin") == 3
        assert fs.hamming_distance("1011101", "1001001") == 2

    def test_hamming_length_mismatch_is_maximal(self):
        # Different lengths are incomparable: the distance is the longer length
        assert fs.hamming_distance("abc", "ab") == 3
        assert fs.hamming_distance("ab", "abcde") == 5
        assert fs.hamming_distance("abc", "abcd") == 4

    def test_hamming_empty(self):
        assert fs.hamming_distance("", "") == 0
        assert fs.hamming_distance("abc", "") == 3

    def test_hamming_similarity(self):
        assert fs.hamming_similarity("abc", "axc") == pytest.approx(2 / 3)
        assert fs.hamming_similarity("karolin", "kathrin") == pytest.approx(4 / 7)

    @pytest.mark.parametrize(
        "a, b",
        [("abc", "abcd"), ("abc", "ab"), ("beauties", "beautiful"), ("a", "aaaaaaaa")],
    )
    def test_hamming_similarity_length_mismatch_is_zero(self, a, b):
        assert fs.hamming_similarity(a, b) == 0.0
        assert fs.hamming_similarity(b, a) == 0.0


class TestEditDistance:
    """Tests for the positional edit distance."""

    def test_positional_mismatches_plus_length_difference(self):
        # "beautie" vs "beautif" differ at 2 positions, plus 1 extra character
        assert fs.edit_distance("beauties", "beautiful") == 3
        assert fs.edit_distance("abc", "abcdef") == 3
        assert fs.edit_distance("abc", "xbc") == 1

    def test_insertion_at_start_shifts_everything(self):
        # Not an alignment: one inserted character misaligns every position
        assert fs.edit_distance("abcd", "xabcd") == 5
        assert fs.levenshtein_distance("abcd", "xabcd") == 1

    def test_empty(self):
        assert fs.edit_distance("", "") == 0
        assert fs.edit_distance("", "abc") == 3
        assert fs.edit_distance("abcd", "") == 4

    def test_edit_similarity(self):
        assert fs.edit_similarity("beauties", "beautiful") == pytest.approx(1 - 3 / 9)
        assert fs.edit_similarity("abcd", "xabcd") == 0.0
        assert fs.edit_similarity("abc", "abc") == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
