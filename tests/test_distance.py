"""Tests for catalogmatch.distance module."""

import pytest

from catalogmatch.distance import levenshtein


class TestLevenshtein:
    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("intention", "execution", 5),
            ("same", "same", 0),
            ("a", "b", 1),
            ("abc", "abcd", 1),
        ],
    )
    def test_known_distances(self, a: str, b: str, expected: int):
        assert levenshtein(a, b) == expected

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [("", "abc", 3), ("abc", "", 3), ("", "", 0)],
    )
    def test_empty_input_is_other_length(self, a: str, b: str, expected: int):
        assert levenshtein(a, b) == expected

    def test_symmetric(self):
        assert levenshtein("sitting", "kitten") == levenshtein("kitten", "sitting")

    def test_case_sensitive(self):
        # Normalisation happens in the similarity layer, not here
        assert levenshtein("Apple", "apple") == 1

    def test_unicode_characters(self):
        assert levenshtein("café", "cafe") == 1
