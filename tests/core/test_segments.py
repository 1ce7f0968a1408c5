"""Tests for the segment predicates and segment slicing."""

import pytest

from pan_validation.core.segments import (
    alpha_segment,
    digit_segment,
    has_adjacent_repeat,
    is_ascending_sequence,
)


class TestHasAdjacentRepeat:
    """Tests for has_adjacent_repeat()."""

    @pytest.mark.parametrize("segment", ["AABCD", "ABCDD", "ABBCD", "1123", "1233", "  "])
    def test_detects_repeat(self, segment):
        """Adjacent equal characters are detected."""
        assert has_adjacent_repeat(segment) is True

    @pytest.mark.parametrize("segment", ["ABCDE", "ABABA", "1212", "BNZPM", "2501"])
    def test_no_repeat(self, segment):
        """Segments without repeats pass."""
        assert has_adjacent_repeat(segment) is False

    @pytest.mark.parametrize("segment", [None, "", "A"])
    def test_short_segments_never_repeat(self, segment):
        """Segments shorter than two characters never repeat."""
        assert has_adjacent_repeat(segment) is False


class TestIsAscendingSequence:
    """Tests for is_ascending_sequence()."""

    @pytest.mark.parametrize("segment", ["ABCDE", "VWXYZ", "1234", "6789", "AB", "89"])
    def test_detects_sequence(self, segment):
        """Strictly ascending runs are detected."""
        assert is_ascending_sequence(segment) is True

    @pytest.mark.parametrize(
        "segment",
        [
            "ABCDF",  # gap
            "EDCBA",  # descending
            "XYZAB",  # no wraparound
            "8901",  # no wraparound for digits
            "AACDE",  # repeat breaks the chain
            "abcde",  # case-sensitive: lowercase is a different range
            "aBCDE",
        ],
    )
    def test_not_a_sequence(self, segment):
        """Other orderings are not sequences."""
        assert is_ascending_sequence(segment) is False

    @pytest.mark.parametrize("segment", [None, "", "A", "5"])
    def test_single_character_is_not_a_sequence(self, segment):
        """A single character is not a sequence."""
        assert is_ascending_sequence(segment) is False


def test_segments_of_full_value():
    """Test that segments cover positions 1-5 and 6-9."""
    assert alpha_segment("ABCDE1234F") == "ABCDE"
    assert digit_segment("ABCDE1234F") == "1234"


@pytest.mark.parametrize(
    "value,alpha,digits",
    [
        ("ABC", "ABC", ""),
        ("ABCDE", "ABCDE", ""),
        ("ABCDE12", "ABCDE", "12"),
        ("ABCDE12345678", "ABCDE", "1234"),
    ],
)
def test_segments_of_short_or_long_values(value, alpha, digits):
    """Test that slicing past the end yields the remaining characters or ''."""
    assert alpha_segment(value) == alpha
    assert digit_segment(value) == digits
