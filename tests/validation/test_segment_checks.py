"""Tests for the segment reason checks."""

import pytest

from pan_validation.core.enums import ReasonCode
from pan_validation.validation.checks.segments import (
    AdjacentRepeatAlphaCheck,
    AdjacentRepeatDigitsCheck,
    AscendingAlphaCheck,
    AscendingDigitsCheck,
)


@pytest.mark.parametrize(
    "check,reason",
    [
        (AdjacentRepeatAlphaCheck(), ReasonCode.ADJ_REPEAT_ALPHA),
        (AdjacentRepeatDigitsCheck(), ReasonCode.ADJ_REPEAT_DIGITS),
        (AscendingAlphaCheck(), ReasonCode.SEQ_ALPHA_ASC),
        (AscendingDigitsCheck(), ReasonCode.SEQ_DIGITS_ASC),
    ],
)
def test_reason_codes(check, reason):
    """Each segment check emits its own reason."""
    assert check.reason == reason


def test_repeat_in_prefix_only():
    """Test that a repeat is attributed to the segment it occurs in."""
    assert AdjacentRepeatAlphaCheck().detect("AABCD2501G") is True
    assert AdjacentRepeatDigitsCheck().detect("AABCD2501G") is False


def test_repeat_in_digit_block_only():
    """A repeat in the digit block only fires the digit check."""
    assert AdjacentRepeatAlphaCheck().detect("BNZPM1123G") is False
    assert AdjacentRepeatDigitsCheck().detect("BNZPM1123G") is True


def test_repeat_across_segment_boundary_is_ignored():
    """Positions 5 and 6 belong to different segments."""
    value = "BNZP11501G"
    assert AdjacentRepeatAlphaCheck().detect(value) is False
    assert AdjacentRepeatDigitsCheck().detect(value) is False


def test_repeat_in_last_character_is_ignored():
    """The final letter is outside both segments."""
    assert AdjacentRepeatDigitsCheck().detect("BNZPM2501GG") is False


def test_ascending_segments():
    """Ascending runs are detected per segment."""
    assert AscendingAlphaCheck().detect("ABCDE2501G") is True
    assert AscendingDigitsCheck().detect("BNZPM6789G") is True
    assert AscendingAlphaCheck().detect("BNZPM6789G") is False
    assert AscendingDigitsCheck().detect("ABCDE2501G") is False


def test_segments_apply_to_whatever_characters_are_present():
    """Segment checks look at positions, not at what the grammar expects there."""
    assert AscendingAlphaCheck().detect("12345ABCDE") is True
    assert AscendingDigitsCheck().detect("12345ABCDE") is True


@pytest.mark.parametrize("value", ["A", "AB", "ABCDE", "ABCDE1"])
def test_short_values_do_not_raise(value):
    """Short values yield partial or empty segments, never errors."""
    assert AdjacentRepeatDigitsCheck().detect(value) is False
    assert AscendingDigitsCheck().detect(value) is False
