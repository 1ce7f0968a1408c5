"""Segment checks: adjacent repeats and ascending runs.

Each check inspects one segment (the alpha prefix or the digit block) and is
applied whatever the segment actually contains, so a short or malformed value
is still checked on the characters that are present.
"""

from __future__ import annotations

from typing import Callable

from pan_validation.core.enums import ReasonCode
from pan_validation.core.segments import (
    alpha_segment,
    digit_segment,
    has_adjacent_repeat,
    is_ascending_sequence,
)


class _SegmentCheck:
    """Apply a segment predicate to one segment of the value."""

    reason: ReasonCode

    def __init__(
        self,
        reason: ReasonCode,
        segment: Callable[[str], str],
        predicate: Callable[[str], bool],
    ) -> None:
        self.reason = reason
        self._segment = segment
        self._predicate = predicate

    def detect(self, cleaned: str) -> bool:
        return self._predicate(self._segment(cleaned))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason.value})"


class AdjacentRepeatAlphaCheck(_SegmentCheck):
    """No two neighbouring letters in the prefix may be the same."""

    def __init__(self) -> None:
        super().__init__(ReasonCode.ADJ_REPEAT_ALPHA, alpha_segment, has_adjacent_repeat)


class AdjacentRepeatDigitsCheck(_SegmentCheck):
    """No two neighbouring digits in the digit block may be the same."""

    def __init__(self) -> None:
        super().__init__(ReasonCode.ADJ_REPEAT_DIGITS, digit_segment, has_adjacent_repeat)


class AscendingAlphaCheck(_SegmentCheck):
    """The prefix must not be a strictly ascending run such as ABCDE."""

    def __init__(self) -> None:
        super().__init__(ReasonCode.SEQ_ALPHA_ASC, alpha_segment, is_ascending_sequence)


class AscendingDigitsCheck(_SegmentCheck):
    """The digit block must not be a strictly ascending run such as 1234."""

    def __init__(self) -> None:
        super().__init__(ReasonCode.SEQ_DIGITS_ASC, digit_segment, is_ascending_sequence)


__all__ = [
    "AdjacentRepeatAlphaCheck",
    "AdjacentRepeatDigitsCheck",
    "AscendingAlphaCheck",
    "AscendingDigitsCheck",
]
