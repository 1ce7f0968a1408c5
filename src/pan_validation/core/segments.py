"""Segment predicates shared by the alpha prefix and the digit block.

Both predicates work on any text, so the same helpers serve the 5-letter
prefix and the 4-digit middle block. Short or empty segments are ordinary
input: they simply cannot contain a repeat or a sequence.
"""

from __future__ import annotations

from typing import Optional

from pan_validation.core.schemas import ALPHA_SEGMENT, DIGIT_SEGMENT


def has_adjacent_repeat(segment: Optional[str]) -> bool:
    """Return True when two neighbouring characters are identical.

    Examples:
        >>> has_adjacent_repeat("AABCD")
        True
        >>> has_adjacent_repeat("A")
        False
    """
    if segment is None or len(segment) < 2:
        return False
    return any(a == b for a, b in zip(segment, segment[1:]))


def is_ascending_sequence(segment: Optional[str]) -> bool:
    """Return True when every next character is exactly one code point higher.

    A single character is never a sequence. There is no wraparound, so
    ``"XYZA"`` is not ascending.

    Examples:
        >>> is_ascending_sequence("ABCDE")
        True
        >>> is_ascending_sequence("1235")
        False
    """
    if segment is None or len(segment) < 2:
        return False
    return all(ord(b) - ord(a) == 1 for a, b in zip(segment, segment[1:]))


def alpha_segment(cleaned: str) -> str:
    """Return the 5-character alpha prefix (shorter if the value is short)."""
    return cleaned[ALPHA_SEGMENT]


def digit_segment(cleaned: str) -> str:
    """Return the 4-character digit block at positions 6-9 (may be shorter or empty)."""
    return cleaned[DIGIT_SEGMENT]


__all__ = [
    "has_adjacent_repeat",
    "is_ascending_sequence",
    "alpha_segment",
    "digit_segment",
]
