"""Structural checks: length, alphabet and the PAN grammar.

PATTERN_FAIL covers the whole grammar. FIRST5_NOT_ALPHA and MID4_NOT_DIGITS are
looser, position-anchored checks that point at the part of the value that is
wrong; they may pass while the overall pattern fails on trailing content.
"""

from __future__ import annotations

from pan_validation.core.enums import ReasonCode
from pan_validation.core.schemas import (
    ALNUM_RE,
    FIRST5_ALPHA_RE,
    MID4_DIGITS_RE,
    PAN_LENGTH,
    PAN_RE,
)


class LengthCheck:
    """Value must be exactly 10 characters long."""

    reason = ReasonCode.LEN_NE_10

    def detect(self, cleaned: str) -> bool:
        return len(cleaned) != PAN_LENGTH


class AlphanumericCheck:
    """Value must contain only uppercase ASCII letters and digits."""

    reason = ReasonCode.NON_ALNUM

    def detect(self, cleaned: str) -> bool:
        return ALNUM_RE.fullmatch(cleaned) is None


class PatternCheck:
    """Value must match AAAAA9999A exactly."""

    reason = ReasonCode.PATTERN_FAIL

    def detect(self, cleaned: str) -> bool:
        return PAN_RE.fullmatch(cleaned) is None


class AlphaPrefixCheck:
    """The first 5 characters must be uppercase letters."""

    reason = ReasonCode.FIRST5_NOT_ALPHA

    def detect(self, cleaned: str) -> bool:
        return FIRST5_ALPHA_RE.match(cleaned) is None


class DigitBlockCheck:
    """Characters 6-9 must be digits; values shorter than 9 characters fail."""

    reason = ReasonCode.MID4_NOT_DIGITS

    def detect(self, cleaned: str) -> bool:
        return MID4_DIGITS_RE.match(cleaned) is None


__all__ = [
    "LengthCheck",
    "AlphanumericCheck",
    "PatternCheck",
    "AlphaPrefixCheck",
    "DigitBlockCheck",
]
