"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    """Classification of a single record.

    Values are the labels emitted in reports and lookups.
    """

    MISSING = "Missing"
    VALID = "Valid PAN"
    INVALID = "Invalid PAN"


class ReasonCode(str, Enum):
    """Reason codes, declared in evaluation and emission order.

    Codes are independent facts about a record; several may apply at once.
    """

    MISSING = "MISSING"
    LEN_NE_10 = "LEN_NE_10"
    NON_ALNUM = "NON_ALNUM"
    PATTERN_FAIL = "PATTERN_FAIL"
    FIRST5_NOT_ALPHA = "FIRST5_NOT_ALPHA"
    MID4_NOT_DIGITS = "MID4_NOT_DIGITS"
    ADJ_REPEAT_ALPHA = "ADJ_REPEAT_ALPHA"
    ADJ_REPEAT_DIGITS = "ADJ_REPEAT_DIGITS"
    SEQ_ALPHA_ASC = "SEQ_ALPHA_ASC"
    SEQ_DIGITS_ASC = "SEQ_DIGITS_ASC"


__all__ = ["Status", "ReasonCode"]
