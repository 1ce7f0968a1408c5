"""Identifier grammar and report column definitions.

The PAN grammar is fixed: five uppercase letters, four digits, one uppercase
letter. Character classes are ASCII-only (``[A-Z]``, ``[0-9]``): accented
letters and non-ASCII digits never pass.
"""

from __future__ import annotations

import re
from typing import Dict, List

PAN_LENGTH = 10

# Whole-value checks (used with fullmatch)
ALNUM_RE = re.compile(r"[A-Z0-9]+")
PAN_RE = re.compile(r"[A-Z]{5}[0-9]{4}[A-Z]")

# Prefix checks (used with match, anchored at the start only)
FIRST5_ALPHA_RE = re.compile(r"[A-Z]{5}")
MID4_DIGITS_RE = re.compile(r".{5}[0-9]{4}", re.DOTALL)

# Segments, 0-indexed: letters at 1-5 and digits at 6-9 (1-indexed)
ALPHA_SEGMENT = slice(0, 5)
DIGIT_SEGMENT = slice(5, 9)

_REPORT_COLUMNS: Dict[str, List[str]] = {
    "summary": [
        "total_rows",
        "valid_rows",
        "invalid_rows",
        "missing_rows",
        "valid_pct",
        "invalid_pct",
        "missing_pct",
    ],
    "invalid_by_reason": ["reason", "n", "pct"],
    "invalid_examples": ["reason", "pan_masked"],
    "reason_pairs": ["reason_a", "reason_b", "n"],
    "validations": ["pan_raw", "pan_clean", "status", "reason_codes"],
}


def get_report_columns(report_name: str) -> List[str]:
    """Get the ordered column names of a tabular report.

    Args:
        report_name: One of "summary", "invalid_by_reason", "invalid_examples",
            "reason_pairs" or "validations".

    Returns:
        List of column names in export order.

    Raises:
        ValueError: If the report name is unknown.

    Examples:
        >>> get_report_columns("reason_pairs")
        ['reason_a', 'reason_b', 'n']
    """
    if report_name not in _REPORT_COLUMNS:
        raise ValueError(
            f"Unknown report: {report_name}. Valid reports: {', '.join(_REPORT_COLUMNS)}"
        )
    return list(_REPORT_COLUMNS[report_name])


__all__ = [
    "PAN_LENGTH",
    "ALNUM_RE",
    "PAN_RE",
    "FIRST5_ALPHA_RE",
    "MID4_DIGITS_RE",
    "ALPHA_SEGMENT",
    "DIGIT_SEGMENT",
    "get_report_columns",
]
