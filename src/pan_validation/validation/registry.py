"""Reason check registry and runner.

This module orchestrates validation:
- ALL_CHECKS: List of all reason check instances, in emission order
- validate_pan(): Classifies one raw value and collects every reason that applies
- check_pan(): Ad-hoc lookup for a single value
- run_validation(): Validates a batch and builds the ValidationReport
- print_report(): Displays validation results to console
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from tqdm import tqdm

from pan_validation.core.enums import ReasonCode, Status
from pan_validation.core.normalize import normalize_pan
from .aggregate import masked_examples, reason_frequencies, reason_pairs, summarize
from .checks import ReasonCheck
from .checks.segments import (
    AdjacentRepeatAlphaCheck,
    AdjacentRepeatDigitsCheck,
    AscendingAlphaCheck,
    AscendingDigitsCheck,
)
from .checks.structure import (
    AlphaPrefixCheck,
    AlphanumericCheck,
    DigitBlockCheck,
    LengthCheck,
    PatternCheck,
)
from .config import DEFAULT_MASK_CHAR, DEFAULT_MAX_EXAMPLES
from .models import PanLookup, ValidationReport, ValidationResult

logger = logging.getLogger(__name__)


# Registry of all reason checks
# Order is the emission order of reason codes
ALL_CHECKS: List[ReasonCheck] = [
    # Structure
    LengthCheck(),
    AlphanumericCheck(),
    PatternCheck(),
    AlphaPrefixCheck(),
    DigitBlockCheck(),
    # Segments
    AdjacentRepeatAlphaCheck(),
    AdjacentRepeatDigitsCheck(),
    AscendingAlphaCheck(),
    AscendingDigitsCheck(),
]


def validate_pan(
    raw: Optional[str], checks: Optional[Sequence[ReasonCheck]] = None
) -> ValidationResult:
    """Classify one raw value and collect every reason that applies.

    Blank values are Missing. Otherwise every check runs (no short-circuit)
    and the value is Valid exactly when no reason applies.

    Args:
        raw: Raw value as received.
        checks: Checks to apply, in emission order. Defaults to ALL_CHECKS.

    Returns:
        ValidationResult with status and ordered, distinct reasons.

    Examples:
        >>> validate_pan(" abcde1234f ").reason_names()
        ['SEQ_ALPHA_ASC', 'SEQ_DIGITS_ASC']
        >>> validate_pan("   ").status
        <Status.MISSING: 'Missing'>
    """
    cleaned = normalize_pan(raw)
    if cleaned is None:
        return ValidationResult(
            raw=raw, cleaned=None, status=Status.MISSING, reasons=(ReasonCode.MISSING,)
        )

    reasons: List[ReasonCode] = []
    for check in ALL_CHECKS if checks is None else checks:
        if check.detect(cleaned) and check.reason not in reasons:
            reasons.append(check.reason)

    status = Status.INVALID if reasons else Status.VALID
    return ValidationResult(raw=raw, cleaned=cleaned, status=status, reasons=tuple(reasons))


def check_pan(raw: Optional[str]) -> PanLookup:
    """Look up a single value, with reasons ready to render as JSON.

    Examples:
        >>> check_pan("ABCDE1234F").reasons_json
        '["SEQ_ALPHA_ASC", "SEQ_DIGITS_ASC"]'
        >>> check_pan("BNZPM2501G").reasons_json
        '[]'
    """
    result = validate_pan(raw)
    return PanLookup(input=raw, status=result.status, reasons=result.reasons)


def run_validation(
    values: Iterable[Optional[str]],
    *,
    max_examples: int = DEFAULT_MAX_EXAMPLES,
    mask_char: str = DEFAULT_MASK_CHAR,
    progress: bool = False,
    source: Optional[Path] = None,
) -> ValidationReport:
    """Validate a batch of raw values and build all reports.

    Everything is recomputed from ``values``; nothing is kept between runs.

    Args:
        values: Raw values in input order.
        max_examples: Cap on masked example rows.
        mask_char: Character replacing the last character of examples.
        progress: Show a progress bar while validating.
        source: Path the values were read from, for report headers.

    Returns:
        ValidationReport with per-record results, summary, reason
        frequencies, masked examples and reason pairs.

    Raises:
        ValueError: If ``max_examples`` is negative.

    Examples:
        >>> report = run_validation(["ABCDE1234F", "", "BNZPM2501G"])
        >>> report.stats.total
        3
    """
    values = list(values)
    logger.debug("Validating %d values", len(values))

    results = [
        validate_pan(v)
        for v in tqdm(
            values,
            desc=f"{'Validating PANs':<31}",
            unit="rows",
            disable=not progress,
        )
    ]

    stats = summarize(results)
    logger.info(
        "Validated %d values: %d valid, %d invalid, %d missing",
        stats.total,
        stats.valid,
        stats.invalid,
        stats.missing,
    )

    return ValidationReport(
        results=results,
        stats=stats,
        frequencies=reason_frequencies(results),
        examples=masked_examples(results, limit=max_examples, mask_char=mask_char),
        pairs=reason_pairs(results),
        source=source,
    )


def print_report(report: ValidationReport) -> None:
    """Print validation report to console.

    Displays a summary followed by reason frequencies and reason pairs.

    Args:
        report: ValidationReport to display.

    Examples:
        >>> print_report(run_validation(["ABCDE1234F"]))
        Validation Summary:
          Source: <in-memory>
          Rows: 1 total (0 valid, 1 invalid, 0 missing)
          Shares: valid 0.00%, invalid 100.00%, missing 0.00%

        Invalid by reason:
        ❌ SEQ_ALPHA_ASC: 1 (50.00%)
        ❌ SEQ_DIGITS_ASC: 1 (50.00%)

        Reason pairs:
           - SEQ_ALPHA_ASC + SEQ_DIGITS_ASC: 1
    """
    print(report.to_console_summary())
