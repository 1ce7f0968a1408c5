"""Core utility functions for PAN Validation Tools.

This module provides shared utilities used across the project.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Optional

PERCENT_DECIMALS = 2


def percentage(count: int, total: int, decimals: int = PERCENT_DECIMALS) -> Optional[float]:
    """Compute ``100 * count / total`` rounded half-up.

    Args:
        count: Numerator.
        total: Denominator. Zero yields ``None`` instead of raising.
        decimals: Number of decimal places to keep.

    Returns:
        Rounded percentage, or ``None`` when ``total`` is 0.

    Examples:
        >>> percentage(1, 3)
        33.33
        >>> percentage(1, 8)
        12.5
        >>> percentage(0, 0) is None
        True
    """
    if total == 0:
        return None
    value = Decimal(100 * count) / Decimal(total)
    quantum = Decimal(1).scaleb(-decimals)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def get_report_paths(input_path: Path, report_dir: Optional[Path] = None) -> tuple[Path, Path]:
    """Get Markdown and JSON report paths for an input file.

    Reports follow the naming convention ``{stem}_validation.md`` and
    ``{stem}_validation.json``, written next to the input unless a report
    directory is given.

    Args:
        input_path: Path to the validated input file.
        report_dir: Optional directory for the reports.

    Returns:
        A tuple of (markdown_path, json_path).

    Examples:
        >>> md, js = get_report_paths(Path("data/pan_numbers.csv"))
        >>> print(md)
        data/pan_numbers_validation.md
        >>> print(js)
        data/pan_numbers_validation.json
    """
    target_dir = report_dir if report_dir is not None else input_path.parent
    markdown_path = target_dir / f"{input_path.stem}_validation.md"
    json_path = target_dir / f"{input_path.stem}_validation.json"
    return markdown_path, json_path
