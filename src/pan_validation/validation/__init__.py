"""Validation system for PAN Validation Tools.

This module provides the diagnostic engine for PAN-like identifiers:

- **Models**: ValidationResult, PanLookup, ValidationReport and the batch report rows
- **Checks**: One check per reason code (see validation/checks/)
- **Config**: Reporting defaults and YAML settings (import from .config)
- **Aggregate**: Summary, reason frequency, masked examples and reason pairs
- **Registry**: validate_pan(), check_pan(), run_validation(), print_report()

Public API:
    ValidationResult: Status and ordered reason codes for one raw value
    ValidationReport: Batch results with Markdown/JSON/CSV renderers
    validate_pan: Classify a single raw value
    check_pan: Ad-hoc lookup with reasons rendered as JSON
    run_validation: Validate a batch and build every report
    print_report: Display a batch report on the console

Usage:
    >>> from pan_validation.validation import run_validation, print_report
    >>> report = run_validation(["ABCDE1234F", "  bnzpm2501g ", None])
    >>> print_report(report)
"""

from __future__ import annotations

from pan_validation.core.enums import ReasonCode, Status

from .models import PanLookup, SummaryStats, ValidationReport, ValidationResult
from .registry import check_pan, print_report, run_validation, validate_pan

__all__ = [
    # Data models
    "ValidationResult",
    "PanLookup",
    "SummaryStats",
    "ValidationReport",
    # Runner functions
    "validate_pan",
    "check_pan",
    "run_validation",
    "print_report",
    # Enums
    "ReasonCode",
    "Status",
]
