"""Validation data models.

This module defines core data structures for validation results:
- ValidationResult: Outcome of validating a single raw value
- PanLookup: Ad-hoc lookup answer with reasons rendered as JSON
- SummaryStats, ReasonFrequency, MaskedExample, ReasonPair: batch reports
- ValidationReport: All batch reports for one run, with renderers
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pandas as pd

from pan_validation.core.enums import ReasonCode, Status
from pan_validation.core.schemas import get_report_columns
from pan_validation.core.utils import percentage


@dataclass(frozen=True)
class ValidationResult:
    """Result of validating one raw value.

    Attributes:
        raw: The value as received (may be ``None``).
        cleaned: Trimmed, uppercased value; ``None`` when blank.
        status: Missing, Valid PAN or Invalid PAN.
        reasons: Distinct reason codes in emission order.

    Examples:
        >>> ValidationResult(
        ...     raw="abcde1234f",
        ...     cleaned="ABCDE1234F",
        ...     status=Status.INVALID,
        ...     reasons=(ReasonCode.SEQ_ALPHA_ASC, ReasonCode.SEQ_DIGITS_ASC),
        ... )
    """

    raw: Optional[str]
    cleaned: Optional[str]
    status: Status
    reasons: Tuple[ReasonCode, ...] = ()

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if (self.status == Status.MISSING) != (self.cleaned is None):
            raise ValueError("status=Missing requires cleaned=None and vice versa")
        if (ReasonCode.MISSING in self.reasons) != (self.status == Status.MISSING):
            raise ValueError("MISSING reason must be present exactly when status=Missing")
        if self.status == Status.VALID and self.reasons:
            raise ValueError("status=Valid requires no reasons")
        if self.status == Status.INVALID and not self.reasons:
            raise ValueError("status=Invalid requires at least one reason")
        if len(set(self.reasons)) != len(self.reasons):
            raise ValueError(f"Duplicate reasons: {[r.value for r in self.reasons]}")

    @property
    def is_invalid(self) -> bool:
        return self.status == Status.INVALID

    def reason_names(self) -> List[str]:
        """Reason codes as plain strings, in emission order."""
        return [r.value for r in self.reasons]


@dataclass(frozen=True)
class PanLookup:
    """Answer of an ad-hoc lookup for a single value."""

    input: Optional[str]
    status: Status
    reasons: Tuple[ReasonCode, ...] = ()

    @property
    def reasons_json(self) -> str:
        """Reasons as a JSON array of strings (``[]`` when none apply)."""
        return json.dumps([r.value for r in self.reasons])

    def to_dict(self) -> Dict[str, object]:
        return {
            "input": self.input,
            "status": self.status.value,
            "reasons": [r.value for r in self.reasons],
        }


@dataclass(frozen=True)
class SummaryStats:
    """Overall counts and their share of the total.

    Percentages are ``None`` when ``total`` is 0.
    """

    total: int
    valid: int
    invalid: int
    missing: int
    valid_pct: Optional[float] = None
    invalid_pct: Optional[float] = None
    missing_pct: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if min(self.total, self.valid, self.invalid, self.missing) < 0:
            raise ValueError("Counts must be non-negative")
        if self.valid + self.invalid + self.missing != self.total:
            raise ValueError(
                f"Status counts ({self.valid}+{self.invalid}+{self.missing}) "
                f"do not add up to total {self.total}"
            )

    @classmethod
    def from_counts(cls, valid: int, invalid: int, missing: int) -> "SummaryStats":
        """Build stats from status counts, computing the percentages."""
        total = valid + invalid + missing
        return cls(
            total=total,
            valid=valid,
            invalid=invalid,
            missing=missing,
            valid_pct=percentage(valid, total),
            invalid_pct=percentage(invalid, total),
            missing_pct=percentage(missing, total),
        )

    def merge(self, other: "SummaryStats") -> "SummaryStats":
        """Combine stats of two disjoint shards of the input.

        Examples:
            >>> a = SummaryStats.from_counts(valid=1, invalid=1, missing=0)
            >>> b = SummaryStats.from_counts(valid=0, invalid=1, missing=1)
            >>> a.merge(b).invalid_pct
            50.0
        """
        return SummaryStats.from_counts(
            valid=self.valid + other.valid,
            invalid=self.invalid + other.invalid,
            missing=self.missing + other.missing,
        )

    def to_dict(self) -> Dict[str, object]:
        return {
            "total_rows": self.total,
            "valid_rows": self.valid,
            "invalid_rows": self.invalid,
            "missing_rows": self.missing,
            "valid_pct": self.valid_pct,
            "invalid_pct": self.invalid_pct,
            "missing_pct": self.missing_pct,
        }


@dataclass(frozen=True)
class ReasonFrequency:
    """How often a reason appears among invalid records.

    ``pct`` is relative to the sum of all reason occurrences, so values across
    reasons do not sum to 100 when records carry several reasons.
    """

    reason: ReasonCode
    count: int
    pct: Optional[float]

    def to_dict(self) -> Dict[str, object]:
        return {"reason": self.reason.value, "n": self.count, "pct": self.pct}


@dataclass(frozen=True)
class MaskedExample:
    """One (record, reason) row with the value's last character masked."""

    reason: ReasonCode
    pan_masked: str

    def to_dict(self) -> Dict[str, object]:
        return {"reason": self.reason.value, "pan_masked": self.pan_masked}


@dataclass(frozen=True)
class ReasonPair:
    """Two distinct reasons seen together on ``count`` invalid records."""

    reason_a: ReasonCode
    reason_b: ReasonCode
    count: int

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not self.reason_a.value < self.reason_b.value:
            raise ValueError(
                f"Pair must be canonical: {self.reason_a.value} < {self.reason_b.value}"
            )

    def to_dict(self) -> Dict[str, object]:
        return {"reason_a": self.reason_a.value, "reason_b": self.reason_b.value, "n": self.count}


@dataclass
class ValidationReport:
    """Batch validation results and the reports derived from them.

    Attributes:
        results: Per-record results in input order.
        stats: Overall counts and percentages.
        frequencies: Reason frequencies among invalid records.
        examples: Masked (reason, value) rows for invalid records.
        pairs: Co-occurring reason pairs among invalid records.
        source: Path of the validated input, when read from a file.

    Examples:
        >>> report = run_validation(["ABCDE1234F", "", "BNZPM2501G"])
        >>> report.stats.invalid
        1
        >>> print(report.summary())
    """

    results: List[ValidationResult]
    stats: SummaryStats
    frequencies: List[ReasonFrequency] = field(default_factory=list)
    examples: List[MaskedExample] = field(default_factory=list)
    pairs: List[ReasonPair] = field(default_factory=list)
    source: Optional[Path] = None

    def has_invalid(self) -> bool:
        """Return True if any record was classified Invalid."""
        return self.stats.invalid > 0

    def _source_name(self) -> str:
        return self.source.name if self.source is not None else "<in-memory>"

    @staticmethod
    def _fmt_pct(value: Optional[float]) -> str:
        return "n/a" if value is None else f"{value:.2f}%"

    def summary(self) -> str:
        """Generate a concise text summary of the run.

        Examples:
            >>> print(report.summary())
            Validation Summary:
              Source: pan_numbers.csv
              Rows: 3 total (1 valid, 1 invalid, 1 missing)
              Shares: valid 33.33%, invalid 33.33%, missing 33.33%
        """
        s = self.stats
        return (
            f"Validation Summary:\n"
            f"  Source: {self._source_name()}\n"
            f"  Rows: {s.total} total ({s.valid} valid, {s.invalid} invalid, "
            f"{s.missing} missing)\n"
            f"  Shares: valid {self._fmt_pct(s.valid_pct)}, "
            f"invalid {self._fmt_pct(s.invalid_pct)}, "
            f"missing {self._fmt_pct(s.missing_pct)}"
        )

    def to_console_summary(self, top: int = 10) -> str:
        """Generate a concise summary for console output.

        Args:
            top: Number of reasons and pairs to list.
        """
        lines = [self.summary(), ""]

        if not self.has_invalid():
            lines.append("✅ No invalid values found.")
            return "\n".join(lines)

        lines.append("Invalid by reason:")
        for freq in self.frequencies[:top]:
            lines.append(f"❌ {freq.reason.value}: {freq.count} ({self._fmt_pct(freq.pct)})")

        if self.pairs:
            lines.append("")
            lines.append("Reason pairs:")
            for pair in self.pairs[:top]:
                lines.append(f"   - {pair.reason_a.value} + {pair.reason_b.value}: {pair.count}")

        return "\n".join(lines)

    def to_markdown(self) -> str:
        """Generate a detailed Markdown validation report.

        Returns:
            Formatted Markdown with the summary, reason frequencies, masked
            examples and reason pairs.
        """
        s = self.stats
        lines = [
            f"# Validation Report: {self._source_name()}",
            "",
            f"**Generated:** {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
            "",
            "## Summary",
            "",
            f"- **Total Rows:** {s.total}",
            f"- **Valid:** {s.valid} ({self._fmt_pct(s.valid_pct)}) ✅",
            f"- **Invalid:** {s.invalid} ({self._fmt_pct(s.invalid_pct)})"
            + (" ❌" if s.invalid else ""),
            f"- **Missing:** {s.missing} ({self._fmt_pct(s.missing_pct)})"
            + (" ⚠️" if s.missing else ""),
            "",
        ]

        if not self.has_invalid():
            lines.append("## ✅ No Invalid Values")
            lines.append("")
            lines.append("Every non-missing value matches the PAN format.")
            lines.append("")
            return "\n".join(lines)

        lines.append("## ❌ Invalid by Reason")
        lines.append("")
        lines.append("| Reason | Count | Share |")
        lines.append("|---|---:|---:|")
        for freq in self.frequencies:
            lines.append(f"| {freq.reason.value} | {freq.count} | {self._fmt_pct(freq.pct)} |")
        lines.append("")
        lines.append(
            "Shares are relative to all reason occurrences; a value failing several "
            "rules is counted once per rule."
        )
        lines.append("")

        if self.examples:
            lines.append("## Examples (masked)")
            lines.append("")
            lines.append("| Reason | Value |")
            lines.append("|---|---|")
            for ex in self.examples:
                lines.append(f"| {ex.reason.value} | `{ex.pan_masked}` |")
            lines.append("")

        if self.pairs:
            lines.append("## Reason Pairs")
            lines.append("")
            lines.append("| Reason A | Reason B | Count |")
            lines.append("|---|---|---:|")
            for pair in self.pairs:
                lines.append(f"| {pair.reason_a.value} | {pair.reason_b.value} | {pair.count} |")
            lines.append("")

        return "\n".join(lines)

    def to_json(self) -> str:
        """Generate a detailed JSON validation report."""
        report_data = {
            "metadata": {
                "source": self.source.name if self.source is not None else None,
                "generated_at": datetime.now().isoformat(),
            },
            "summary": self.stats.to_dict(),
            "invalid_by_reason": [f.to_dict() for f in self.frequencies],
            "invalid_examples": [e.to_dict() for e in self.examples],
            "reason_pairs": [p.to_dict() for p in self.pairs],
        }
        return json.dumps(report_data, indent=2, ensure_ascii=False)

    def to_frames(self) -> Dict[str, pd.DataFrame]:
        """Tabular views of the report, keyed by report name.

        Per-record results are included under "validations"; raw values are
        kept there, so that frame is not meant for sharing.
        """
        validations = [
            {
                "pan_raw": r.raw,
                "pan_clean": r.cleaned,
                "status": r.status.value,
                "reason_codes": json.dumps(r.reason_names()),
            }
            for r in self.results
        ]
        return {
            "summary": pd.DataFrame(
                [self.stats.to_dict()], columns=get_report_columns("summary")
            ),
            "invalid_by_reason": pd.DataFrame(
                [f.to_dict() for f in self.frequencies],
                columns=get_report_columns("invalid_by_reason"),
            ),
            "invalid_examples": pd.DataFrame(
                [e.to_dict() for e in self.examples],
                columns=get_report_columns("invalid_examples"),
            ),
            "reason_pairs": pd.DataFrame(
                [p.to_dict() for p in self.pairs],
                columns=get_report_columns("reason_pairs"),
            ),
            "validations": pd.DataFrame(validations, columns=get_report_columns("validations")),
        }

    def export_csv(self, out_dir: Path) -> List[Path]:
        """Write the shareable reports as CSV files with headers.

        Writes summary.csv, invalid_by_reason.csv, invalid_examples.csv and
        reason_pairs.csv. Per-record validations are not exported.

        Returns:
            Paths of the written files.
        """
        out_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for name, df in self.to_frames().items():
            if name == "validations":
                continue
            path = out_dir / f"{name}.csv"
            df.to_csv(path, index=False)
            written.append(path)
        return written
