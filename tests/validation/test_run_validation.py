"""Unit tests for run_validation() and print_report()."""

from __future__ import annotations

from pathlib import Path

import pytest

from pan_validation.core.enums import Status
from pan_validation.validation import print_report, run_validation
from pan_validation.validation.models import ValidationReport


class TestRunValidation:
    """Tests for run_validation()."""

    def test_builds_every_report(self, sample_values):
        """Test a batch run builds every report."""
        report = run_validation(sample_values)

        assert isinstance(report, ValidationReport)
        assert len(report.results) == 6
        assert [r.status for r in report.results] == [
            Status.INVALID,
            Status.INVALID,
            Status.VALID,
            Status.MISSING,
            Status.MISSING,
            Status.INVALID,
        ]
        assert report.stats.invalid == 3
        assert report.frequencies[0].count == 2
        assert len(report.examples) == 6
        assert len(report.pairs) == 3
        assert report.source is None

    def test_accepts_any_iterable(self, sample_values):
        """Values can come from any iterable."""
        report = run_validation(iter(sample_values))
        assert report.stats.total == 6

    def test_max_examples_and_mask_char(self, sample_values):
        """Example cap and mask character are applied."""
        report = run_validation(sample_values, max_examples=2, mask_char="#")
        assert [e.pan_masked for e in report.examples] == ["ABCDE1234#", "ABCDE1234#"]

    def test_negative_max_examples_raises(self, sample_values):
        """A negative example cap raises ValueError."""
        with pytest.raises(ValueError):
            run_validation(sample_values, max_examples=-5)

    def test_source_is_recorded(self, sample_values):
        """The source path is kept for report headers."""
        report = run_validation(sample_values, source=Path("data/pan_numbers.csv"))
        assert report.source == Path("data/pan_numbers.csv")

    def test_runs_are_independent(self, sample_values):
        """Nothing carries over from one run to the next."""
        first = run_validation(sample_values)
        run_validation(["ABCDE1234F"] * 100)
        again = run_validation(sample_values)
        assert again.stats == first.stats
        assert again.frequencies == first.frequencies
        assert again.pairs == first.pairs

    def test_empty_input(self):
        """An empty batch has zero counts and no percentages."""
        report = run_validation([])
        assert report.stats.total == 0
        assert report.frequencies == []
        assert report.examples == []
        assert report.pairs == []
        assert report.has_invalid() is False

    def test_with_progress_bar(self, sample_values):
        """The progress bar does not change the results."""
        report = run_validation(sample_values, progress=True)
        assert report.stats.total == 6


def test_print_report(sample_values, capsys):
    """Test console report for a mixed batch."""
    print_report(run_validation(sample_values))
    out = capsys.readouterr().out
    assert "Validation Summary:" in out
    assert "Invalid by reason:" in out


def test_print_report_all_valid(capsys):
    """Test console report when every value is valid."""
    print_report(run_validation(["BNZPM2501G"]))
    assert "No invalid values found" in capsys.readouterr().out
