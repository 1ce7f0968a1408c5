"""Shared pytest configuration and fixtures for PAN validation testing."""

from pathlib import Path
from typing import List, Optional

import pytest

from pan_validation.validation.models import ValidationResult
from pan_validation.validation.registry import validate_pan


# A small batch covering every status:
#   ABCDE1234F  invalid: SEQ_ALPHA_ASC, SEQ_DIGITS_ASC
#   AABCD1234E  invalid: ADJ_REPEAT_ALPHA, SEQ_DIGITS_ASC
#   BNZPM2501G  valid
#   "" / None   missing
#   BNZPM2501   invalid: LEN_NE_10, PATTERN_FAIL
SAMPLE_VALUES: List[Optional[str]] = [
    "ABCDE1234F",
    "AABCD1234E",
    "BNZPM2501G",
    "",
    None,
    "BNZPM2501",
]


@pytest.fixture
def sample_values() -> List[Optional[str]]:
    """Raw values of the sample batch."""
    return list(SAMPLE_VALUES)


@pytest.fixture
def sample_results(sample_values) -> List[ValidationResult]:  # pylint: disable=redefined-outer-name
    """Validation results of the sample batch, in input order."""
    return [validate_pan(v) for v in sample_values]


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    """CSV input with a pan_raw column, one blank line and one whitespace-only cell."""
    csv_path = tmp_path / "pan_numbers.csv"
    csv_path.write_text(
        "pan_raw\n"
        "ABCDE1234F\n"
        "aabcd1234e\n"
        "\n"
        "   \n"
        " BNZPM2501G \n"
        "NA\n",
        encoding="utf-8",
    )
    return csv_path
