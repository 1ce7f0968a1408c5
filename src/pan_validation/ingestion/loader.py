"""Load raw values from CSV/TSV tables or plain text files.

Values are kept exactly as stored: no trimming, no case changes and no
NA-token guessing (a literal ``NA`` stays a string). Blank cells and blank
lines come through as ``None`` or ``""`` and are classified Missing later.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from pan_validation.validation.config import DEFAULT_INPUT_COLUMN

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".tsv", ".txt")


def _read_table(input_path: Path, column: str) -> List[Optional[str]]:
    sep = "\t" if input_path.suffix.lower() == ".tsv" else ","
    try:
        df = pd.read_csv(
            input_path,
            sep=sep,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=False,
            encoding="utf-8-sig",
        )
    except (OSError, UnicodeDecodeError, pd.errors.ParserError, pd.errors.EmptyDataError) as e:
        raise ValueError(f"Failed to read table {input_path}: {e}") from e

    if column not in df.columns:
        if len(df.columns) == 1:
            logger.warning(
                "Column '%s' not found in %s; using its only column '%s'",
                column,
                input_path.name,
                df.columns[0],
            )
            column = df.columns[0]
        else:
            raise ValueError(
                f"Column '{column}' not found in {input_path}. "
                f"Available columns: {', '.join(map(str, df.columns))}"
            )

    return [None if pd.isna(v) else v for v in df[column].tolist()]


def _read_lines(input_path: Path) -> List[Optional[str]]:
    try:
        text = input_path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ValueError(f"Failed to read text file {input_path}: {e}") from e
    # read_text maps \r\n and \r to \n; other separators stay inside the value
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def load_raw_values(input_path: Path, column: str = DEFAULT_INPUT_COLUMN) -> List[Optional[str]]:
    """Load raw values in file order.

    Args:
        input_path: A ``.csv``/``.tsv`` file with a header row, or a ``.txt``
            file with one value per line.
        column: Column holding the values in tabular files. A file with a
            single column is read from that column whatever its name.

    Returns:
        List of raw values, ``None`` for cells pandas reports as missing.

    Raises:
        FileNotFoundError: If the input file does not exist.
        ValueError: If the file type is unsupported, the file cannot be
            parsed, or the column is missing.

    Examples:
        >>> values = load_raw_values(Path("data/pan_numbers.csv"))
        >>> len(values)
        1000
    """
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    suffix = input_path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(
            f"Unsupported input type '{suffix}' for {input_path}. "
            f"Supported: {', '.join(SUPPORTED_SUFFIXES)}"
        )

    if suffix == ".txt":
        values = _read_lines(input_path)
    else:
        values = _read_table(input_path, column)

    logger.info("Loaded %d raw values from %s", len(values), input_path.name)
    return values
