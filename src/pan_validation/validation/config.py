"""Validation configuration constants.

This module centralizes the reporting defaults and the optional YAML settings
file. The identifier grammar itself is fixed (see ``core/schemas.py``); only
input and presentation options can be tuned here.

Settings file layout (all keys optional)::

    input:
      column: pan_raw
    report:
      mask_char: "X"
      max_examples: 25
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

# ============================================================================
# REPORTING DEFAULTS
# ============================================================================

# Replacement for the last character of values shown in example listings
DEFAULT_MASK_CHAR = "X"

# Maximum (record, reason) rows in the masked examples listing
DEFAULT_MAX_EXAMPLES = 25

# Column holding raw values in tabular inputs
DEFAULT_INPUT_COLUMN = "pan_raw"


@dataclass(frozen=True)
class Settings:
    """Run settings resolved from defaults and an optional YAML file.

    Attributes:
        input_column: Column of raw values in CSV/TSV inputs.
        mask_char: Single character replacing the last character of examples.
        max_examples: Cap on masked example rows (0 disables the listing).
    """

    input_column: str = DEFAULT_INPUT_COLUMN
    mask_char: str = DEFAULT_MASK_CHAR
    max_examples: int = DEFAULT_MAX_EXAMPLES

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if not self.input_column:
            raise ValueError("input_column must be a non-empty string")
        if len(self.mask_char) != 1:
            raise ValueError(f"Invalid mask_char: {self.mask_char!r}. Must be a single character.")
        if self.max_examples < 0:
            raise ValueError(f"Invalid max_examples: {self.max_examples}. Must be >= 0.")


def _section(data: Dict[str, Any], key: str, settings_file: Path) -> Dict[str, Any]:
    section = data.get(key) or {}
    if not isinstance(section, dict):
        raise ValueError(f"Settings file {settings_file}: '{key}' must be a mapping")
    return section


def load_settings(settings_file: Path) -> Settings:
    """Load run settings from a YAML file.

    Args:
        settings_file: Path to the YAML settings file.

    Returns:
        Settings with file values applied over the defaults.

    Raises:
        FileNotFoundError: If the settings file does not exist.
        ValueError: If the file cannot be parsed or holds invalid values.

    Examples:
        >>> settings = load_settings(Path("config/pan_validation.yaml"))
        >>> settings.max_examples
        25
    """
    if not settings_file.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_file}")
    try:
        with settings_file.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to read settings file {settings_file}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Settings file {settings_file} must contain a mapping")

    input_cfg = _section(data, "input", settings_file)
    report_cfg = _section(data, "report", settings_file)

    max_examples = report_cfg.get("max_examples", DEFAULT_MAX_EXAMPLES)
    if isinstance(max_examples, bool) or not isinstance(max_examples, int):
        raise ValueError(
            f"Invalid settings in {settings_file}: max_examples must be an integer, "
            f"got {max_examples!r}"
        )

    try:
        return Settings(
            input_column=str(input_cfg.get("column", DEFAULT_INPUT_COLUMN)),
            mask_char=str(report_cfg.get("mask_char", DEFAULT_MASK_CHAR)),
            max_examples=max_examples,
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid settings in {settings_file}: {e}") from e


__all__ = [
    "DEFAULT_MASK_CHAR",
    "DEFAULT_MAX_EXAMPLES",
    "DEFAULT_INPUT_COLUMN",
    "Settings",
    "load_settings",
]
