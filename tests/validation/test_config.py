"""Tests for the validation settings and their YAML loader."""

from pathlib import Path

import pytest

from pan_validation.validation.config import (
    DEFAULT_INPUT_COLUMN,
    DEFAULT_MASK_CHAR,
    DEFAULT_MAX_EXAMPLES,
    Settings,
    load_settings,
)


def test_defaults():
    """Default settings match the module constants."""
    settings = Settings()
    assert settings.input_column == DEFAULT_INPUT_COLUMN == "pan_raw"
    assert settings.mask_char == DEFAULT_MASK_CHAR == "X"
    assert settings.max_examples == DEFAULT_MAX_EXAMPLES == 25


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"mask_char": ""}, "Invalid mask_char"),
        ({"mask_char": "XX"}, "Invalid mask_char"),
        ({"max_examples": -1}, "Invalid max_examples"),
        ({"input_column": ""}, "input_column"),
    ],
)
def test_settings_validation(kwargs, match):
    """Invalid settings values raise ValueError."""
    with pytest.raises(ValueError, match=match):
        Settings(**kwargs)


def test_load_settings(tmp_path: Path):
    """All settings are read from YAML."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text(
        "input:\n  column: pan\nreport:\n  mask_char: '*'\n  max_examples: 10\n",
        encoding="utf-8",
    )
    settings = load_settings(settings_file)
    assert settings == Settings(input_column="pan", mask_char="*", max_examples=10)


def test_load_settings_partial_file_keeps_defaults(tmp_path: Path):
    """Keys absent from the file keep their defaults."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("report:\n  max_examples: 5\n", encoding="utf-8")
    settings = load_settings(settings_file)
    assert settings.max_examples == 5
    assert settings.mask_char == "X"
    assert settings.input_column == "pan_raw"


def test_load_settings_empty_file(tmp_path: Path):
    """An empty file yields default settings."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("", encoding="utf-8")
    assert load_settings(settings_file) == Settings()


def test_load_settings_missing_file(tmp_path: Path):
    """A missing settings file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError, match="Settings file not found"):
        load_settings(tmp_path / "nope.yaml")


def test_load_settings_malformed_yaml(tmp_path: Path):
    """Malformed YAML is reported as ValueError."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("report: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to read settings file"):
        load_settings(settings_file)


def test_load_settings_not_a_mapping(tmp_path: Path):
    """A top-level list is rejected."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError, match="must contain a mapping"):
        load_settings(settings_file)


def test_load_settings_invalid_values(tmp_path: Path):
    """Non-numeric max_examples is rejected."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text("report:\n  max_examples: many\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid settings"):
        load_settings(settings_file)


def test_shipped_settings_file_loads():
    """The shipped settings file matches the defaults."""
    shipped = Path(__file__).resolve().parents[2] / "config" / "pan_validation.yaml"
    assert load_settings(shipped) == Settings()


@pytest.mark.parametrize(
    "content,section",
    [
        ("input: pan_raw\n", "input"),
        ("report: [1, 2]\n", "report"),
        ("report: 25\n", "report"),
    ],
)
def test_load_settings_section_not_a_mapping(tmp_path: Path, content, section):
    """A settings section that is not a mapping raises ValueError."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError, match=f"'{section}' must be a mapping"):
        load_settings(settings_file)


@pytest.mark.parametrize("value", ["true", "2.7", "'10'"])
def test_load_settings_max_examples_must_be_integer(tmp_path: Path, value):
    """Booleans, floats and strings are rejected for max_examples."""
    settings_file = tmp_path / "settings.yaml"
    settings_file.write_text(f"report:\n  max_examples: {value}\n", encoding="utf-8")
    with pytest.raises(ValueError, match="max_examples must be an integer"):
        load_settings(settings_file)
