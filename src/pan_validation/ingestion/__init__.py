"""Loading raw identifier values from files."""

from .loader import SUPPORTED_SUFFIXES, load_raw_values

__all__ = ["load_raw_values", "SUPPORTED_SUFFIXES"]
