"""Normalization and masking of raw identifier values."""

from __future__ import annotations

from typing import Optional


def normalize_pan(raw: Optional[str]) -> Optional[str]:
    """Trim and uppercase a raw value; blank values become ``None``.

    Args:
        raw: Raw input value, possibly ``None`` or padded with whitespace.

    Returns:
        The cleaned value, or ``None`` when nothing is left after trimming.

    Examples:
        >>> normalize_pan("  abcde1234f ")
        'ABCDE1234F'
        >>> normalize_pan("   ") is None
        True
    """
    if raw is None:
        return None
    cleaned = str(raw).strip().upper()
    return cleaned or None


def mask_pan(cleaned: str, mask_char: str = "X") -> str:
    """Replace the final character of a cleaned value with ``mask_char``.

    Examples:
        >>> mask_pan("AAAAA1111A")
        'AAAAA1111X'
    """
    if not cleaned:
        return ""
    return cleaned[:-1] + mask_char


__all__ = ["normalize_pan", "mask_pan"]
