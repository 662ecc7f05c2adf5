"""Utility functions."""

BOM = "\ufeff"


def strip_bom(text: str) -> str:
    """Remove a single leading byte-order mark, if present."""
    return text[1:] if text.startswith(BOM) else text


def normalize_newlines(text: str) -> str:
    """Drop every carriage return, so CRLF line endings become LF."""
    return text.replace("\r", "")


def prepare_text(text: str) -> str:
    """Strip the BOM and normalize line endings before scanning."""
    return normalize_newlines(strip_bom(text))


def clamp_0_to_100(value: int | float) -> int | float:
    """
    Clamp a number into the inclusive range [0, 100].

    Args:
        value: Number to clamp.

    Returns:
        The value itself when already in range, otherwise the nearest bound.
    """
    return max(0, min(100, value))
