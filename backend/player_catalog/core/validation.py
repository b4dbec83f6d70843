"""Validation utility functions shared by feature validators."""

from typing import Any


def is_empty_or_none(value: Any) -> bool:
    """
    Check if value is None or empty (empty string, list, dict, etc.).

    Args:
        value: Value to check

    Returns:
        True if value is None or empty, False otherwise
    """
    if value is None:
        return True
    if isinstance(value, (str, list, dict, set, tuple)):
        return len(value) == 0
    return False


def exceeds_length(value: str, max_length: int) -> bool:
    """Return True when ``value`` is longer than ``max_length`` characters."""
    return len(value) > max_length
