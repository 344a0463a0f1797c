"""Text helpers for presentation code."""

from typing import Any

__all__ = ["capitalize"]


def capitalize(s: Any) -> str:
    """Upper-case the first character of a string.

    Parameters
    ----------
    s : Any
        Value to capitalize.

    Returns
    -------
    str
        ``s`` with its first character upper-cased; the rest is untouched.
        Non-string input yields an empty string instead of an error.
    """
    if not isinstance(s, str):
        return ""
    return s[:1].upper() + s[1:]
