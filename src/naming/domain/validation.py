# src/naming/domain/validation.py
"""
Generic string validators shared by name builders.

Lengths are whatever unit the caller measures in. ``DefaultNameBuilder`` passes
UTF-8 code units (bytes), not code points or grapheme clusters, so multi-byte
characters count more than once.
"""
from __future__ import annotations

from .exceptions import InvalidLengthError
from .result import Failure, Result, Success


def validate_length(length: int, min_length: int, max_length: int) -> Result[None, InvalidLengthError]:
    """
    Check that ``length`` lies within the inclusive range [min_length, max_length].

    Args:
        length: Observed length
        min_length: Lowest accepted length
        max_length: Highest accepted length

    Returns:
        Success(None), or Failure carrying InvalidLengthError(min, max, actual)
    """
    if length < min_length or length > max_length:
        return Failure(InvalidLengthError(min=min_length, max=max_length, actual=length))
    return Success(None)


def validate_trimmed(text: str) -> bool:
    """True when ``text`` has no leading or trailing whitespace."""
    return len(text) == len(text.strip())


def validate_is_ascii_lowercase(text: str) -> bool:
    """True when every character of ``text`` is an ASCII lowercase letter (vacuously true for "")."""
    return all("a" <= ch <= "z" for ch in text)


__all__ = ["validate_length", "validate_trimmed", "validate_is_ascii_lowercase"]
