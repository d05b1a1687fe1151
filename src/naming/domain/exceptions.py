"""
Name Domain Exceptions
Typed validation failures returned (not raised) by name builders
"""
from __future__ import annotations

from typing import Any, Dict, Optional


class NameValidationError(Exception):
    """Base class for name construction failures.

    Every failure is exactly one of the subclasses below. ``code`` is stable and
    meant for programmatic branching; ``message`` is for humans.
    """

    code: str = "name_invalid"
    message: str = "invalid name"

    def __init__(self, message: Optional[str] = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)

    @property
    def details(self) -> Optional[Dict[str, Any]]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NameValidationError):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), self.code, self.message))


class UntrimmedNameError(NameValidationError):
    """Raised when a name has leading or trailing whitespace"""

    code = "name_untrimmed"
    message = "name has leading or trailing whitespaces"


class InvalidLengthError(NameValidationError):
    """Raised when a length falls outside the inclusive [min, max] range"""

    code = "name_invalid_length"

    def __init__(self, min: int, max: int, actual: int) -> None:
        self.min = min
        self.max = max
        self.actual = actual
        super().__init__(f"invalid length: expected {min}-{max} characters, got {actual}")

    @property
    def details(self) -> Dict[str, Any]:
        return {"min": self.min, "max": self.max, "actual": self.actual}

    def __repr__(self) -> str:
        return f"InvalidLengthError(min={self.min}, max={self.max}, actual={self.actual})"


class InvalidCharactersError(NameValidationError):
    """Raised when a name contains characters outside [a-z0-9_-]"""

    code = "name_invalid_characters"
    message = "invalid characters"
