# src/naming/domain/value_objects/name.py
"""Name value object."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True, slots=True)
class Name:
    """Validated name token.

    Carries no rules of its own: a ``Name`` is only as valid as the builder
    configuration that produced it. Equality, ordering and hashing go by the
    underlying string.
    """

    value: str

    @classmethod
    def from_raw(cls, value: str) -> Name:
        """Wrap ``value`` without validating it. Builders call this after validation."""
        return cls(value)

    def as_str(self) -> str:
        return self.value

    def into_str(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __len__(self) -> int:
        return len(self.value)
