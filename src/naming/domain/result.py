"""
Result type for name operations.

Builders report expected failures as values: ``Success(value)`` or
``Failure(error)``. Only ``map``/``flat_map`` chaining and ``unwrap`` are
provided; callers branch on ``is_success()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Outcome carrying a value."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def map(self, func: Callable[[T], Any]) -> Success[Any]:
        """Wrap ``func(value)`` in a new Success."""
        return Success(func(self.value))

    def flat_map(self, func: Callable[[T], Success[Any] | Failure[Any]]) -> Success[Any] | Failure[Any]:
        """Continue with another Result-returning step."""
        return func(self.value)

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Outcome carrying an error; chaining short-circuits."""

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def map(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self

    def flat_map(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self

    def unwrap(self) -> NoReturn:
        """
        Raise the carried error.

        Raises:
            The error itself when it is an exception, ValueError otherwise
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Attempted to unwrap a Failure: {self.error}")


Result = Success[T] | Failure[E]
