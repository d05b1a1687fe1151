"""
Process-wide service registry.

The package registers its default collaborators here at import time, so the
domain layer can resolve them without importing infrastructure.
"""
from __future__ import annotations

from typing import Any, Callable, Dict

_ServiceFactory = Callable[..., Any]

TRANSLITERATOR = "transliterator"


class _Registry:
    def __init__(self) -> None:
        self._items: Dict[str, _ServiceFactory] = {}

    def register(self, key: str, factory: _ServiceFactory) -> None:
        if key in self._items:
            raise ValueError(f"Factory already registered for key: {key}")
        self._items[key] = factory

    def resolve(self, key: str, /, **kwargs: Any) -> Any:
        try:
            factory = self._items[key]
        except KeyError as e:
            raise KeyError(f"No factory registered for key: {key}") from e
        return factory(**kwargs)


services = _Registry()

__all__ = ["services", "TRANSLITERATOR"]
