"""Value objects for the naming domain."""

from .name import Name

__all__ = [
    'Name',
]
