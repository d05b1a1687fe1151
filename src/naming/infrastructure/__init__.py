"""
Naming Infrastructure
Transliteration backends and observability
"""
from naming.infrastructure.observability import (
    configure_logging,
    configure_logging_from,
    get_logger,
)
from naming.infrastructure.transliteration import UnidecodeTransliterator, build_transliterator

__all__ = [
    "configure_logging",
    "configure_logging_from",
    "get_logger",
    "UnidecodeTransliterator",
    "build_transliterator",
]
