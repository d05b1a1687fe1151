"""
Naming Transliteration Infrastructure
Unicode-to-ASCII backends for the normalizer
"""
from naming.infrastructure.transliteration.factory import build_transliterator
from naming.infrastructure.transliteration.unidecode_transliterator import UnidecodeTransliterator

__all__ = [
    "build_transliterator",
    "UnidecodeTransliterator",
]
