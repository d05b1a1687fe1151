from __future__ import annotations

import functools

from naming.domain.protocols import Transliterator
from .unidecode_transliterator import UnidecodeTransliterator


@functools.lru_cache(maxsize=1)
def build_transliterator() -> Transliterator:
    """Process-wide default transliterator (stateless, safe to share)."""
    return UnidecodeTransliterator()
