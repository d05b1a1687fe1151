"""
Unidecode Transliterator
Character-level adapter over the Unidecode tables
"""
from __future__ import annotations

from typing import Optional

from unidecode import UnidecodeError, unidecode

from naming.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)


class UnidecodeTransliterator:
    """
    Transliterator backed by ``unidecode`` in strict mode.
    
    Strict mode reports characters missing from the tables instead of
    silently dropping them, which lets the normalizer turn them into
    separators. Table entries are returned verbatim, so some carry a
    trailing space (``"北" -> "Bei "``).
    """
    
    def transliterate(self, ch: str) -> Optional[str]:
        try:
            return unidecode(ch, errors="strict")
        except UnidecodeError:
            logger.debug("transliteration_missing", codepoint=f"U+{ord(ch):04X}")
            return None
