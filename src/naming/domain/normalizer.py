# src/naming/domain/normalizer.py
"""
Name normalization.

Maps arbitrary unicode text onto the name alphabet ``[a-z0-9_-]``. Non-ASCII
characters go through a Transliterator; anything that still is not name-safe
becomes a ``-`` separator. A separator is only added when the output does not
already end with ``-``, so unsafe runs collapse to one.

Known quirk: transliterations that end in a break (``"北" -> "Bei "``) leave a
separator behind them, so ``"北京"`` normalizes to ``"bei-jing-"``. The
trailing separator is kept.
"""
from __future__ import annotations

from typing import List, Optional

from naming.di import TRANSLITERATOR, services
from naming.domain.protocols import Transliterator

SEPARATOR = "-"


def is_name_safe_char(ch: str) -> bool:
    """True for ASCII lowercase letters, ASCII digits, ``-`` and ``_``."""
    return "a" <= ch <= "z" or "0" <= ch <= "9" or ch == "-" or ch == "_"


def validate_name_chars(text: str) -> bool:
    """True when every character of ``text`` is name-safe (vacuously true for "")."""
    return all(is_name_safe_char(ch) for ch in text)


def _push_separator(output: List[str]) -> None:
    if not output or output[-1] != SEPARATOR:
        output.append(SEPARATOR)


def _push_char(ch: str, output: List[str]) -> None:
    if ch.isascii():
        ch = ch.lower()
    if is_name_safe_char(ch):
        output.append(ch)
    else:
        _push_separator(output)


class NameNormalizer:
    """
    Converts text into the name alphabet.
    
    Stateless apart from the injected transliterator, so one instance can be
    shared freely between builders and threads.
    
    Attributes:
        transliterator: Backend used for non-ASCII characters
    """
    
    def __init__(self, transliterator: Transliterator) -> None:
        self.transliterator = transliterator
    
    def make_name(self, text: str) -> str:
        """
        Run the character-by-character algorithm on ``text`` (no trimming).
        
        Args:
            text: Raw input
            
        Returns:
            String over [a-z0-9_-]
        """
        output: List[str] = []
        for ch in text:
            if ch.isascii():
                _push_char(ch, output)
                continue
            
            replacement = self.transliterator.transliterate(ch)
            if replacement is None:
                _push_separator(output)
                continue
            
            for replacement_ch in replacement:
                _push_char(replacement_ch, output)
        
        return "".join(output)
    
    def normalize(self, text: str, *, trim: bool = True, substitute: bool = True) -> str:
        """
        Normalize ``text`` under a partial policy.
        
        Args:
            text: Raw input
            trim: Strip boundary whitespace first
            substitute: Transliterate and replace unsafe characters; when False
                only ASCII letters are lower-cased and everything else is copied
                through verbatim
                
        Returns:
            Normalized candidate (not validated)
        """
        if trim:
            text = text.strip()
        
        if substitute:
            return self.make_name(text)
        
        return "".join(ch.lower() if ch.isascii() else ch for ch in text)


def get_default_normalizer() -> NameNormalizer:
    """Normalizer over the transliterator registered for the process."""
    return NameNormalizer(services.resolve(TRANSLITERATOR))


def make_name(text: str, transliterator: Optional[Transliterator] = None) -> str:
    """Apply the normalization algorithm to ``text`` without trimming it."""
    if transliterator is None:
        return get_default_normalizer().make_name(text)
    return NameNormalizer(transliterator).make_name(text)


def normalize_name(text: str) -> str:
    """
    Trim and fully normalize ``text``.
    
    Examples:
        normalize_name("  My Project  ") -> "my-project"
        normalize_name("!!!hello!!!") -> "-hello-"
        normalize_name("Москва") -> "moskva"
    """
    return get_default_normalizer().normalize(text)


__all__ = [
    "NameNormalizer",
    "is_name_safe_char",
    "validate_name_chars",
    "make_name",
    "normalize_name",
    "get_default_normalizer",
]
