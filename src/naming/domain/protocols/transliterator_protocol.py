"""
Transliterator Protocol (Abstract Interface)
Contract for unicode-to-ASCII transliteration backends
"""
from __future__ import annotations

from typing import Optional, Protocol


class Transliterator(Protocol):
    """
    Best-effort mapping of a single non-ASCII character to ASCII.
    
    Implementations may fail for any character (unassigned code points,
    combining marks without romanization, ...). The normalizer treats such
    characters as unsafe.
    """
    
    def transliterate(self, ch: str) -> Optional[str]:
        """
        Transliterate one character.
        
        Args:
            ch: A single non-ASCII character
            
        Returns:
            ASCII replacement (may be empty or several characters),
            or None when no mapping exists
        """
        ...
