# src/naming/domain/builder.py
"""
Name builders.

A builder validates raw text and wraps it as a ``Name``. ``build_with_normalize``
adds a single repair attempt: when the raw text is rejected it is normalized
and built once more, and that second outcome is final.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional

from .exceptions import InvalidCharactersError, NameValidationError, UntrimmedNameError
from .normalizer import NameNormalizer, get_default_normalizer, validate_name_chars
from .result import Failure, Result, Success
from .validation import validate_length, validate_trimmed
from .value_objects import Name

if TYPE_CHECKING:
    from naming.config import Settings

DEFAULT_MIN_LENGTH = 2
DEFAULT_MAX_LENGTH = 512


class NameBuilder(ABC):
    """
    Validation policy for names.
    
    Subclasses supply ``validate`` and ``normalize``; ``build`` and
    ``build_with_normalize`` are provided.
    """
    
    @abstractmethod
    def validate(self, text: str) -> Result[None, NameValidationError]:
        """Check ``text`` against the policy. The first failing check wins."""
    
    @abstractmethod
    def normalize(self, text: str) -> Result[str, NameValidationError]:
        """Produce a repaired candidate for ``text``. The candidate is not validated."""
    
    def build(self, text: str) -> Result[Name, NameValidationError]:
        """
        Validate ``text`` and wrap it unchanged.
        
        Args:
            text: Raw input
            
        Returns:
            Success(Name) or the validation Failure
        """
        return self.validate(text).map(lambda _: Name.from_raw(text))
    
    def build_with_normalize(self, text: str) -> Result[Name, NameValidationError]:
        """
        Build ``text`` as-is when valid, otherwise normalize it and build once more.
        
        Valid input is never routed through the normalizer, even when
        normalizing would change it.
        
        Args:
            text: Raw input
            
        Returns:
            Success(Name), or the Failure of the build on the normalized text
        """
        if self.validate(text).is_success():
            return Success(Name.from_raw(text))
        
        return self.normalize(text).flat_map(self.build)


@dataclass(frozen=True)
class DefaultNameBuilder(NameBuilder):
    """
    Builder with optional length bounds and switchable trim/charset checks.
    
    Configured through chained setters, each returning a new builder:
    
        builder = DefaultNameBuilder().with_min_length(3).without_max_length()
    
    Lengths are measured in UTF-8 code units (bytes), not grapheme clusters.
    ``None`` bounds mean no constraint.
    """
    
    min_length: Optional[int] = DEFAULT_MIN_LENGTH
    max_length: Optional[int] = DEFAULT_MAX_LENGTH
    char_validation_enabled: bool = True
    trim_validation_enabled: bool = True
    normalizer: NameNormalizer = field(
        default_factory=get_default_normalizer, compare=False, repr=False
    )
    
    @classmethod
    def from_settings(cls, settings: Settings) -> DefaultNameBuilder:
        return cls(
            min_length=settings.name_min_length,
            max_length=settings.name_max_length,
            char_validation_enabled=settings.name_char_validation,
            trim_validation_enabled=settings.name_trim_validation,
        )
    
    def with_min_length(self, min_length: int) -> DefaultNameBuilder:
        return replace(self, min_length=min_length)
    
    def without_min_length(self) -> DefaultNameBuilder:
        return replace(self, min_length=None)
    
    def with_max_length(self, max_length: int) -> DefaultNameBuilder:
        return replace(self, max_length=max_length)
    
    def without_max_length(self) -> DefaultNameBuilder:
        return replace(self, max_length=None)
    
    def with_char_validation(self, enabled: bool) -> DefaultNameBuilder:
        return replace(self, char_validation_enabled=enabled)
    
    def with_trim_validation(self, enabled: bool) -> DefaultNameBuilder:
        return replace(self, trim_validation_enabled=enabled)
    
    def with_normalizer(self, normalizer: NameNormalizer) -> DefaultNameBuilder:
        return replace(self, normalizer=normalizer)
    
    def validate(self, text: str) -> Result[None, NameValidationError]:
        if self.trim_validation_enabled and not validate_trimmed(text):
            return Failure(UntrimmedNameError())
        
        if self.min_length is not None or self.max_length is not None:
            length = len(text.encode("utf-8", errors="surrogatepass"))
            checked = validate_length(
                length,
                self.min_length if self.min_length is not None else 0,
                self.max_length if self.max_length is not None else length,
            )
            if checked.is_failure():
                return checked
        
        if self.char_validation_enabled and not validate_name_chars(text):
            return Failure(InvalidCharactersError())
        
        return Success(None)
    
    def normalize(self, text: str) -> Result[str, NameValidationError]:
        return Success(
            self.normalizer.normalize(
                text,
                trim=self.trim_validation_enabled,
                substitute=self.char_validation_enabled,
            )
        )
