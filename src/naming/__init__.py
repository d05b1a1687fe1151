"""
naming - canonical name tokens from human-entered text
Validation, transliteration and separator collapsing into [a-z0-9_-]
"""

# Domain layer
from naming.domain import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DefaultNameBuilder,
    Failure,
    InvalidCharactersError,
    InvalidLengthError,
    Name,
    NameBuilder,
    NameNormalizer,
    NameValidationError,
    Result,
    Success,
    Transliterator,
    UntrimmedNameError,
    is_name_safe_char,
    make_name,
    normalize_name,
    validate_is_ascii_lowercase,
    validate_length,
    validate_name_chars,
    validate_trimmed,
)

# Infrastructure layer
from naming.infrastructure import (
    UnidecodeTransliterator,
    build_transliterator,
    configure_logging,
    configure_logging_from,
    get_logger,
)

# Configuration
from naming.config import Settings, get_settings

# Default collaborators
from naming.di import TRANSLITERATOR, services

services.register(TRANSLITERATOR, build_transliterator)

__all__ = [
    # Domain
    "Name",
    "NameBuilder",
    "DefaultNameBuilder",
    "DEFAULT_MIN_LENGTH",
    "DEFAULT_MAX_LENGTH",
    "NameNormalizer",
    "Transliterator",
    "is_name_safe_char",
    "validate_name_chars",
    "make_name",
    "normalize_name",
    "validate_length",
    "validate_trimmed",
    "validate_is_ascii_lowercase",
    "NameValidationError",
    "UntrimmedNameError",
    "InvalidLengthError",
    "InvalidCharactersError",
    "Result",
    "Success",
    "Failure",
    # Infrastructure
    "UnidecodeTransliterator",
    "build_transliterator",
    "configure_logging",
    "configure_logging_from",
    "get_logger",
    # Configuration
    "Settings",
    "get_settings",
]
