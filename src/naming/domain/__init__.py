"""
Naming Domain Layer
Name value object, builders, normalizer and validators
"""
from naming.domain.builder import (
    DEFAULT_MAX_LENGTH,
    DEFAULT_MIN_LENGTH,
    DefaultNameBuilder,
    NameBuilder,
)
from naming.domain.exceptions import (
    InvalidCharactersError,
    InvalidLengthError,
    NameValidationError,
    UntrimmedNameError,
)
from naming.domain.normalizer import (
    NameNormalizer,
    is_name_safe_char,
    make_name,
    normalize_name,
    validate_name_chars,
)
from naming.domain.protocols import Transliterator
from naming.domain.result import Failure, Result, Success
from naming.domain.validation import (
    validate_is_ascii_lowercase,
    validate_length,
    validate_trimmed,
)
from naming.domain.value_objects import Name

__all__ = [
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
]
