"""
Centralized configuration for the naming package.

- Frozen dataclass, validated in __post_init__.
- Loads from OS env only; no config files are read.
- Cached singleton via functools.lru_cache; call get_settings.cache_clear() after
  changing the environment.

Builders are normally configured in code; these settings only provide defaults for
applications that want to drive them from the environment.
"""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass
from typing import Optional

from naming.domain.builder import DEFAULT_MAX_LENGTH, DEFAULT_MIN_LENGTH

# ------------------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------------------
def _get_env_str(key: str, default: str) -> str:
    v = os.getenv(key)
    if v is None or v.strip() == "":
        return default
    return v.strip()


def _get_env_bool(key: str, default: bool = False) -> bool:
    v = os.getenv(key)
    if v is None:
        return default
    v = v.strip().lower()
    return v in {"1", "true", "t", "yes", "y", "on"}


def _get_env_optional_int(key: str, default: Optional[int]) -> Optional[int]:
    v = os.getenv(key)
    if v is None:
        return default
    v = v.strip()
    if v == "" or v.lower() == "none":
        return None
    try:
        return int(v)
    except ValueError:
        raise ValueError(f"Env var {key} must be an integer or 'none'")


# ------------------------------------------------------------------------------
# Settings dataclass (immutable)
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class Settings:
    # Observability
    log_level: str = "INFO"
    log_json: bool = True

    # Name builder defaults
    name_min_length: Optional[int] = DEFAULT_MIN_LENGTH
    name_max_length: Optional[int] = DEFAULT_MAX_LENGTH
    name_char_validation: bool = True
    name_trim_validation: bool = True

    def __post_init__(self) -> None:
        if not re.fullmatch(r"(?i)DEBUG|INFO|WARNING|ERROR|CRITICAL", self.log_level.strip()):
            raise ValueError("NAMING_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        object.__setattr__(self, "log_level", self.log_level.strip().upper())

        if self.name_min_length is not None and self.name_min_length < 0:
            raise ValueError("NAMING_MIN_LENGTH must be >= 0")
        if self.name_max_length is not None and self.name_max_length < 0:
            raise ValueError("NAMING_MAX_LENGTH must be >= 0")
        if (
            self.name_min_length is not None
            and self.name_max_length is not None
            and self.name_min_length > self.name_max_length
        ):
            raise ValueError("NAMING_MIN_LENGTH must be <= NAMING_MAX_LENGTH")


# ------------------------------------------------------------------------------
# Loader (singleton)
# ------------------------------------------------------------------------------
@functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        log_level=_get_env_str("NAMING_LOG_LEVEL", "INFO"),
        log_json=_get_env_bool("NAMING_LOG_JSON", True),
        name_min_length=_get_env_optional_int("NAMING_MIN_LENGTH", DEFAULT_MIN_LENGTH),
        name_max_length=_get_env_optional_int("NAMING_MAX_LENGTH", DEFAULT_MAX_LENGTH),
        name_char_validation=_get_env_bool("NAMING_CHAR_VALIDATION", True),
        name_trim_validation=_get_env_bool("NAMING_TRIM_VALIDATION", True),
    )
