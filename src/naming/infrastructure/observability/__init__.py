"""
Naming Observability Infrastructure
Structured logging
"""
from naming.infrastructure.observability.logger import (
    configure_logging,
    configure_logging_from,
    get_logger,
)

__all__ = [
    "configure_logging",
    "configure_logging_from",
    "get_logger",
]
