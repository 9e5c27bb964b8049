"""Shared building blocks for the service adapters.

Re-exports the error classifier, logging helpers and the call-boundary
decorator so adapters can import from a single place.
"""

from .errors import (
    ClassifiedError,
    ErrorDomain,
    GENERIC_DOMAIN,
    UNKNOWN_BEHAVIOUR_CODE,
    codes,
)
from .logging import LogContext, configure_logger, get_logger, log_event
from .resilience import raises_classified

__all__ = [
    "ClassifiedError",
    "ErrorDomain",
    "GENERIC_DOMAIN",
    "LogContext",
    "UNKNOWN_BEHAVIOUR_CODE",
    "codes",
    "configure_logger",
    "get_logger",
    "log_event",
    "raises_classified",
]
