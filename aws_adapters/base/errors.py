"""Unified adapter error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``aws_adapters.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_domain import ErrorDomain, GENERIC_DOMAIN, UNKNOWN_BEHAVIOUR_CODE, codes
from .errors_parts.classified_error import ClassifiedError
from .errors_parts.classification import describe_cause, extract_http_status, extract_provider_code

__all__ = [
    "ClassifiedError",
    "ErrorDomain",
    "GENERIC_DOMAIN",
    "UNKNOWN_BEHAVIOUR_CODE",
    "codes",
    "describe_cause",
    "extract_http_status",
    "extract_provider_code",
]
