"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `aws_adapters.base.errors` for the stable surface.
"""

from .error_domain import ErrorDomain, GENERIC_DOMAIN, UNKNOWN_BEHAVIOUR_CODE, codes
from .classified_error import ClassifiedError
from .classification import describe_cause, extract_http_status, extract_provider_code

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
