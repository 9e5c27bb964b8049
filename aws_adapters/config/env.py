"""aws_adapters.config.env
=======================

Centralized environment variable names and helpers.

Design Notes
------------
- The region is read from ``AWS_REGION``; ``AWS_DEFAULT_REGION`` is accepted
  as an alias with lower precedence.
- Endpoint overrides are per service (``DYNAMODB_ENDPOINT_URL`` etc.), which
  is how local emulators are wired in.
- Helpers never raise on unknown services or unset variables; callers decide
  how to proceed.
"""

from __future__ import annotations

import os
from typing import Dict, Optional, Tuple

from .defaults import COGNITO_SERVICE, DYNAMODB_SERVICE, S3_SERVICE

REGION_ENV_ALIASES: Tuple[str, ...] = ("AWS_REGION", "AWS_DEFAULT_REGION")
MAX_RETRIES_ENV = "AWS_ADAPTERS_MAX_RETRIES"
CONFIG_FILE_ENV = "AWS_ADAPTERS_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"

# boto3 service name -> endpoint override variable
ENDPOINT_ENV_MAP: Dict[str, str] = {
    COGNITO_SERVICE: "COGNITO_ENDPOINT_URL",
    DYNAMODB_SERVICE: "DYNAMODB_ENDPOINT_URL",
    S3_SERVICE: "S3_ENDPOINT_URL",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder value.

    Heuristics: contains 'placeholder', 'changeme', or 'example'
    (case-insensitive).
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or "example" in v


def resolve_region() -> Tuple[Optional[str], Optional[str]]:
    """Return ``(region, env_var_used)`` honoring alias precedence."""
    for name in REGION_ENV_ALIASES:
        val = os.getenv(name)
        if val and val.strip():
            return val.strip(), name
    return None, None


def get_endpoint_env_var(service: str) -> Optional[str]:
    return ENDPOINT_ENV_MAP.get((service or "").strip().lower())


def resolve_endpoint(service: str) -> Optional[str]:
    name = get_endpoint_env_var(service)
    if not name:
        return None
    val = os.getenv(name)
    return val.strip() if val and val.strip() else None


__all__ = [
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "ENDPOINT_ENV_MAP",
    "MAX_RETRIES_ENV",
    "REGION_ENV_ALIASES",
    "get_endpoint_env_var",
    "is_placeholder",
    "resolve_endpoint",
    "resolve_region",
]
