"""Unified configuration layer for the service adapters.

Goals
-----
* Centralize defaults (region, transport retries, per-service endpoints).
* Merge sources in a predictable order: built-in defaults, optional config
  file (``AWS_ADAPTERS_CONFIG_FILE``), environment variables, in-code
  overrides.
* Provide a single entry point for sessions: ``new_config(...)``.

Public API
----------
* get_service_config(service: str | None, overrides: dict | None = None) -> dict
* new_config(region=None, max_retries=None, credentials=None, endpoint_urls=None) -> AwsConfig
"""
from __future__ import annotations

from .loader import ConfigurationError, DEFAULTS, get_service_config, reset_config_cache
from .session import AwsConfig, Credentials, SessionSettings, new_config, resolve_client

__all__ = [
    "AwsConfig",
    "ConfigurationError",
    "Credentials",
    "DEFAULTS",
    "SessionSettings",
    "get_service_config",
    "new_config",
    "reset_config_cache",
    "resolve_client",
]
