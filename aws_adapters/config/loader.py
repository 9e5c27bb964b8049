"""Layered configuration loading for the service adapters.

Merge order (later wins):
    1. Built-in defaults
    2. Optional config file pointed to by ``AWS_ADAPTERS_CONFIG_FILE``
       (JSON, or YAML for any other suffix): top-level keys apply to every
       service, a section named after the boto3 service name applies to that
       service only
    3. Environment variables (``AWS_REGION``, ``AWS_ADAPTERS_MAX_RETRIES``,
       ``<SERVICE>_ENDPOINT_URL``)
    4. In-code overrides (``None`` values are ignored)

Example file::

    region: eu-west-1
    max_retries: 3
    dynamodb:
      endpoint_url: http://localhost:8000
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from .defaults import DEFAULT_MAX_RETRIES, DEFAULT_REGION
from .env import (
    CONFIG_FILE_ENV,
    DOTENV_FILE_ENV,
    ENDPOINT_ENV_MAP,
    MAX_RETRIES_ENV,
    is_placeholder,
    resolve_endpoint,
    resolve_region,
)


class ConfigurationError(Exception):
    """Raised when adapter configuration is missing or cannot be loaded."""


DEFAULTS: Dict[str, Any] = {
    "region": DEFAULT_REGION,
    "max_retries": DEFAULT_MAX_RETRIES,
    "endpoint_url": None,
}

_SERVICE_SECTIONS = frozenset(ENDPOINT_ENV_MAP)

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Existing
    environment variables win unless their value looks like a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv(DOTENV_FILE_ENV, ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv(CONFIG_FILE_ENV)
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"unable to read config file {p}: {e}") from e
    try:
        data = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"unable to parse config file {p}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {p} must contain a mapping")
    _FILE_CACHE = data
    return data


def reset_config_cache() -> None:
    """Forget cached file and .env state (used by tests and reloads)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


def _env_overrides(service: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    region, _ = resolve_region()
    if region:
        out["region"] = region
    retries = os.getenv(MAX_RETRIES_ENV)
    if retries and retries.strip():
        out["max_retries"] = retries.strip()
    if service and (endpoint := resolve_endpoint(service)):
        out["endpoint_url"] = endpoint
    return out


def get_service_config(service: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for ``service`` (or the shared settings)."""
    _load_dotenv_once()
    name = (service or "").strip().lower()
    cfg: Dict[str, Any] = dict(DEFAULTS)

    file_cfg = _load_external_config()
    cfg |= {k: v for k, v in file_cfg.items() if k not in _SERVICE_SECTIONS and not isinstance(v, dict)}
    section = file_cfg.get(name) if name else None
    if isinstance(section, dict):
        cfg |= section

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}
    return cfg


__all__ = ["ConfigurationError", "DEFAULTS", "get_service_config", "reset_config_cache"]
