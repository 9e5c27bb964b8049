"""Shared AWS session configuration handed to every adapter.

``new_config`` resolves the region (explicit argument, config file, or
``AWS_REGION``), optional static credentials and the SDK transport retry
count, then builds one ``boto3.session.Session``. Adapters call
:meth:`AwsConfig.client` to obtain their low-level service clients.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import boto3
from botocore.config import Config as BotocoreConfig
from botocore.exceptions import BotoCoreError
from pydantic import BaseModel, Field, ValidationError

from .loader import ConfigurationError, get_service_config


class Credentials(BaseModel):
    """Static credentials; omit to use the default boto3 provider chain."""

    access_key_id: str = Field(..., min_length=1)
    secret_access_key: str = Field(..., min_length=1)
    session_token: Optional[str] = None


class SessionSettings(BaseModel):
    """Validated inputs of :func:`new_config`."""

    region: str = Field(..., min_length=1)
    max_retries: Optional[int] = Field(default=None, ge=0)
    credentials: Optional[Credentials] = None
    endpoint_urls: Dict[str, str] = Field(default_factory=dict)


class AwsConfig:
    """A resolved region/credentials pair plus the session built from it."""

    def __init__(self, settings: SessionSettings, session: boto3.session.Session):
        self.settings = settings
        self.session = session

    @property
    def region(self) -> str:
        return self.settings.region

    def endpoint_for(self, service: str, endpoint_url: Optional[str] = None) -> Optional[str]:
        """Resolve the endpoint: argument, then ``new_config`` map, then layered config."""
        if endpoint_url:
            return endpoint_url
        if service in self.settings.endpoint_urls:
            return self.settings.endpoint_urls[service]
        return get_service_config(service).get("endpoint_url") or None

    def client(self, service: str, endpoint_url: Optional[str] = None) -> Any:
        kwargs: Dict[str, Any] = {"region_name": self.region}
        endpoint = self.endpoint_for(service, endpoint_url)
        if endpoint:
            kwargs["endpoint_url"] = endpoint
        if self.settings.max_retries is not None:
            kwargs["config"] = BotocoreConfig(retries={"max_attempts": self.settings.max_retries})
        return self.session.client(service, **kwargs)


def new_config(
    region: Optional[str] = None,
    max_retries: Optional[int] = None,
    credentials: Optional[Credentials] = None,
    endpoint_urls: Optional[Mapping[str, str]] = None,
) -> AwsConfig:
    """Build the shared :class:`AwsConfig`.

    Raises:
        ConfigurationError: no region could be resolved, a value failed
            validation, or botocore refused to create the session.
    """
    cfg = get_service_config(overrides={"region": region, "max_retries": max_retries})
    if not cfg.get("region"):
        raise ConfigurationError("unable to create config: AWS_REGION environment variable not found")
    try:
        settings = SessionSettings(
            region=cfg["region"],
            max_retries=cfg.get("max_retries"),
            credentials=credentials,
            endpoint_urls=dict(endpoint_urls or {}),
        )
    except ValidationError as e:
        raise ConfigurationError(f"unable to create config: {e}") from e

    session_kwargs: Dict[str, Any] = {"region_name": settings.region}
    if settings.credentials is not None:
        session_kwargs |= {
            "aws_access_key_id": settings.credentials.access_key_id,
            "aws_secret_access_key": settings.credentials.secret_access_key,
            "aws_session_token": settings.credentials.session_token,
        }
    try:
        session = boto3.session.Session(**session_kwargs)
    except BotoCoreError as e:
        raise ConfigurationError(f"unable to create AWS session: {e}") from e
    return AwsConfig(settings, session)


def resolve_client(config: Optional[AwsConfig], service: str, client: Any = None, endpoint_url: Optional[str] = None) -> Any:
    """Return ``client`` when injected, else build one from ``config``.

    ``config`` defaults to :func:`new_config` with environment resolution.
    """
    if client is not None:
        return client
    return (config or new_config()).client(service, endpoint_url=endpoint_url)


__all__ = ["AwsConfig", "Credentials", "SessionSettings", "new_config", "resolve_client"]
