"""S3 object adapter.

Purpose:
        Put, get, delete and HEAD single objects and issue pre-signed URLs with
        the ``s3`` boto3 client.

Error handling:
        - Pre-signing failures (including an expiry under one second) carry
          ``SigningURLErr``.
        - Service failures are classified from the ``ClientError`` code.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, IO, Mapping, Optional, Union

from ..base.logging import get_logger
from ..base.resilience import raises_classified
from ..config import AwsConfig, resolve_client
from ..config.defaults import S3_DEFAULT_PRESIGN_EXPIRY_SECONDS, S3_SERVICE
from .errors import SIGNING_URL_ERR_CODE, S3Error

Expiry = Union[timedelta, int, float]
Body = Union[bytes, str, IO[bytes]]

_LOGGER = get_logger("aws_adapters.s3")


def _expiry_seconds(expire: Optional[Expiry]) -> int:
    if expire is None:
        return S3_DEFAULT_PRESIGN_EXPIRY_SECONDS
    seconds = expire.total_seconds() if isinstance(expire, timedelta) else float(expire)
    # ExpiresIn is whole seconds; anything shorter would sign an already expired URL.
    if seconds < 1:
        raise ValueError(f"expiry must be at least 1s, got {seconds}s")
    return int(seconds)


class S3Client:
    def __init__(self, config: Optional[AwsConfig] = None, *, endpoint_url: Optional[str] = None, client: Any = None):
        self._client = resolve_client(config, S3_SERVICE, client, endpoint_url=endpoint_url)

    def _presign(self, method: str, params: Dict[str, Any], expire: Optional[Expiry], message: str) -> str:
        try:
            return self._client.generate_presigned_url(
                ClientMethod=method,
                Params=params,
                ExpiresIn=_expiry_seconds(expire),
            )
        except Exception as e:
            raise S3Error.wrap_with_code(e, message, SIGNING_URL_ERR_CODE) from e

    @raises_classified(S3Error, "signing put url failed", logger=_LOGGER)
    def generate_put_url(
        self,
        bucket: str,
        key: str,
        content_type: str,
        expire: Optional[Expiry] = None,
        metadata: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Return a URL accepting one ``PUT`` of ``key`` until ``expire`` elapses.

        Uploaders must send the same ``Content-Type`` (and ``x-amz-meta-*``
        headers when ``metadata`` is given) for the signature to match.
        """
        params: Dict[str, Any] = {"Bucket": bucket, "Key": key, "ContentType": content_type}
        message = "signing put url failed"
        if metadata:
            params["Metadata"] = dict(metadata)
            message = "signing put url with metadata failed"
        return self._presign("put_object", params, expire, message)

    @raises_classified(S3Error, "signing get url failed", logger=_LOGGER)
    def generate_get_url(self, bucket: str, key: str, expire: Optional[Expiry] = None) -> str:
        return self._presign("get_object", {"Bucket": bucket, "Key": key}, expire, "signing get url failed")

    @raises_classified(S3Error, "put object failed", logger=_LOGGER)
    def put_object(
        self,
        bucket: str,
        key: str,
        body: Body,
        metadata: Optional[Mapping[str, str]] = None,
        content_type: Optional[str] = None,
    ) -> None:
        params: Dict[str, Any] = {"Bucket": bucket, "Key": key, "Body": body}
        if metadata:
            params["Metadata"] = dict(metadata)
        if content_type:
            params["ContentType"] = content_type
        self._client.put_object(**params)

    @raises_classified(S3Error, "get object failed", logger=_LOGGER)
    def get_object(self, bucket: str, key: str) -> Any:
        """Return the streaming body of ``key``; the caller reads and closes it."""
        return self._client.get_object(Bucket=bucket, Key=key)["Body"]

    @raises_classified(S3Error, "delete object failed", logger=_LOGGER)
    def delete_object(self, bucket: str, key: str) -> None:
        self._client.delete_object(Bucket=bucket, Key=key)

    @raises_classified(S3Error, "get object metadata failed", logger=_LOGGER)
    def get_object_metadata(self, bucket: str, key: str) -> Dict[str, str]:
        return dict(self._client.head_object(Bucket=bucket, Key=key).get("Metadata") or {})


__all__ = ["S3Client"]
