"""
Helpers that inspect a raw failure before it is classified.

botocore reports service failures as ``ClientError`` whose parsed response
carries the provider's symbolic code, message and HTTP status. Failures raised
locally by botocore (``BotoCoreError`` subclasses such as connection or
parameter validation errors) carry no service code and fall through to the
plain-exception path, like any other exception or value of unknown shape.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional

from botocore.exceptions import ClientError


def _error_block(exc: Any) -> Mapping[str, Any]:
    response = getattr(exc, "response", None)
    if not isinstance(response, Mapping):
        return {}
    block = response.get("Error")
    return block if isinstance(block, Mapping) else {}


def extract_provider_code(exc: Any) -> Optional[str]:
    """Return the symbolic code already carried by ``exc``, if any.

    Precedence:
        1. Previously classified errors keep their code.
        2. ``ClientError`` uses ``response["Error"]["Code"]``.
        3. Everything else has no code.
    """
    from .classified_error import ClassifiedError

    if isinstance(exc, ClassifiedError):
        return exc.code or None
    if isinstance(exc, ClientError):
        code = _error_block(exc).get("Code")
        if isinstance(code, str) and code:
            return code
    return None


def extract_http_status(exc: Any) -> Optional[int]:
    """Attempt to extract the HTTP status a provider reported for ``exc``."""
    from .classified_error import ClassifiedError

    if isinstance(exc, ClassifiedError):
        return exc.http_status
    response = getattr(exc, "response", None)
    if isinstance(response, Mapping):
        meta = response.get("ResponseMetadata")
        if isinstance(meta, Mapping):
            status = meta.get("HTTPStatusCode")
            if isinstance(status, int) and 100 <= status < 600:
                return status
    return None


def describe_cause(exc: Any) -> str:
    """Render ``exc`` for the ``"<message>: <cause>"`` composition.

    ``ClientError`` renders as ``"<Code>: <service message>"`` instead of the
    verbose botocore sentence, so the code stays visible in the message.
    """
    if isinstance(exc, ClientError):
        block = _error_block(exc)
        code = block.get("Code")
        if code:
            return f"{code}: {block.get('Message', '')}"
    try:
        return str(exc)
    except Exception:  # pragma: no cover - exotic __str__ implementations
        return repr(exc)


__all__ = ["describe_cause", "extract_http_status", "extract_provider_code"]
