"""Normalized handler response and its conversion to a proxy response event."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

STATUS_OK = 200
STATUS_CREATED = 201
STATUS_ACCEPTED = 202
STATUS_NO_CONTENT = 204
STATUS_BAD_REQUEST = 400
STATUS_UNAUTHORIZED = 401
STATUS_FORBIDDEN = 403
STATUS_NOT_FOUND = 404
STATUS_CONFLICT = 409
STATUS_INTERNAL_SERVER_ERROR = 500


class Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode", ge=100, le=599)
    body: str = ""
    headers: Optional[Dict[str, str]] = None
    multi_value_headers: Optional[Dict[str, List[str]]] = Field(default=None, alias="multiValueHeaders")
    is_base64_encoded: bool = Field(default=False, alias="isBase64Encoded")

    @classmethod
    def with_json(cls, status_code: int, payload: Any, headers: Optional[Dict[str, str]] = None) -> "Response":
        """Serialize ``payload`` as the body and set ``Content-Type``."""
        merged = {"Content-Type": "application/json"}
        merged.update(headers or {})
        return cls(status_code=status_code, body=json.dumps(payload), headers=merged)

    def to_event(self) -> Dict[str, Any]:
        """Proxy response dict; unset header maps are omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = [
    "Response",
    "STATUS_ACCEPTED",
    "STATUS_BAD_REQUEST",
    "STATUS_CONFLICT",
    "STATUS_CREATED",
    "STATUS_FORBIDDEN",
    "STATUS_INTERNAL_SERVER_ERROR",
    "STATUS_NOT_FOUND",
    "STATUS_NO_CONTENT",
    "STATUS_OK",
    "STATUS_UNAUTHORIZED",
]
