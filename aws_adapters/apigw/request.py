"""
Normalized view of an API Gateway (REST, Lambda proxy) request event.

Field names are snake_case; :data:`EVENT_FIELDS` maps them to the proxy event
keys. Maps the gateway sends as ``null`` stay ``None``.
"""
from __future__ import annotations

import base64
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

GET_METHOD = "GET"
POST_METHOD = "POST"
PUT_METHOD = "PUT"
PATCH_METHOD = "PATCH"
DELETE_METHOD = "DELETE"

EVENT_FIELDS: Dict[str, str] = {
    "resource": "resource",
    "path": "path",
    "method": "httpMethod",
    "headers": "headers",
    "multi_value_headers": "multiValueHeaders",
    "query_string_parameters": "queryStringParameters",
    "multi_value_query_string_parameters": "multiValueQueryStringParameters",
    "path_parameters": "pathParameters",
    "stage_variables": "stageVariables",
    "body": "body",
    "is_base64_encoded": "isBase64Encoded",
}


class Request(BaseModel):
    model_config = ConfigDict(frozen=True)

    resource: str = ""
    path: str = ""
    method: str = ""
    headers: Optional[Dict[str, str]] = None
    multi_value_headers: Optional[Dict[str, List[str]]] = None
    query_string_parameters: Optional[Dict[str, str]] = None
    multi_value_query_string_parameters: Optional[Dict[str, List[str]]] = None
    path_parameters: Optional[Dict[str, str]] = None
    stage_variables: Optional[Dict[str, str]] = None
    body: str = ""
    is_base64_encoded: bool = False

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Case-insensitive single-value header lookup."""
        wanted = name.lower()
        for key, value in (self.headers or {}).items():
            if key.lower() == wanted:
                return value
        return default

    def raw_body(self) -> bytes:
        """Body bytes, base64-decoded when the gateway flagged it."""
        if self.is_base64_encoded:
            return base64.b64decode(self.body)
        return self.body.encode("utf-8")

    def json_body(self) -> Any:
        """Parse the body as JSON; raises ``ValueError`` on malformed input."""
        return json.loads(self.raw_body() or b"null")


__all__ = [
    "DELETE_METHOD",
    "EVENT_FIELDS",
    "GET_METHOD",
    "PATCH_METHOD",
    "POST_METHOD",
    "PUT_METHOD",
    "Request",
]
