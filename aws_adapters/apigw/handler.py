"""
Adapter between the Lambda proxy integration and a plain request handler.

``wrap_handler`` turns a handler working on :class:`Request`/:class:`Response`
values into the ``(event, context) -> dict`` callable Lambda invokes. Event
converters pick which parts of the raw event reach the request; without
explicit converters every supported part is copied.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Mapping, Protocol, Union

from ..base.logging import LogContext, get_logger, log_event
from .request import EVENT_FIELDS, Request
from .response import Response

EventConverter = Callable[[Mapping[str, Any]], Dict[str, Any]]
LambdaHandler = Callable[[Mapping[str, Any], Any], Dict[str, Any]]

_LOGGER = get_logger("aws_adapters.apigw")


class RequestHandler(Protocol):  # pragma: no cover - structural protocol
    def handle(self, request: Request) -> Response: ...


def _copy(field: str) -> EventConverter:
    event_key = EVENT_FIELDS[field]

    def convert(event: Mapping[str, Any]) -> Dict[str, Any]:
        value = event.get(event_key)
        return {} if value is None else {field: value}

    convert.__name__ = f"convert_{field}"
    return convert


convert_headers = _copy("headers")
convert_multi_value_headers = _copy("multi_value_headers")
convert_query_params = _copy("query_string_parameters")
convert_multi_value_query_params = _copy("multi_value_query_string_parameters")
convert_path_params = _copy("path_parameters")
convert_path = _copy("path")
convert_stage_variables = _copy("stage_variables")
convert_is_base64_encoded = _copy("is_base64_encoded")
convert_body = _copy("body")

DEFAULT_CONVERTERS = (
    convert_headers,
    convert_multi_value_headers,
    convert_query_params,
    convert_multi_value_query_params,
    convert_path_params,
    convert_path,
    convert_stage_variables,
    convert_is_base64_encoded,
    convert_body,
)


def to_request(event: Mapping[str, Any], *converters: EventConverter) -> Request:
    """Build a :class:`Request` from ``event``.

    ``resource`` and ``method`` are always copied; the remaining fields come
    from ``converters`` (all of them when none are given).
    """
    fields: Dict[str, Any] = {
        "resource": event.get("resource") or "",
        "method": event.get("httpMethod") or "",
    }
    for convert in converters or DEFAULT_CONVERTERS:
        fields.update(convert(event))
    return Request(**fields)


def wrap_handler(
    handler: Union[RequestHandler, Callable[[Request], Response]],
    *converters: EventConverter,
) -> LambdaHandler:
    """Return the Lambda entry point for ``handler``.

    Handler exceptions propagate unchanged to the Lambda runtime after one
    structured log event.
    """
    handle = handler.handle if hasattr(handler, "handle") else handler

    def lambda_handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
        request = to_request(event, *converters)
        try:
            response = handle(request)
        except Exception as e:
            log_event(
                _LOGGER,
                "apigw.handler.error",
                LogContext(
                    service="apigw",
                    operation=f"{request.method} {request.resource}",
                    request_id=getattr(context, "aws_request_id", None),
                ),
                level=logging.ERROR,
                error=str(e),
                error_code=getattr(e, "code", None),
                failure_class=e.__class__.__name__,
            )
            raise
        return response.to_event()

    return lambda_handler


__all__ = [
    "DEFAULT_CONVERTERS",
    "EventConverter",
    "LambdaHandler",
    "RequestHandler",
    "convert_body",
    "convert_headers",
    "convert_is_base64_encoded",
    "convert_multi_value_headers",
    "convert_multi_value_query_params",
    "convert_path",
    "convert_path_params",
    "convert_query_params",
    "convert_stage_variables",
    "to_request",
    "wrap_handler",
]
