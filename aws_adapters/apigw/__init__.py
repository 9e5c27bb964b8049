"""API Gateway Lambda proxy event conversion."""

from .handler import (
    DEFAULT_CONVERTERS,
    EventConverter,
    LambdaHandler,
    RequestHandler,
    convert_body,
    convert_headers,
    convert_is_base64_encoded,
    convert_multi_value_headers,
    convert_multi_value_query_params,
    convert_path,
    convert_path_params,
    convert_query_params,
    convert_stage_variables,
    to_request,
    wrap_handler,
)
from .request import (
    DELETE_METHOD,
    GET_METHOD,
    PATCH_METHOD,
    POST_METHOD,
    PUT_METHOD,
    Request,
)
from .response import (
    STATUS_ACCEPTED,
    STATUS_BAD_REQUEST,
    STATUS_CONFLICT,
    STATUS_CREATED,
    STATUS_FORBIDDEN,
    STATUS_INTERNAL_SERVER_ERROR,
    STATUS_NO_CONTENT,
    STATUS_NOT_FOUND,
    STATUS_OK,
    STATUS_UNAUTHORIZED,
    Response,
)

__all__ = [
    "DEFAULT_CONVERTERS",
    "DELETE_METHOD",
    "EventConverter",
    "GET_METHOD",
    "LambdaHandler",
    "PATCH_METHOD",
    "POST_METHOD",
    "PUT_METHOD",
    "Request",
    "RequestHandler",
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
