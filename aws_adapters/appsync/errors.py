"""
AppSync resolver error payloads.

Lambda resolvers report failures to AppSync as ``{"errorType", "message",
"info"}``. :func:`from_classified` derives that payload from any adapter
error by looking at the categories its code belongs to.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..base.errors import ClassifiedError


class ErrorType(str, Enum):
    VALIDATION = "Validation"
    CONFLICT = "Conflict"
    INTERNAL = "Internal"
    NOT_FOUND = "NotFound"


# Checked in order; the first error type sharing a category with the error wins.
_CATEGORY_ERROR_TYPES = (
    (ErrorType.NOT_FOUND, frozenset({"user_not_found", "resource_not_found"})),
    (
        ErrorType.CONFLICT,
        frozenset(
            {
                "alias_exists",
                "group_exists",
                "username_exists",
                "already_exists",
                "resource_already_exists",
                "condition_failed",
                "resource_in_use",
            }
        ),
    ),
    (
        ErrorType.VALIDATION,
        frozenset(
            {
                "validation_failed",
                "invalid_condition",
                "invalid_request",
                "invalid_password",
                "code_mismatch",
                "code_expired",
                "marshalling_failed",
            }
        ),
    ),
)


class AppSyncError(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    error_type: ErrorType = Field(alias="errorType")
    message: str
    info: Optional[Any] = None

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


def new_error(error_type: ErrorType, message: str, info: Any = None) -> AppSyncError:
    return AppSyncError(error_type=error_type, message=message, info=info)


def error_type_for(err: ClassifiedError) -> ErrorType:
    categories = err.categories
    for error_type, members in _CATEGORY_ERROR_TYPES:
        if categories & members:
            return error_type
    return ErrorType.INTERNAL


def from_classified(err: ClassifiedError, info: Any = None) -> AppSyncError:
    """Map an adapter error to a resolver error, keeping its code in ``info`` by default."""
    if info is None:
        info = {"code": err.code}
    return new_error(error_type_for(err), err.message, info)


__all__ = ["AppSyncError", "ErrorType", "error_type_for", "from_classified", "new_error"]
