"""DynamoDB item adapter, key/expression helpers and error taxonomy."""

from .client import DynamoDBClient, UpdateOp
from .errors import (
    DYNAMODB_ERRORS,
    INVALID_CONDITION_ERR_CODE,
    MARSHAL_ERR_CODE,
    THROTTLING_ERR_CODE,
    UNMARSHAL_ERR_CODE,
    UNRECOGNIZED_CLIENT_ERR_CODE,
    VALIDATION_ERR_CODE,
    DynamoDBError,
)
from .expression import BuiltExpression, Expression, Update
from .key import Key
from .marshal import marshal_item, unmarshal_item

__all__ = [
    "BuiltExpression",
    "DYNAMODB_ERRORS",
    "DynamoDBClient",
    "DynamoDBError",
    "Expression",
    "INVALID_CONDITION_ERR_CODE",
    "Key",
    "MARSHAL_ERR_CODE",
    "THROTTLING_ERR_CODE",
    "UNMARSHAL_ERR_CODE",
    "UNRECOGNIZED_CLIENT_ERR_CODE",
    "Update",
    "UpdateOp",
    "VALIDATION_ERR_CODE",
    "marshal_item",
    "unmarshal_item",
]
