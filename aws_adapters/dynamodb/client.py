"""DynamoDB item adapter.

Purpose:
        Put (optionally conditional), get-by-key and update single items using
        the low-level ``dynamodb`` boto3 client, converting between native
        records and attribute-value maps.

Error handling:
        - Local failures carry explicit codes: ``DynamoDBMarshalErr``,
          ``DynamoDBUnmarshalErr``, ``DynamoDBInvalidConditionErr``.
        - Service failures are classified from the ``ClientError`` code.
        - No retries; throttling surfaces as ``retryable()`` for the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import DecimalException
from typing import Any, Dict, Optional, Type, TypeVar, Union

from boto3.dynamodb.conditions import ConditionBase
from boto3.exceptions import DynamoDBNeedsConditionError, DynamoDBOperationNotSupportedError
from pydantic import BaseModel, ValidationError

from ..base.logging import get_logger
from ..base.resilience import raises_classified
from ..config import AwsConfig, resolve_client
from ..config.defaults import DYNAMODB_SERVICE
from .errors import (
    INVALID_CONDITION_ERR_CODE,
    MARSHAL_ERR_CODE,
    UNMARSHAL_ERR_CODE,
    DynamoDBError,
)
from .expression import BuiltExpression, Expression
from .key import Key
from .marshal import marshal_item, unmarshal_item

M = TypeVar("M", bound=BaseModel)

_LOGGER = get_logger("aws_adapters.dynamodb")

_EXPRESSION_ERRORS = (
    DynamoDBNeedsConditionError,
    DynamoDBOperationNotSupportedError,
    TypeError,
    ValueError,
)


@dataclass(frozen=True)
class UpdateOp:
    """A single ``UpdateItem`` request."""

    key: Key
    expression: Expression
    table_name: str
    return_values: str = "NONE"


def _marshal(item: Any, message: str) -> Dict[str, Dict[str, Any]]:
    try:
        return marshal_item(item)
    except (TypeError, ValueError) as e:
        raise DynamoDBError.wrap_with_code(e, message, MARSHAL_ERR_CODE) from e


def _build(expression: Expression, message: str) -> BuiltExpression:
    try:
        return expression.build()
    except _EXPRESSION_ERRORS as e:
        raise DynamoDBError.wrap_with_code(e, message, INVALID_CONDITION_ERR_CODE) from e


class DynamoDBClient:
    def __init__(self, config: Optional[AwsConfig] = None, *, endpoint_url: Optional[str] = None, client: Any = None):
        self._client = resolve_client(config, DYNAMODB_SERVICE, client, endpoint_url=endpoint_url)

    @raises_classified(DynamoDBError, "put item failed", logger=_LOGGER)
    def put(self, item: Any, table_name: str) -> None:
        av = _marshal(item, "put item marshal failed")
        self._client.put_item(TableName=table_name, Item=av)

    @raises_classified(DynamoDBError, "put item with condition failed", logger=_LOGGER)
    def put_with_condition(self, item: Any, condition: ConditionBase, table_name: str) -> None:
        """Put ``item`` only when ``condition`` holds.

        A failed condition surfaces as ``condition_failed()``.
        """
        built = _build(Expression(condition=condition), "invalid put condition")
        av = _marshal(item, "marshal put item with condition failed")
        self._client.put_item(TableName=table_name, Item=av, **built.to_params())

    @raises_classified(DynamoDBError, "get item failed", logger=_LOGGER)
    def get(
        self,
        key: Key,
        table_name: str,
        *,
        consistent_read: bool = False,
        model: Optional[Type[M]] = None,
    ) -> Union[Dict[str, Any], M, None]:
        """Fetch one item by primary key.

        Returns ``None`` when the item does not exist, the unmarshalled
        ``dict`` otherwise, or an instance of ``model`` when one is given.
        """
        db_key = _marshal(key.as_dict(), "marshal key failed")
        output = self._client.get_item(TableName=table_name, Key=db_key, ConsistentRead=consistent_read)
        raw = output.get("Item")
        if not raw:
            return None
        try:
            item = unmarshal_item(raw)
            return model.model_validate(item) if model is not None else item
        except (TypeError, ValueError, DecimalException, ValidationError) as e:
            raise DynamoDBError.wrap_with_code(e, "unmarshal get output failed", UNMARSHAL_ERR_CODE) from e

    @raises_classified(DynamoDBError, "update item failed", logger=_LOGGER)
    def update(self, op: UpdateOp) -> Dict[str, Any]:
        """Apply ``op`` and return the attributes selected by ``return_values``."""
        if op.expression.update is None:
            raise DynamoDBError.wrap_with_code(
                ValueError("update operation without update actions"),
                "invalid update expression",
                INVALID_CONDITION_ERR_CODE,
            )
        built = _build(op.expression, "invalid update expression")
        db_key = _marshal(op.key.as_dict(), "marshal key failed")
        output = self._client.update_item(
            TableName=op.table_name,
            Key=db_key,
            ReturnValues=op.return_values,
            **built.to_params(),
        )
        try:
            return unmarshal_item(output.get("Attributes") or {})
        except (TypeError, ValueError, DecimalException) as e:
            raise DynamoDBError.wrap_with_code(e, "unmarshal update output failed", UNMARSHAL_ERR_CODE) from e


__all__ = ["DynamoDBClient", "UpdateOp"]
