"""
Conversion between native records and DynamoDB attribute-value maps.

Items may be plain mappings, pydantic models or dataclass instances. Floats are
converted to ``Decimal`` through their string form because boto3's
``TypeSerializer`` refuses binary floats.
"""
from __future__ import annotations

import dataclasses
from decimal import Decimal, DecimalException
from typing import Any, Dict, Mapping

from boto3.dynamodb.types import TypeDeserializer, TypeSerializer
from pydantic import BaseModel

_SERIALIZER = TypeSerializer()
_DESERIALIZER = TypeDeserializer()


def _coerce_floats(value: Any) -> Any:
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, Mapping):
        return {k: _coerce_floats(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_coerce_floats(v) for v in value]
    return value


def to_record(item: Any) -> Dict[str, Any]:
    """Return ``item`` as a plain ``dict`` ready for serialization."""
    if isinstance(item, BaseModel):
        return item.model_dump(mode="python", exclude_none=True)
    if dataclasses.is_dataclass(item) and not isinstance(item, type):
        return dataclasses.asdict(item)
    if isinstance(item, Mapping):
        return dict(item)
    raise TypeError(f"cannot marshal item of type {type(item).__name__}; expected a mapping, pydantic model or dataclass")


def marshal_value(value: Any) -> Dict[str, Any]:
    """Serialize one value; numbers beyond DynamoDB's 38-digit precision raise ``ValueError``."""
    try:
        return _SERIALIZER.serialize(_coerce_floats(value))
    except DecimalException as e:
        raise ValueError(f"number {value!r} does not fit DynamoDB's 38-digit precision") from e


def marshal_item(item: Any) -> Dict[str, Dict[str, Any]]:
    """Serialize every attribute of ``item``; raises ``TypeError`` or ``ValueError`` on unsupported values."""
    return {name: marshal_value(value) for name, value in to_record(item).items()}


def unmarshal_item(attributes: Mapping[str, Mapping[str, Any]]) -> Dict[str, Any]:
    return {name: _DESERIALIZER.deserialize(value) for name, value in attributes.items()}


__all__ = ["marshal_item", "marshal_value", "to_record", "unmarshal_item"]
