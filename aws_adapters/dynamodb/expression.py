"""
Expression composition for DynamoDB requests.

Conditions and filters are regular ``boto3.dynamodb.conditions`` objects
(``Attr("status").eq("active")``); they are rendered through one shared
``ConditionExpressionBuilder`` so their ``#n``/``:v`` placeholders never
collide. Update actions and projections use their own ``#u``/``:u``/``#p``
placeholders. All parts of an :class:`Expression` are rendered together into a
single :class:`BuiltExpression`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from boto3.dynamodb.conditions import ConditionBase, ConditionExpressionBuilder

from .marshal import marshal_value


class Update:
    """Chainable builder for SET / REMOVE / ADD / DELETE update actions."""

    def __init__(self) -> None:
        self._set: List[Tuple[str, Any]] = []
        self._remove: List[str] = []
        self._add: List[Tuple[str, Any]] = []
        self._delete: List[Tuple[str, Any]] = []

    def set(self, path: str, value: Any) -> "Update":
        self._set.append((path, value))
        return self

    def remove(self, path: str) -> "Update":
        self._remove.append(path)
        return self

    def add(self, path: str, value: Any) -> "Update":
        self._add.append((path, value))
        return self

    def delete(self, path: str, value: Any) -> "Update":
        self._delete.append((path, value))
        return self

    def is_empty(self) -> bool:
        return not (self._set or self._remove or self._add or self._delete)


@dataclass
class BuiltExpression:
    """Rendered expression strings plus their placeholder maps."""

    update: Optional[str] = None
    condition: Optional[str] = None
    projection: Optional[str] = None
    filter: Optional[str] = None
    names: Dict[str, str] = field(default_factory=dict)
    values: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_params(self) -> Dict[str, Any]:
        """Request parameters for the low-level client; empty parts are omitted."""
        params: Dict[str, Any] = {}
        for key, val in (
            ("UpdateExpression", self.update),
            ("ConditionExpression", self.condition),
            ("ProjectionExpression", self.projection),
            ("FilterExpression", self.filter),
        ):
            if val:
                params[key] = val
        if self.names:
            params["ExpressionAttributeNames"] = dict(self.names)
        if self.values:
            params["ExpressionAttributeValues"] = dict(self.values)
        return params


class _Placeholders:
    def __init__(self, names: Dict[str, str], values: Dict[str, Dict[str, Any]]):
        self._names = names
        self._values = values
        self._by_name: Dict[Tuple[str, str], str] = {}
        self._name_counts: Dict[str, int] = {}
        self._value_count = 0

    def path(self, path: str, prefix: str) -> str:
        if not path:
            raise ValueError("attribute path must be non-empty")
        return ".".join(self._name(segment, prefix) for segment in path.split("."))

    def _name(self, segment: str, prefix: str) -> str:
        if not segment:
            raise ValueError("attribute path contains an empty segment")
        key = (prefix, segment)
        if key not in self._by_name:
            count = self._name_counts.get(prefix, 0)
            self._name_counts[prefix] = count + 1
            placeholder = f"#{prefix}{count}"
            self._by_name[key] = placeholder
            self._names[placeholder] = segment
        return self._by_name[key]

    def value(self, value: Any, prefix: str) -> str:
        placeholder = f":{prefix}{self._value_count}"
        self._value_count += 1
        self._values[placeholder] = marshal_value(value)
        return placeholder


@dataclass
class Expression:
    """Optional update, condition, projection and filter parts of one request."""

    update: Optional[Update] = None
    condition: Optional[ConditionBase] = None
    projection: Optional[Sequence[str]] = None
    filter: Optional[ConditionBase] = None

    def build(self) -> BuiltExpression:
        """Render every part.

        Raises:
            ValueError / TypeError: empty update, empty projection or bad paths.
            boto3.exceptions.DynamoDBNeedsConditionError: a condition or filter
                is not a condition object.
        """
        built = BuiltExpression()
        holders = _Placeholders(built.names, built.values)
        conditions = ConditionExpressionBuilder()

        if self.update is not None:
            built.update = _render_update(self.update, holders)
        if self.condition is not None:
            built.condition = _render_condition(conditions, self.condition, built)
        if self.projection is not None:
            if isinstance(self.projection, str) or not self.projection:
                raise ValueError("projection must be a non-empty sequence of attribute paths")
            built.projection = ", ".join(holders.path(p, "p") for p in self.projection)
        if self.filter is not None:
            built.filter = _render_condition(conditions, self.filter, built)
        return built


def _render_condition(builder: ConditionExpressionBuilder, condition: Any, built: BuiltExpression) -> str:
    rendered = builder.build_expression(condition, is_key_condition=False)
    built.names.update(rendered.attribute_name_placeholders)
    built.values.update({k: marshal_value(v) for k, v in rendered.attribute_value_placeholders.items()})
    return rendered.condition_expression


def _render_update(update: Update, holders: _Placeholders) -> str:
    if update.is_empty():
        raise ValueError("update expression has no actions")
    clauses: List[str] = []
    if update._set:
        clauses.append("SET " + ", ".join(f"{holders.path(p, 'u')} = {holders.value(v, 'u')}" for p, v in update._set))
    if update._remove:
        clauses.append("REMOVE " + ", ".join(holders.path(p, "u") for p in update._remove))
    if update._add:
        clauses.append("ADD " + ", ".join(f"{holders.path(p, 'u')} {holders.value(v, 'u')}" for p, v in update._add))
    if update._delete:
        clauses.append("DELETE " + ", ".join(f"{holders.path(p, 'u')} {holders.value(v, 'u')}" for p, v in update._delete))
    return " ".join(clauses)


__all__ = ["BuiltExpression", "Expression", "Update"]
