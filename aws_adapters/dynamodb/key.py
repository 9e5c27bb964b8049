"""Primary key value for item lookups and updates."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Key:
    """Partition key, optionally paired with a sort key.

    The sort part is only sent when both its name and value are set.
    """

    partition_name: str
    partition_value: Any
    sort_name: Optional[str] = None
    sort_value: Any = None

    @classmethod
    def partition(cls, name: str, value: Any) -> "Key":
        return cls(partition_name=name, partition_value=value)

    @classmethod
    def partition_and_sort(cls, partition_name: str, partition_value: Any, sort_name: str, sort_value: Any) -> "Key":
        return cls(
            partition_name=partition_name,
            partition_value=partition_value,
            sort_name=sort_name,
            sort_value=sort_value,
        )

    def as_dict(self) -> Dict[str, Any]:
        out = {self.partition_name: self.partition_value}
        if self.sort_name is not None and self.sort_value is not None:
            out[self.sort_name] = self.sort_value
        return out


__all__ = ["Key"]
