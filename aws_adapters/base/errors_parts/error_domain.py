"""
Per-service error taxonomy (closed code set plus named categories).

Defines :class:`ErrorDomain`, an immutable lookup table built once per
external service. Each domain owns a closed set of symbolic codes, groups them
into named categories used by predicate methods, and designates the sentinel
code used for failures whose shape or code it does not recognize.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

UNKNOWN_BEHAVIOUR_CODE = "ErrUnknownBehaviour"


def codes(*values: str) -> frozenset[str]:
    """Shorthand used by the domain tables."""
    return frozenset(values)


@dataclass(frozen=True)
class ErrorDomain:
    """Immutable category table for one external service.

    Attributes:
        name: Domain key used in logs (e.g. ``"cognito"``).
        categories: Category name mapped to the codes belonging to it.
            Categories may overlap when the service documents a code under
            more than one failure class.
        local_codes: Codes assigned by the adapters themselves through
            ``wrap_with_code`` rather than reported by the service.
        extra_codes: Service codes that are recognized but belong to no
            category.
        unknown_code: Sentinel for unrecognized failures.
    """

    name: str
    categories: Mapping[str, frozenset[str]]
    local_codes: frozenset[str] = frozenset()
    extra_codes: frozenset[str] = frozenset()
    unknown_code: str = UNKNOWN_BEHAVIOUR_CODE
    _all_codes: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        table = MappingProxyType({k: frozenset(v) for k, v in self.categories.items()})
        object.__setattr__(self, "categories", table)
        merged: set[str] = {self.unknown_code}
        merged.update(self.local_codes, self.extra_codes)
        for members in table.values():
            merged.update(members)
        object.__setattr__(self, "_all_codes", frozenset(merged))

    def codes(self) -> frozenset[str]:
        """Return the closed code set of the domain."""
        return self._all_codes

    def normalize(self, code: Optional[str]) -> str:
        """Return ``code`` when it belongs to the domain, else the sentinel."""
        if code and code in self._all_codes:
            return code
        return self.unknown_code

    def in_category(self, code: str, category: str) -> bool:
        try:
            members = self.categories[category]
        except KeyError:
            raise KeyError(f"{self.name} has no error category {category!r}") from None
        return code in members

    def categories_of(self, code: str) -> frozenset[str]:
        return frozenset(name for name, members in self.categories.items() if code in members)

    def category_names(self) -> Iterable[str]:
        return tuple(self.categories)


GENERIC_DOMAIN = ErrorDomain(name="generic", categories={})


__all__ = ["ErrorDomain", "GENERIC_DOMAIN", "UNKNOWN_BEHAVIOUR_CODE", "codes"]
