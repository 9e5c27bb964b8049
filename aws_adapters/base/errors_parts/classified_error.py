"""
Normalized adapter error type.

Wraps a provider-specific failure (or a locally detected one) in a uniform
``message``/``code`` shape while keeping the original cause for chained
diagnostics. Each service subclasses :class:`ClassifiedError`, binds its
:class:`ErrorDomain` and adds one predicate method per failure category.
"""
from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from typing import Any, ClassVar, Optional, Type, TypeVar

from .classification import describe_cause, extract_http_status, extract_provider_code
from .error_domain import GENERIC_DOMAIN, ErrorDomain

E = TypeVar("E", bound="ClassifiedError")


@dataclass(eq=False)
class ClassifiedError(Exception):
    """Structured adapter error with a code from a closed, per-domain set.

    Fields are write-once: reassigning or deleting one after construction
    raises ``dataclasses.FrozenInstanceError``. Exception bookkeeping
    (``__cause__``, ``__traceback__``, notes) stays writable.

    Attributes:
        message: ``"<operation description>: <cause description>"``.
        code: Symbolic classification used by the predicate methods.
        cause: Original failure, also chained as ``__cause__``.
        provider_code: Raw code reported by the provider, retained even when
            it was normalized to the unknown sentinel.
        http_status: HTTP status reported by the provider, when available.
    """

    message: str
    code: str
    cause: Optional[BaseException] = None
    provider_code: Optional[str] = None
    http_status: Optional[int] = None

    domain: ClassVar[ErrorDomain] = GENERIC_DOMAIN

    def __post_init__(self) -> None:
        super().__init__(self.message)
        if isinstance(self.cause, BaseException):
            self.__cause__ = self.cause

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self.__dataclass_fields__ and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in self.__dataclass_fields__:
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def wrap(cls: Type[E], cause: Any, message: str) -> E:
        """Classify ``cause`` under this domain.

        A code already carried by the cause is reused when the domain knows
        it; anything else lands on the domain's unknown sentinel. Never raises.
        """
        provider_code = extract_provider_code(cause)
        return cls._build(cause, message, cls.domain.normalize(provider_code), provider_code)

    @classmethod
    def wrap_with_code(cls: Type[E], cause: Any, message: str, code: str) -> E:
        """Like :meth:`wrap` but with an explicit, caller-chosen ``code``."""
        return cls._build(cause, message, code, extract_provider_code(cause))

    @classmethod
    def _build(cls: Type[E], cause: Any, message: str, code: str, provider_code: Optional[str]) -> E:
        return cls(
            message=f"{message}: {describe_cause(cause)}",
            code=code,
            cause=cause if isinstance(cause, BaseException) else None,
            provider_code=provider_code,
            http_status=extract_http_status(cause),
        )

    def is_category(self, category: str) -> bool:
        return self.domain.in_category(self.code, category)

    @property
    def categories(self) -> frozenset[str]:
        """All categories whose code set contains this error's code."""
        return self.domain.categories_of(self.code)

    def unknown(self) -> bool:
        return self.code == self.domain.unknown_code


__all__ = ["ClassifiedError"]
