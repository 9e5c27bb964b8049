from __future__ import annotations

import functools
import logging
from typing import Callable, Optional, Type, TypeVar

from ..errors import ClassifiedError
from ..logging import LogContext, log_event

T = TypeVar("T")


def raises_classified(
    error_cls: Type[ClassifiedError],
    message: str,
    *,
    logger: Optional[logging.Logger] = None,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Wrap any failure of the decorated adapter call exactly once.

    Errors that are already classified pass through untouched; everything
    else becomes ``error_cls.wrap(exc, message)`` raised from the original.
    When ``logger`` is given, one ``<domain>.<function>.error`` event is logged
    per classified failure leaving the call.
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        operation = func.__name__

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> T:
            try:
                return func(*args, **kwargs)
            except ClassifiedError as e:
                _log_failure(logger, error_cls, operation, e)
                raise
            except Exception as e:
                wrapped = error_cls.wrap(e, message)
                _log_failure(logger, error_cls, operation, wrapped)
                raise wrapped from e

        return wrapper

    return decorator


def _log_failure(
    logger: Optional[logging.Logger],
    error_cls: Type[ClassifiedError],
    operation: str,
    err: ClassifiedError,
) -> None:
    if logger is None:
        return
    domain = error_cls.domain.name
    log_event(
        logger,
        f"{domain}.{operation}.error",
        LogContext(service=domain, operation=operation),
        level=logging.WARNING,
        error_code=err.code,
        provider_code=err.provider_code,
        http_status=err.http_status,
        error=err.message,
    )


__all__ = ["raises_classified"]
