"""Call-boundary helpers shared by the adapters."""

from .error_handling import raises_classified

__all__ = ["raises_classified"]
