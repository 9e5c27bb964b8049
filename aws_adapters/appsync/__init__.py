"""AppSync resolver error payloads."""

from .errors import AppSyncError, ErrorType, error_type_for, from_classified, new_error

__all__ = ["AppSyncError", "ErrorType", "error_type_for", "from_classified", "new_error"]
