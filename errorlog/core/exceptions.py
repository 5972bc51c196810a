"""Core error-log exceptions.

All exceptions raised by the error log inherit from ErrorLogError.
Adapters catch provider-specific errors and re-raise as these.
"""
from typing import Optional


class ErrorLogError(Exception):
    """Base for all error log errors."""
    pass


class ConfigurationError(ErrorLogError):
    """Missing or invalid configuration; the store cannot be built."""
    pass


class ArgumentError(ErrorLogError):
    """Invalid call argument (missing record, empty id, bad page bounds)."""
    pass


class NotFoundError(ErrorLogError):
    """No error document with the given id in this application's namespace."""

    def __init__(self, error_id: str, application_name: Optional[str] = None):
        self.error_id = error_id
        self.application_name = application_name
        message = f"Error '{error_id}' not found"
        if application_name is not None:
            message += f" for application '{application_name}'"
        super().__init__(message)


class StorageError(ErrorLogError):
    """Document store operation failed."""
    pass
