"""Pluggable error-log backend with per-application isolation."""
from errorlog.core.exceptions import (
    ArgumentError,
    ConfigurationError,
    ErrorLogError,
    NotFoundError,
    StorageError,
)
from errorlog.core.models import ErrorDocument, ErrorLogEntry, ErrorRecord
from errorlog.core.ports import ErrorLogPort

__all__ = [
    "ArgumentError",
    "ConfigurationError",
    "ErrorLogError",
    "NotFoundError",
    "StorageError",
    "ErrorDocument",
    "ErrorLogEntry",
    "ErrorRecord",
    "ErrorLogPort",
]
