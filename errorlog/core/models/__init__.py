"""Error log data structures."""

from errorlog.core.models.error import ErrorDocument, ErrorLogEntry, ErrorRecord

__all__ = [
    "ErrorDocument",
    "ErrorLogEntry",
    "ErrorRecord",
]
