"""Abstract interfaces for error log backends."""
from errorlog.core.ports.error_log import ErrorLogPort

__all__ = [
    "ErrorLogPort",
]
