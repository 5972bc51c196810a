"""Error log port interface.

Defines the contract for error log persistence. Host error-reporting code
depends only on this abstraction, not on specific implementations like Redis.
"""
from abc import ABC, abstractmethod
from typing import List, Tuple

from errorlog.core.models.error import ErrorLogEntry, ErrorRecord


class ErrorLogPort(ABC):
    """Abstract interface for error log persistence.

    Implementations: RedisErrorLog
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the backend."""
        pass

    @abstractmethod
    async def log(self, error: ErrorRecord) -> str:
        """Persist an error.

        Args:
            error: Error record to store

        Returns:
            Freshly generated id of the stored error
        """
        pass

    @abstractmethod
    async def get_error(self, error_id: str) -> ErrorLogEntry:
        """Retrieve a single error.

        Args:
            error_id: Id returned by log()

        Returns:
            The stored entry

        Raises:
            NotFoundError: If no such error exists for this application
        """
        pass

    @abstractmethod
    async def get_errors(
        self, page_index: int, page_size: int
    ) -> Tuple[List[ErrorLogEntry], int]:
        """Retrieve one page of errors, newest first.

        Args:
            page_index: Zero-based page number
            page_size: Maximum entries per page

        Returns:
            Tuple of (entries on the page, total errors for this application)
        """
        pass
