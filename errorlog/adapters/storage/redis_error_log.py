"""Redis implementation of ErrorLogPort.

Stores each error as a JSON document under a per-application key prefix and
keeps a sorted set, scored by error time, for newest-first paging.

Key layout for application ``app``:
    errorlog:{app}:doc:<id>    JSON ErrorDocument
    errorlog:{app}:index       sorted set of ids scored by error time (microseconds)
    errorlog:{app}:created     time the namespace was first initialized
    errorlog:applications      set of every initialized application name

The braces make the application name a cluster hash tag so one namespace's
keys always share a slot and can be written in a single transaction.
"""
import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, List, Mapping, Optional, Tuple

import redis.asyncio as aioredis
from prometheus_client import Counter, Histogram
from redis.exceptions import RedisError

from errorlog.config.models import ErrorLogConfig
from errorlog.config.store_settings import (
    APPLICATION_NAME_KEY,
    APPLICATIONS_KEY,
    BACKEND_NAME,
    CONNECTION_STRING_KEY,
    CREATED_KEY_SEGMENT,
    DOCUMENT_KEY_SEGMENT,
    INDEX_KEY_SEGMENT,
    KEY_NAMESPACE_ROOT,
)
from errorlog.core.connection import resolve_connection_string
from errorlog.core.exceptions import (
    ArgumentError,
    ConfigurationError,
    NotFoundError,
    StorageError,
)
from errorlog.core.models.error import ErrorDocument, ErrorLogEntry, ErrorRecord
from errorlog.core.ports.error_log import ErrorLogPort

logger = logging.getLogger(__name__)

# Prometheus metrics
ERRORS_LOGGED = Counter(
    "errorlog_errors_logged_total", "Errors persisted to the error log", ["application"]
)
STORAGE_DURATION = Histogram(
    "errorlog_storage_duration_seconds", "Error log storage round trip time", ["operation"]
)


def _default_client(connection_string: str) -> aioredis.Redis:
    return aioredis.Redis.from_url(connection_string, decode_responses=True)


def _as_text(value: Any) -> str:
    return value.decode("utf-8") if isinstance(value, bytes) else value


class RedisErrorLog(ErrorLogPort):
    """Redis implementation of ErrorLogPort.

    One client (and its connection pool) is created per store and shared by
    every call; each call borrows a connection or pipeline only for its own
    duration.

    Args:
        config: Error log configuration mapping (see store_settings for keys)
        app_settings: Flat application settings table, used when the
            connection string comes from ``connectionStringAppKey``
        connection_strings: Optional named connection string table for
            ``connectionStringName``
        client_factory: Builds the Redis client from the connection string
            (default: redis.asyncio.Redis.from_url with decoded responses)
    """

    def __init__(
        self,
        config: Mapping[str, Any],
        app_settings: Optional[Mapping[str, str]] = None,
        connection_strings: Optional[Mapping[str, str]] = None,
        client_factory: Optional[Callable[[str], Any]] = None,
    ):
        if config is None:
            raise ConfigurationError("Configuration for the Redis error log is missing.")

        settings = ErrorLogConfig.from_mapping(config)
        connection_string = resolve_connection_string(
            settings, app_settings, connection_strings
        )

        # No connection string means construction cannot go on.
        if not connection_string:
            raise ConfigurationError("Connection string is missing for the Redis error log.")

        self._connection_string = connection_string
        self._application_name = settings.application_name or ""
        # Braces would end the hash tag early and let names overlap.
        if "{" in self._application_name or "}" in self._application_name:
            raise ConfigurationError(
                f"Application name '{self._application_name}' must not contain braces."
            )
        self._prefix = f"{KEY_NAMESPACE_ROOT}:{{{self._application_name}}}:"

        factory = client_factory or _default_client
        try:
            self._redis = factory(connection_string)
        except (RedisError, ValueError) as e:
            raise StorageError(f"Failed to create Redis client for error log: {e}") from e

    @classmethod
    def from_connection_string(
        cls,
        connection_string: str,
        application_name: str = "",
        client_factory: Optional[Callable[[str], Any]] = None,
    ) -> "RedisErrorLog":
        """Build a store straight from a connection string.

        Raises:
            ArgumentError: If the connection string is None or empty
        """
        if connection_string is None:
            raise ArgumentError("connection_string is required")
        if not connection_string:
            raise ArgumentError("connection_string must not be empty")
        return cls(
            {CONNECTION_STRING_KEY: connection_string, APPLICATION_NAME_KEY: application_name},
            client_factory=client_factory,
        )

    @classmethod
    async def open(
        cls, config: Mapping[str, Any], **kwargs: Any
    ) -> "RedisErrorLog":
        """Construct and initialize a store in one step."""
        store = cls(config, **kwargs)
        try:
            await store.initialize()
        except BaseException:
            await store.close()
            raise
        return store

    @property
    def name(self) -> str:
        return BACKEND_NAME

    @property
    def application_name(self) -> str:
        return self._application_name

    def _key(self, *segments: str) -> str:
        """Build a key inside this application's namespace."""
        return self._prefix + ":".join(segments)

    @property
    def _index_key(self) -> str:
        return self._key(INDEX_KEY_SEGMENT)

    def _document_key(self, error_id: str) -> str:
        return self._key(DOCUMENT_KEY_SEGMENT, error_id)

    @staticmethod
    def _generate_id() -> str:
        """Fresh random id for a new document."""
        return str(uuid.uuid4())

    async def initialize(self) -> None:
        """Ensure this application's namespace exists. Safe to repeat."""
        try:
            # Registry and namespace keys live in different slots, so no MULTI.
            async with self._redis.pipeline(transaction=False) as pipe:
                pipe.sadd(APPLICATIONS_KEY, self._application_name)
                pipe.setnx(
                    self._key(CREATED_KEY_SEGMENT),
                    datetime.now(timezone.utc).isoformat(),
                )
                await pipe.execute()
        except RedisError as e:
            raise StorageError(
                f"Failed to initialize error log for application '{self._application_name}': {e}"
            ) from e
        logger.info(
            f"{self.name} ready for application '{self._application_name}'"
        )

    async def close(self) -> None:
        """Release the Redis client and its connections."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisErrorLog":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def log(self, error: ErrorRecord) -> str:
        """Store an error under a fresh id and return the id."""
        if error is None:
            raise ArgumentError("error is required")

        document = ErrorDocument(id=self._generate_id(), error=error)
        try:
            payload = document.to_json()
        except (TypeError, ValueError) as e:
            raise StorageError(f"Failed to serialize error {document.id}: {e}") from e

        with STORAGE_DURATION.labels(operation="log").time():
            try:
                async with self._redis.pipeline(transaction=True) as pipe:
                    pipe.set(self._document_key(document.id), payload, nx=True)
                    pipe.zadd(self._index_key, {document.id: error.sort_key()}, nx=True)
                    stored, _ = await pipe.execute()
            except RedisError as e:
                raise StorageError(f"Failed to store error {document.id}: {e}") from e

        if not stored:
            raise StorageError(f"Error id {document.id} is already in use")

        ERRORS_LOGGED.labels(application=self._application_name).inc()
        logger.debug(f"Logged error {document.id} ({error.type}) for '{self._application_name}'")
        return document.id

    async def get_error(self, error_id: str) -> ErrorLogEntry:
        """Load one error from this application's namespace."""
        if not error_id:
            raise ArgumentError("error_id is required")

        # Only generated ids can name a document.
        try:
            key = self._document_key(str(uuid.UUID(error_id)))
        except (TypeError, ValueError, AttributeError):
            raise NotFoundError(error_id, self._application_name) from None

        with STORAGE_DURATION.labels(operation="get_error").time():
            try:
                raw = await self._redis.get(key)
            except RedisError as e:
                raise StorageError(f"Failed to load error {error_id}: {e}") from e

        if raw is None:
            raise NotFoundError(error_id, self._application_name)

        document = self._decode(error_id, raw)
        return ErrorLogEntry(id=document.id, error=document.error, log_name=self.name)

    async def get_errors(
        self, page_index: int, page_size: int
    ) -> Tuple[List[ErrorLogEntry], int]:
        """Page through errors, newest first.

        Errors with equal times come in descending id order, so the same
        call against unchanged data always returns the same page.
        """
        if page_index < 0:
            raise ArgumentError(f"page_index must be >= 0, got {page_index}")
        if page_size <= 0:
            raise ArgumentError(f"page_size must be > 0, got {page_size}")

        start = page_index * page_size
        stop = start + page_size - 1

        with STORAGE_DURATION.labels(operation="get_errors").time():
            try:
                async with self._redis.pipeline(transaction=True) as pipe:
                    pipe.zcard(self._index_key)
                    pipe.zrevrange(self._index_key, start, stop)
                    total, ids = await pipe.execute()

                if not ids:
                    return [], total

                ids = [_as_text(i) for i in ids]
                raws = await self._redis.mget([self._document_key(i) for i in ids])
            except RedisError as e:
                raise StorageError(
                    f"Failed to list errors (page {page_index}, size {page_size}): {e}"
                ) from e

        entries = []
        for error_id, raw in zip(ids, raws):
            # Index entry without its document; nothing to show.
            if raw is None:
                continue
            document = self._decode(error_id, raw)
            entries.append(ErrorLogEntry(id=document.id, error=document.error, log_name=self.name))

        logger.debug(
            f"Read {len(entries)} of {total} errors for '{self._application_name}' "
            f"(page {page_index}, size {page_size})"
        )
        return entries, total

    @staticmethod
    def _decode(error_id: str, raw: Any) -> ErrorDocument:
        try:
            return ErrorDocument.from_json(raw)
        except (KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Stored error {error_id} is unreadable: {e}") from e
