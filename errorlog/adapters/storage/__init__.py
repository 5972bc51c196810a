"""Document-store implementations of ErrorLogPort."""
from errorlog.adapters.storage.redis_error_log import RedisErrorLog

__all__ = ["RedisErrorLog"]
