"""Error log configuration keys and validation."""
from errorlog.config.models import ErrorLogConfig
from errorlog.config.store_settings import BACKEND_NAME

__all__ = ["ErrorLogConfig", "BACKEND_NAME"]
