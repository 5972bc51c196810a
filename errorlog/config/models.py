"""Validated view of the error log configuration mapping."""
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from errorlog.config.store_settings import (
    APPLICATION_NAME_KEY,
    CONNECTION_STRING_APP_KEY,
    CONNECTION_STRING_KEY,
    CONNECTION_STRING_NAME_KEY,
)
from errorlog.core.exceptions import ConfigurationError


class ErrorLogConfig(BaseModel):
    """Error log configuration as handed over by the host.

    Unknown keys are ignored so hosts can pass their whole section through.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    connection_string_name: Optional[str] = Field(
        default=None, alias=CONNECTION_STRING_NAME_KEY
    )
    connection_string: Optional[str] = Field(default=None, alias=CONNECTION_STRING_KEY)
    connection_string_app_key: Optional[str] = Field(
        default=None, alias=CONNECTION_STRING_APP_KEY
    )
    application_name: Optional[str] = Field(default=None, alias=APPLICATION_NAME_KEY)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> "ErrorLogConfig":
        """Validate a raw configuration mapping.

        Raises:
            ConfigurationError: If the mapping is missing or a recognized
                key holds a non-string value
        """
        if config is None:
            raise ConfigurationError("Configuration for the error log is missing.")
        try:
            return cls.model_validate(dict(config))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid error log configuration: {e}") from e
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Error log configuration is not a mapping: {e}") from e
