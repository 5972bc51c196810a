"""
Connection string resolution.

Picks the connection descriptor for an error log out of its configuration,
checking, in order:

1. ``connectionStringName``: a named reference. Without a named table the
   name itself is the descriptor. With one, the name must be present in it;
   a missing entry is a ConfigurationError, never an empty string, while
   an entry defined as empty defers to the next candidate.
2. ``connectionString``: the descriptor given literally.
3. ``connectionStringAppKey``: a key into the flat application settings
   table; the value stored there (empty if absent) is the descriptor.

The first non-empty candidate wins. An empty result means nothing was
configured and is left to the caller to reject.
"""
from typing import Any, Mapping, Optional

from errorlog.config.models import ErrorLogConfig
from errorlog.core.exceptions import ConfigurationError


def resolve_connection_string(
    config: Mapping[str, Any],
    app_settings: Optional[Mapping[str, str]] = None,
    connection_strings: Optional[Mapping[str, str]] = None,
) -> str:
    """Resolve the connection descriptor for an error log.

    Args:
        config: Error log configuration mapping
        app_settings: Flat application settings table
        connection_strings: Optional table of named connection strings

    Returns:
        The descriptor, or "" when none is configured

    Raises:
        ConfigurationError: If the config is invalid or a named connection
            string is absent from the supplied table
    """
    settings = config if isinstance(config, ErrorLogConfig) else ErrorLogConfig.from_mapping(config)

    name = settings.connection_string_name
    if name:
        if connection_strings is None:
            return name
        if name not in connection_strings:
            raise ConfigurationError(
                f"Connection string '{name}' is not defined in the named connection strings."
            )
        if connection_strings[name]:
            return connection_strings[name]

    if settings.connection_string:
        return settings.connection_string

    app_key = settings.connection_string_app_key
    if app_key:
        return (app_settings or {}).get(app_key) or ""

    return ""
