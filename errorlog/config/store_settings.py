"""
Error log store settings and constants.

Centralized configuration keys, key layout and naming used by the
connection resolver and the storage adapters.
"""

# Recognized configuration keys
CONNECTION_STRING_NAME_KEY = "connectionStringName"
"""Named reference to a connection string"""

CONNECTION_STRING_KEY = "connectionString"
"""Literal connection string"""

CONNECTION_STRING_APP_KEY = "connectionStringAppKey"
"""Key into the flat application settings table holding the connection string"""

APPLICATION_NAME_KEY = "applicationName"
"""Logical application whose errors share one namespace"""

# Redis key layout
KEY_NAMESPACE_ROOT = "errorlog"
"""Root segment of every key written by the error log"""

APPLICATIONS_KEY = f"{KEY_NAMESPACE_ROOT}:applications"
"""Registry set of every application namespace ever initialized"""

DOCUMENT_KEY_SEGMENT = "doc"
INDEX_KEY_SEGMENT = "index"
CREATED_KEY_SEGMENT = "created"

# Backend naming
BACKEND_NAME = "Redis Error Log"
"""Display name reported by the Redis error log"""
