"""Hotel Admin - API client core for the hotel management dashboard"""

__version__ = "0.1.0"

# Core abstractions
from .base_config import HotelAdminConfig

# Exceptions
from .exceptions import (
    HotelAdminError,
    ConfigurationError,
    StorageError,
    AuthenticationError,
    ValidationError,
)

# Config management
from .config import get_config, set_config

# Storage
from .storage import KeyValueStorage, MemoryKeyValueStorage, SQLiteKeyValueStorage

# Session
from .session import SessionStore, TokenProvider, get_session, set_session

# Client
from .client import ApiClient, FailureCategory, Pipeline, get_client, set_client

__all__ = [
    # Version
    "__version__",

    # Core
    "HotelAdminConfig",

    # Exceptions
    "HotelAdminError",
    "ConfigurationError",
    "StorageError",
    "AuthenticationError",
    "ValidationError",

    # Config
    "get_config",
    "set_config",

    # Storage
    "KeyValueStorage",
    "MemoryKeyValueStorage",
    "SQLiteKeyValueStorage",

    # Session
    "SessionStore",
    "TokenProvider",
    "get_session",
    "set_session",

    # Client
    "ApiClient",
    "FailureCategory",
    "Pipeline",
    "get_client",
    "set_client",
]
