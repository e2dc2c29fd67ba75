"""Custom exceptions for Hotel Admin."""
from __future__ import annotations


class HotelAdminError(Exception):
    """Base exception for all Hotel Admin errors."""
    pass


class ConfigurationError(HotelAdminError):
    """Raised when configuration is invalid or missing."""
    pass


class StorageError(HotelAdminError):
    """Raised when the key/value session storage cannot be read or written."""
    pass


class AuthenticationError(HotelAdminError):
    """Raised when an operation needs a logged-in user and there is none."""
    pass


class ValidationError(HotelAdminError):
    """Raised when form input for a write request does not pass its schema."""

    def __init__(self, message: str, errors=None):
        super().__init__(message)
        self.errors = errors or []
