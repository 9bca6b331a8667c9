# ABOUTME: Exceptions package exports
# ABOUTME: Exports the structured exception hierarchy

from tokenauth.exceptions.base import (
    CoreException,
    ConfigurationException,
    AuthenticationException,
    InvalidTokenException,
    DataIntegrityException,
    StorageError,
)

__all__ = [
    "CoreException",
    "ConfigurationException",
    "AuthenticationException",
    "InvalidTokenException",
    "DataIntegrityException",
    "StorageError",
]
