# ABOUTME: Components package exports
# ABOUTME: Re-exports the authentication components

from tokenauth.components.auth import (
    AuthenticationGate,
    ExpiryReaper,
    RefreshTokenManager,
    RequestAuthenticator,
)

__all__ = [
    "AuthenticationGate",
    "ExpiryReaper",
    "RefreshTokenManager",
    "RequestAuthenticator",
]
