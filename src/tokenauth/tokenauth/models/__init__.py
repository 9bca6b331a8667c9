# ABOUTME: Models package exports
# ABOUTME: Re-exports the authentication and middleware models

from tokenauth.models.auth import (
    AuthRequest,
    Claims,
    Role,
    Identity,
    UserAccount,
    RefreshToken,
    TokenPair,
    AuthError,
    AuthResult,
)
from tokenauth.models.middleware import (
    RequestContext,
    AuthenticationState,
    AuthenticationResult,
    PassThroughReason,
)

__all__ = [
    "AuthRequest",
    "Claims",
    "Role",
    "Identity",
    "UserAccount",
    "RefreshToken",
    "TokenPair",
    "AuthError",
    "AuthResult",
    "RequestContext",
    "AuthenticationState",
    "AuthenticationResult",
    "PassThroughReason",
]
