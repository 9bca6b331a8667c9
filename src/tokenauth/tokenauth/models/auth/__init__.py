# ABOUTME: Authentication models package exports
# ABOUTME: Exports identity, claims, refresh token, result and request models

from .auth_request import AuthRequest
from .claims import Claims, RESERVED_CLAIMS
from .enum import Role
from .identity import Identity, UserAccount
from .refresh_token import RefreshToken, TokenPair
from .result import AuthError, AuthResult

__all__ = [
    "AuthRequest",
    "Claims",
    "RESERVED_CLAIMS",
    "Role",
    "Identity",
    "UserAccount",
    "RefreshToken",
    "TokenPair",
    "AuthError",
    "AuthResult",
]
