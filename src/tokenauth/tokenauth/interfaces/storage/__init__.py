# ABOUTME: Storage interfaces package exports
# ABOUTME: Exports abstract classes for refresh token and user account persistence

from .refresh_token_store import AbstractRefreshTokenStore
from .user_store import AbstractUserStore

__all__ = [
    "AbstractRefreshTokenStore",
    "AbstractUserStore",
]
