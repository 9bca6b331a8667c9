# ABOUTME: Memory-based storage implementations for testing and development
# ABOUTME: Provides InMemoryUserStore and InMemoryRefreshTokenStore

from .refresh_token_store import InMemoryRefreshTokenStore
from .user_store import InMemoryUserStore

__all__ = ["InMemoryRefreshTokenStore", "InMemoryUserStore"]
