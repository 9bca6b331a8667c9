# ABOUTME: Memory-based implementations package
# ABOUTME: Exports in-memory stores and the store-backed credential verifier

from .auth import StoreCredentialVerifier
from .storage import InMemoryRefreshTokenStore, InMemoryUserStore

__all__ = ["StoreCredentialVerifier", "InMemoryRefreshTokenStore", "InMemoryUserStore"]
