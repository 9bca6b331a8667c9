# ABOUTME: Concrete implementations of the authentication interfaces
# ABOUTME: Groups the cryptographic and in-memory implementations

from tokenauth.implementations.crypto import Argon2PasswordHasher, JwtTokenCodec
from tokenauth.implementations.memory import (
    InMemoryRefreshTokenStore,
    InMemoryUserStore,
    StoreCredentialVerifier,
)

__all__ = [
    "Argon2PasswordHasher",
    "JwtTokenCodec",
    "InMemoryRefreshTokenStore",
    "InMemoryUserStore",
    "StoreCredentialVerifier",
]
