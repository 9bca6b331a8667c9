# ABOUTME: Authentication interfaces package exports
# ABOUTME: Exports abstract classes for token coding, password hashing and credential checks

from .credential_verifier import AbstractCredentialVerifier
from .password_hasher import AbstractPasswordHasher
from .token_codec import AbstractTokenCodec

__all__ = [
    "AbstractCredentialVerifier",
    "AbstractPasswordHasher",
    "AbstractTokenCodec",
]
