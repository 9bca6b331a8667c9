# ABOUTME: Interfaces package exports
# ABOUTME: Exports every abstract contract of the authentication subsystem

from tokenauth.interfaces.auth import (
    AbstractCredentialVerifier,
    AbstractPasswordHasher,
    AbstractTokenCodec,
)
from tokenauth.interfaces.middleware import AbstractRequestMiddleware
from tokenauth.interfaces.storage import AbstractRefreshTokenStore, AbstractUserStore

__all__ = [
    "AbstractCredentialVerifier",
    "AbstractPasswordHasher",
    "AbstractTokenCodec",
    "AbstractRequestMiddleware",
    "AbstractRefreshTokenStore",
    "AbstractUserStore",
]
