# ABOUTME: Cryptographic implementations package
# ABOUTME: Provides the PyJWT token codec and the argon2 password hasher

from .password_hasher import Argon2PasswordHasher
from .token_codec import JwtTokenCodec

__all__ = ["Argon2PasswordHasher", "JwtTokenCodec"]
