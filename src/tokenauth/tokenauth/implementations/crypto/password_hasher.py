# ABOUTME: argon2-cffi implementation of AbstractPasswordHasher
# ABOUTME: Hashes passwords with Argon2id and verifies them without raising on mismatch

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from tokenauth.interfaces.auth.password_hasher import AbstractPasswordHasher


class Argon2PasswordHasher(AbstractPasswordHasher):
    """
    Argon2id password hashing.

    The cost parameters default to argon2-cffi's recommended values. Tests
    pass lower costs so the suite stays fast.
    """

    def __init__(
        self,
        time_cost: int | None = None,
        memory_cost: int | None = None,
        parallelism: int | None = None,
    ):
        params = {
            "time_cost": time_cost,
            "memory_cost": memory_cost,
            "parallelism": parallelism,
        }
        self._hasher = PasswordHasher(type=Type.ID, **{k: v for k, v in params.items() if v is not None})

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._hasher.verify(password_hash, password)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check whether a stored hash was made with outdated cost parameters."""
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return True
