# ABOUTME: Abstract password hasher interface
# ABOUTME: Defines the contract for one-way password hashing and verification

from abc import ABC, abstractmethod


class AbstractPasswordHasher(ABC):
    """
    Abstract one-way password hasher.

    Hashes are self-describing strings (algorithm, parameters and salt are
    encoded in them), so ``verify`` needs nothing besides the stored hash.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hashes a plaintext password with a fresh random salt.

        Args:
            password: The plaintext password.

        Returns:
            str: The encoded hash, safe to persist.
        """
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """
        Checks a plaintext password against a stored hash.

        Args:
            password: The plaintext password presented by the caller.
            password_hash: The stored encoded hash.

        Returns:
            bool: True if the password matches. A mismatch or an unreadable
                hash both yield False.
        """
        pass
