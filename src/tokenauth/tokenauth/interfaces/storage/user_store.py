# ABOUTME: Abstract user store interface
# ABOUTME: Defines the persistence contract for user accounts looked up by username

from abc import ABC, abstractmethod

from tokenauth.models.auth.enum import Role
from tokenauth.models.auth.identity import UserAccount


class AbstractUserStore(ABC):
    """
    Abstract persistence for user accounts.

    The store is the source of truth for identities. Usernames are unique and
    matched exactly (case-sensitive). All methods raise ``StorageError`` when
    the backing store is unavailable.
    """

    @abstractmethod
    async def find_by_username(self, username: str) -> UserAccount | None:
        """
        Looks up an account by its exact username.

        Returns:
            UserAccount | None: The account, or None if no account has this username.
        """
        pass

    @abstractmethod
    async def exists_by_username(self, username: str) -> bool:
        """Checks whether an account with this exact username exists."""
        pass

    @abstractmethod
    async def create(self, name: str, username: str, password_hash: str, role: Role = Role.USER) -> UserAccount:
        """
        Persists a new account.

        Args:
            name: Display name.
            username: Unique login name.
            password_hash: Encoded password hash. Never the plaintext.
            role: Authorization role of the new account.

        Returns:
            UserAccount: The stored account with its assigned id.

        Raises:
            DataIntegrityException: If the username is already taken.
            StorageError: If the store is unavailable.
        """
        pass
