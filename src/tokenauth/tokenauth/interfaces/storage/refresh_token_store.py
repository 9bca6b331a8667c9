# ABOUTME: Abstract refresh token store interface
# ABOUTME: Defines the narrow persistence contract for refresh token records

from abc import ABC, abstractmethod
from datetime import datetime

from tokenauth.models.auth.refresh_token import RefreshToken


class AbstractRefreshTokenStore(ABC):
    """
    Abstract persistence for refresh token records.

    Every single call is atomic on its own, but nothing spans calls: there
    are no multi-call transactions. ``delete`` is conditional, reporting
    whether this call removed the record, which lets callers consume a token
    at most once. ``delete_expired_before`` is scoped by its predicate and
    never locks the whole store, so it may run alongside ``create`` and
    ``delete``.

    All methods raise ``StorageError`` when the backing store is unavailable.
    """

    @abstractmethod
    async def create(self, token: str, expires_at: datetime, identity_id: int) -> RefreshToken:
        """
        Persists a new refresh token record.

        Args:
            token: The opaque token value. Must be unique across the store.
            expires_at: Timezone-aware expiry timestamp.
            identity_id: Id of the owning identity.

        Returns:
            RefreshToken: The stored record with its assigned id.

        Raises:
            DataIntegrityException: If a record with the same value already exists.
            StorageError: If the store is unavailable.
        """
        pass

    @abstractmethod
    async def find_by_token(self, token: str) -> RefreshToken | None:
        """
        Looks up a record by its opaque value.

        Returns:
            RefreshToken | None: The record, or None if no record has this value.
        """
        pass

    @abstractmethod
    async def delete(self, token: str) -> bool:
        """
        Deletes the record with this value, if it exists.

        Returns:
            bool: True if this call removed the record, False if it was already gone.
        """
        pass

    @abstractmethod
    async def delete_expired_before(self, cutoff: datetime) -> int:
        """
        Deletes every record whose expiry lies strictly before ``cutoff``.

        Records expiring exactly at ``cutoff`` are kept.

        Returns:
            int: The number of records deleted.
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """
        Returns the number of stored records, expired ones included.

        Returns:
            int: The number of records currently stored.
        """
        pass
