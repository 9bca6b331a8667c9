# ABOUTME: Abstract credential verifier interface
# ABOUTME: Defines the contract for checking a username and password pair

from abc import ABC, abstractmethod


class AbstractCredentialVerifier(ABC):
    """
    Abstract username/password check.

    Implementations must give the same answer, in comparable time, for an
    unknown username and for a wrong password, so callers cannot use it to
    enumerate accounts.
    """

    @abstractmethod
    async def verify(self, username: str, password: str) -> bool:
        """
        Checks whether ``password`` is the correct password for ``username``.

        Args:
            username: The login name, matched exactly (case-sensitive).
            password: The plaintext password.

        Returns:
            bool: True if the credentials match an existing account.

        Raises:
            StorageError: If the backing user store is unavailable.
        """
        pass
