# ABOUTME: Credential verifier backed by a user store and a password hasher
# ABOUTME: Does the same hashing work for unknown usernames as for wrong passwords

from loguru import logger

from tokenauth.interfaces.auth.credential_verifier import AbstractCredentialVerifier
from tokenauth.interfaces.auth.password_hasher import AbstractPasswordHasher
from tokenauth.interfaces.storage.user_store import AbstractUserStore


class StoreCredentialVerifier(AbstractCredentialVerifier):
    """
    Verifies credentials against accounts held by an AbstractUserStore.

    When the username is unknown, a password is still verified against a
    dummy hash made once at construction, so the response time does not
    reveal whether the account exists.
    """

    def __init__(self, user_store: AbstractUserStore, password_hasher: AbstractPasswordHasher):
        self._user_store = user_store
        self._password_hasher = password_hasher
        self._dummy_hash = password_hasher.hash("tokenauth-dummy-password")
        self._logger = logger.bind(name=__name__)

    async def verify(self, username: str, password: str) -> bool:
        account = await self._user_store.find_by_username(username)
        if account is None:
            self._password_hasher.verify(password, self._dummy_hash)
            self._logger.debug("Credential check failed")
            return False

        matched = self._password_hasher.verify(password, account.password_hash)
        if not matched:
            self._logger.debug("Credential check failed")
        return matched
