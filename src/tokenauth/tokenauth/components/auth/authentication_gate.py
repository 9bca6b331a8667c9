# ABOUTME: Login and registration orchestration
# ABOUTME: Checks credentials before issuing a token pair and gates registration on username uniqueness

from loguru import logger

from tokenauth.components.auth.refresh_token_manager import RefreshTokenManager
from tokenauth.exceptions import DataIntegrityException
from tokenauth.interfaces.auth.credential_verifier import AbstractCredentialVerifier
from tokenauth.interfaces.auth.password_hasher import AbstractPasswordHasher
from tokenauth.interfaces.storage.user_store import AbstractUserStore
from tokenauth.models.auth.enum import Role
from tokenauth.models.auth.identity import Identity
from tokenauth.models.auth.refresh_token import TokenPair
from tokenauth.models.auth.result import AuthError, AuthResult


class AuthenticationGate:
    """
    Entry point for login and registration.

    Login never tells an unknown username apart from a wrong password: both
    fail with ``INVALID_CREDENTIALS``. Registration does report a taken
    username, since usernames are not secret.
    """

    def __init__(
        self,
        credential_verifier: AbstractCredentialVerifier,
        user_store: AbstractUserStore,
        password_hasher: AbstractPasswordHasher,
        refresh_token_manager: RefreshTokenManager,
    ):
        self._credential_verifier = credential_verifier
        self._user_store = user_store
        self._password_hasher = password_hasher
        self._refresh_token_manager = refresh_token_manager
        self._logger = logger.bind(name=__name__)

    async def login(self, username: str, password: str) -> AuthResult[TokenPair]:
        """
        Check credentials and issue a token pair.

        Args:
            username: The login name, matched exactly.
            password: The plaintext password.

        Returns:
            AuthResult with a TokenPair, or ``INVALID_CREDENTIALS``.

        Raises:
            StorageError: If a store is unavailable.
        """
        if not await self._credential_verifier.verify(username, password):
            self._logger.info("Login failed: invalid credentials")
            return AuthResult.failure(AuthError.INVALID_CREDENTIALS)

        account = await self._user_store.find_by_username(username)
        if account is None:
            # Removed between the credential check and the lookup.
            self._logger.info("Login failed: account disappeared after credential check")
            return AuthResult.failure(AuthError.INVALID_CREDENTIALS)

        pair = await self._refresh_token_manager.issue_pair(account.to_identity())
        self._logger.info(f"Login succeeded for identity {account.id}")
        return AuthResult.success(pair)

    async def register(self, name: str, username: str, password: str) -> AuthResult[Identity]:
        """
        Create a new account with the ``USER`` role.

        Args:
            name: Display name.
            username: Requested login name. Uniqueness is case-sensitive.
            password: Plaintext password, hashed before it reaches the store.

        Returns:
            AuthResult with the created Identity, or ``USERNAME_TAKEN``.

        Raises:
            StorageError: If the user store is unavailable.
        """
        if await self._user_store.exists_by_username(username):
            self._logger.info("Registration rejected: username taken")
            return AuthResult.failure(AuthError.USERNAME_TAKEN)

        password_hash = self._password_hasher.hash(password)
        try:
            account = await self._user_store.create(name, username, password_hash, Role.USER)
        except DataIntegrityException:
            self._logger.info("Registration rejected: username taken concurrently")
            return AuthResult.failure(AuthError.USERNAME_TAKEN)

        self._logger.info(f"Registered identity {account.id}")
        return AuthResult.success(account.to_identity())
