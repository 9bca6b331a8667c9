# ABOUTME: Refresh token issuance, rotation and expiry reclamation
# ABOUTME: Exchanges a possibly expired access token plus its refresh token for a fresh pair, consuming the old one

import secrets
from datetime import datetime, timedelta, UTC

from loguru import logger

from tokenauth.exceptions import DataIntegrityException, InvalidTokenException, StorageError
from tokenauth.interfaces.auth.token_codec import AbstractTokenCodec
from tokenauth.interfaces.storage.refresh_token_store import AbstractRefreshTokenStore
from tokenauth.interfaces.storage.user_store import AbstractUserStore
from tokenauth.models.auth.identity import Identity
from tokenauth.models.auth.refresh_token import TokenPair
from tokenauth.models.auth.result import AuthError, AuthResult

# 32 random bytes, URL-safe base64 encoded (43 characters).
REFRESH_TOKEN_BYTES = 32
_MAX_ISSUE_ATTEMPTS = 3


class RefreshTokenManager:
    """
    Issues, rotates and reclaims refresh tokens.

    Refresh token values are high-entropy random strings; they encode nothing
    about their owner or issue time. One identity may hold any number of
    valid refresh tokens at once.

    Rotation consumes the presented refresh token at most once. The new pair
    is created first; the old record is then removed with a conditional
    delete. If another rotation already consumed the old record, the freshly
    created refresh token is withdrawn and the call fails with
    ``REFRESH_TOKEN_NOT_FOUND``, so two concurrent rotations of the same token
    cannot both succeed.

    Example:
        manager = RefreshTokenManager(store, user_store, codec, timedelta(days=7))
        pair = await manager.issue_pair(identity)
        result = await manager.rotate(pair.token, pair.refresh_token)
    """

    def __init__(
        self,
        store: AbstractRefreshTokenStore,
        user_store: AbstractUserStore,
        token_codec: AbstractTokenCodec,
        refresh_ttl: timedelta,
    ):
        """
        Initialize the manager.

        Args:
            store: Persistence for refresh token records.
            user_store: Source of truth for identities, used during rotation.
            token_codec: Codec for reading and issuing access tokens.
            refresh_ttl: Refresh token lifetime.
        """
        if refresh_ttl < timedelta(seconds=1):
            raise ValueError("refresh_ttl must be at least 1 second")

        self._store = store
        self._user_store = user_store
        self._token_codec = token_codec
        self.refresh_ttl = refresh_ttl
        self._logger = logger.bind(name=__name__)

    async def issue(self, identity: Identity) -> str:
        """
        Issue and persist a new refresh token for ``identity``.

        Returns:
            The opaque refresh token value.

        Raises:
            StorageError: If the store is unavailable.
        """
        attempt = 0
        while True:
            attempt += 1
            value = secrets.token_urlsafe(REFRESH_TOKEN_BYTES)
            expires_at = datetime.now(UTC) + self.refresh_ttl
            try:
                await self._store.create(value, expires_at, identity.id)
            except DataIntegrityException:
                if attempt == _MAX_ISSUE_ATTEMPTS:
                    raise
                continue
            self._logger.debug(f"Issued refresh token for identity {identity.id}")
            return value

    async def issue_pair(self, identity: Identity) -> TokenPair:
        """
        Issue an access token and a refresh token for ``identity``.

        The access token carries the identity's role as the ``role`` claim.
        """
        access_token = self._token_codec.issue(identity.subject, {"role": identity.role.value})
        refresh_token = await self.issue(identity)
        return TokenPair(token=access_token, refresh_token=refresh_token)

    async def rotate(self, access_token: str, refresh_token: str) -> AuthResult[TokenPair]:
        """
        Exchange an access token and its paired refresh token for a new pair.

        The access token may be expired but must carry a valid signature.

        Args:
            access_token: The access token issued with ``refresh_token``.
            refresh_token: The refresh token value to consume.

        Returns:
            AuthResult with the new TokenPair, or one of the errors
            ``INVALID_TOKEN``, ``IDENTITY_NOT_FOUND``, ``REFRESH_TOKEN_NOT_FOUND``,
            ``TOKEN_PAIR_MISMATCH`` or ``REFRESH_TOKEN_EXPIRED``.

        Raises:
            StorageError: If a store is unavailable before the new pair exists.
        """
        try:
            subject = self._token_codec.extract_subject(access_token)
        except InvalidTokenException as e:
            self._logger.info(f"Rotation rejected: unusable access token ({e.code})")
            return AuthResult.failure(AuthError.INVALID_TOKEN)

        account = await self._user_store.find_by_username(subject)
        if account is None:
            self._logger.info("Rotation rejected: access token subject no longer exists")
            return AuthResult.failure(AuthError.IDENTITY_NOT_FOUND)

        record = await self._store.find_by_token(refresh_token)
        if record is None:
            self._logger.info(f"Rotation rejected for identity {account.id}: refresh token not found")
            return AuthResult.failure(AuthError.REFRESH_TOKEN_NOT_FOUND)

        if record.identity_id != account.id:
            self._logger.warning(
                f"Rotation rejected: refresh token of identity {record.identity_id} "
                f"presented with access token of identity {account.id}"
            )
            return AuthResult.failure(AuthError.TOKEN_PAIR_MISMATCH)

        if record.is_expired(datetime.now(UTC)):
            self._logger.info(f"Rotation rejected for identity {account.id}: refresh token expired")
            return AuthResult.failure(AuthError.REFRESH_TOKEN_EXPIRED)

        new_pair = await self.issue_pair(account.to_identity())

        try:
            consumed = await self._store.delete(refresh_token)
        except StorageError as e:
            # The old record stays until it expires and the reaper removes it.
            self._logger.warning(f"Could not delete consumed refresh token of identity {account.id}: {e.message}")
            return AuthResult.success(new_pair)

        if not consumed:
            await self._withdraw(new_pair.refresh_token, account.id)
            self._logger.warning(f"Rotation lost a race for identity {account.id}: refresh token already consumed")
            return AuthResult.failure(AuthError.REFRESH_TOKEN_NOT_FOUND)

        self._logger.info(f"Rotated refresh token for identity {account.id}")
        return AuthResult.success(new_pair)

    async def _withdraw(self, refresh_token: str, identity_id: int) -> None:
        try:
            await self._store.delete(refresh_token)
        except StorageError as e:
            self._logger.warning(f"Could not withdraw refresh token of identity {identity_id}: {e.message}")

    async def reap_expired(self, now: datetime) -> int:
        """
        Delete every refresh token whose expiry lies strictly before ``now``.

        Returns:
            The number of records deleted.

        Raises:
            StorageError: If the store is unavailable.
        """
        deleted = await self._store.delete_expired_before(now)
        self._logger.debug(f"Reaped {deleted} expired refresh tokens")
        return deleted
