# ABOUTME: Soft per-request authentication middleware
# ABOUTME: Binds an identity to the request context when a valid bearer token is present, never rejects on its own

from datetime import datetime, UTC

from loguru import logger

from tokenauth.components.auth.utils import extract_bearer_token
from tokenauth.exceptions import InvalidTokenException
from tokenauth.interfaces.auth.token_codec import AbstractTokenCodec
from tokenauth.interfaces.middleware.middleware import AbstractRequestMiddleware
from tokenauth.interfaces.storage.user_store import AbstractUserStore
from tokenauth.models.auth.auth_request import AuthRequest
from tokenauth.models.middleware.context import RequestContext
from tokenauth.models.middleware.result import (
    AuthenticationResult,
    AuthenticationState,
    PassThroughReason,
)

AUTHORIZATION_HEADER = "Authorization"


class RequestAuthenticator(AbstractRequestMiddleware):
    """
    Per-request authentication state machine.

    ``NO_TOKEN -> TOKEN_PRESENT -> {AUTHENTICATED, REJECTED, PASS_THROUGH}``

    - No bearer token: PASS_THROUGH.
    - Token with a bad signature, malformed, or expired: PASS_THROUGH, exactly
      as if no token had been sent.
    - Valid token but an identity is already bound to the context:
      PASS_THROUGH without re-binding.
    - Valid token whose subject no longer exists in the user store: REJECTED.
      The request still continues unauthenticated.
    - Otherwise the subject's identity is bound: AUTHENTICATED.

    The authenticator never produces an unauthorized response itself;
    endpoints that require an identity enforce that downstream.
    """

    def __init__(self, token_codec: AbstractTokenCodec, user_store: AbstractUserStore, leeway: float = 0.0):
        """
        Initialize the authenticator.

        Args:
            token_codec: Codec used to decode bearer tokens.
            user_store: Store the token subject is resolved against.
            leeway: Allowed clock skew in seconds when checking expiry.
        """
        self._token_codec = token_codec
        self._user_store = user_store
        self.leeway = leeway
        self.name = self.__class__.__name__
        self._logger = logger.bind(name=__name__)

    def can_process(self, context: RequestContext) -> bool:
        return True

    async def process(self, context: RequestContext) -> AuthenticationResult:
        """
        Run the state machine on ``context``, binding an identity when possible.

        Raises:
            StorageError: If the user store is unavailable.
        """
        context.add_execution_step(self.name)

        token = extract_bearer_token(context.get_header(AUTHORIZATION_HEADER))
        if token is None:
            return self._pass_through(PassThroughReason.NO_TOKEN)

        try:
            claims = self._token_codec.decode(token)
        except InvalidTokenException as e:
            self._logger.debug(f"Ignoring unusable bearer token ({e.code})")
            return self._pass_through(PassThroughReason.INVALID_TOKEN)

        if claims.is_expired(datetime.now(UTC), leeway=self.leeway):
            self._logger.debug("Ignoring expired bearer token")
            return self._pass_through(PassThroughReason.EXPIRED_TOKEN)

        if context.is_authenticated:
            return self._pass_through(PassThroughReason.ALREADY_AUTHENTICATED)

        account = await self._user_store.find_by_username(claims.subject)
        if account is None:
            self._logger.info("Bearer token subject no longer exists, continuing unauthenticated")
            return self._finish(AuthenticationState.REJECTED, reason="unknown_subject")

        identity = account.to_identity()
        context.bind_identity(identity, claims)
        return self._finish(AuthenticationState.AUTHENTICATED, identity=identity)

    async def authenticate(self, request: AuthRequest) -> tuple[RequestContext, AuthenticationResult]:
        """
        Build a fresh context for ``request`` and run the state machine on it.

        Args:
            request: Any object satisfying the AuthRequest protocol.

        Returns:
            The populated context and the result of processing it.
        """
        headers = {}
        authorization = request.get_header(AUTHORIZATION_HEADER)
        if authorization is not None:
            headers[AUTHORIZATION_HEADER] = authorization
        context = RequestContext(headers=headers, client_id=request.client_id)
        result = await self.process(context)
        return context, result

    def _pass_through(self, reason: PassThroughReason) -> AuthenticationResult:
        return self._finish(AuthenticationState.PASS_THROUGH, reason=reason.value)

    def _finish(self, state: AuthenticationState, reason: str | None = None, identity=None) -> AuthenticationResult:
        result = AuthenticationResult(middleware_name=self.name, state=state, reason=reason, identity=identity)
        result.mark_completed()
        return result

    def __repr__(self) -> str:
        return f"RequestAuthenticator(leeway={self.leeway})"
