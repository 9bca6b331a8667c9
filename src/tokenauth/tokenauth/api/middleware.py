# ABOUTME: Starlette middleware running the request authenticator on every request
# ABOUTME: Stores the populated RequestContext on request.state for downstream dependencies

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from tokenauth.api.errors import STORAGE_UNAVAILABLE_MESSAGE, error_response
from tokenauth.components.auth.request_authenticator import RequestAuthenticator
from tokenauth.exceptions import StorageError

_log = logger.bind(name=__name__)


class StarletteAuthRequest:
    """Adapts a Starlette request to the AuthRequest protocol."""

    def __init__(self, request: Request):
        self._request = request

    def get_header(self, name: str) -> str | None:
        return self._request.headers.get(name)

    @property
    def client_id(self) -> str | None:
        client = self._request.client
        return client.host if client else None


class AuthMiddleware(BaseHTTPMiddleware):
    """Attach a RequestContext, with an identity when the bearer token allows, to request.state."""

    def __init__(self, app: ASGIApp, authenticator: RequestAuthenticator) -> None:
        super().__init__(app)
        self._authenticator = authenticator

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        try:
            context, result = await self._authenticator.authenticate(StarletteAuthRequest(request))
        except StorageError as e:
            _log.error(f"User store unavailable while authenticating request: {e.message}")
            return error_response(503, STORAGE_UNAVAILABLE_MESSAGE)

        _log.debug(f"{request.method} {request.url.path}: {result.state.value} ({result.reason})")
        request.state.auth_context = context
        request.state.auth_result = result
        return await call_next(request)
