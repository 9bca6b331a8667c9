# ABOUTME: FastAPI dependencies resolving services and the request-scoped auth context
# ABOUTME: require_identity enforces authentication for endpoints that need it

from fastapi import Depends, Request

from tokenauth.components.auth.authentication_gate import AuthenticationGate
from tokenauth.components.auth.refresh_token_manager import RefreshTokenManager
from tokenauth.exceptions import AuthenticationException
from tokenauth.models.auth.identity import Identity
from tokenauth.models.middleware.context import RequestContext


def get_gate(request: Request) -> AuthenticationGate:
    return request.app.state.services.gate


def get_refresh_token_manager(request: Request) -> RefreshTokenManager:
    return request.app.state.services.refresh_token_manager


def get_request_context(request: Request) -> RequestContext:
    """Return the context populated by AuthMiddleware, or an empty one."""
    context = getattr(request.state, "auth_context", None)
    if context is None:
        context = RequestContext()
    return context


def require_identity(context: RequestContext = Depends(get_request_context)) -> Identity:
    """
    Return the identity bound to this request.

    Raises:
        AuthenticationException: With status 401 when no identity is bound.
    """
    if context.identity is None:
        raise AuthenticationException(
            "Authentication required",
            code="UNAUTHENTICATED",
            details={"status_code": 401},
        )
    return context.identity
