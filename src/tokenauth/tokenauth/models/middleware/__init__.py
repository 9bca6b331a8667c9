# ABOUTME: Middleware models package exports
# ABOUTME: Exports the request context and authentication result models

from .context import RequestContext
from .result import AuthenticationState, AuthenticationResult, PassThroughReason

__all__ = [
    "RequestContext",
    "AuthenticationState",
    "AuthenticationResult",
    "PassThroughReason",
]
