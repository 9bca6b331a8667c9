# ABOUTME: Authentication components package exports
# ABOUTME: Exports the refresh token manager, gate, request authenticator and expiry reaper

from .authentication_gate import AuthenticationGate
from .expiry_reaper import ExpiryReaper
from .refresh_token_manager import RefreshTokenManager
from .request_authenticator import RequestAuthenticator
from .utils import extract_bearer_token

__all__ = [
    "AuthenticationGate",
    "ExpiryReaper",
    "RefreshTokenManager",
    "RequestAuthenticator",
    "extract_bearer_token",
]
