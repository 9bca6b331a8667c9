# ABOUTME: Main configuration composition for the authentication service.
# ABOUTME: Assembles all configuration classes into a single, accessible object.

from functools import lru_cache

from ._base import BaseCoreSettings
from .jwt import JwtSettings
from .reaper import ReaperSettings


class AuthSettings(BaseCoreSettings, JwtSettings, ReaperSettings):
    """Represents the complete, composed configuration for the service.

    This class aggregates the foundational settings with the JWT and reaper
    settings through inheritance, so the application has a single, unified
    settings object. Each configuration module stays self-contained.

    The JWT fields are required, so constructing this object fails fast when
    the signing secret, issuer, audience or lifetimes are missing or invalid.
    """

    pass


@lru_cache
def get_settings() -> AuthSettings:
    """Provides a singleton instance of the application settings.

    The cache guarantees the environment is read only once and that the whole
    process shares a consistent configuration state. It is evaluated lazily,
    on first call, because the JWT settings are required.

    Returns:
        A single, cached instance of the AuthSettings class.
    """
    return AuthSettings()
