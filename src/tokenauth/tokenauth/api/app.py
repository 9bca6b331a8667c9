# ABOUTME: FastAPI application factory wiring settings, stores and components together
# ABOUTME: The lifespan configures logging and owns the expiry reaper's start and stop

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from loguru import logger

from tokenauth.api.errors import register_exception_handlers
from tokenauth.api.middleware import AuthMiddleware
from tokenauth.api.routes import router
from tokenauth.components.auth import (
    AuthenticationGate,
    ExpiryReaper,
    RefreshTokenManager,
    RequestAuthenticator,
)
from tokenauth.config.logging import setup_logging
from tokenauth.config.settings import AuthSettings, get_settings
from tokenauth.implementations.crypto import Argon2PasswordHasher, JwtTokenCodec
from tokenauth.implementations.memory import (
    InMemoryRefreshTokenStore,
    InMemoryUserStore,
    StoreCredentialVerifier,
)
from tokenauth.interfaces.auth.password_hasher import AbstractPasswordHasher
from tokenauth.interfaces.storage.refresh_token_store import AbstractRefreshTokenStore
from tokenauth.interfaces.storage.user_store import AbstractUserStore


@dataclass
class AuthServices:
    """Every long-lived collaborator of the application, built once per app."""

    settings: AuthSettings
    token_codec: JwtTokenCodec
    user_store: AbstractUserStore
    refresh_token_store: AbstractRefreshTokenStore
    password_hasher: AbstractPasswordHasher
    refresh_token_manager: RefreshTokenManager
    gate: AuthenticationGate
    authenticator: RequestAuthenticator
    reaper: ExpiryReaper


def build_services(
    settings: AuthSettings,
    user_store: Optional[AbstractUserStore] = None,
    refresh_token_store: Optional[AbstractRefreshTokenStore] = None,
    password_hasher: Optional[AbstractPasswordHasher] = None,
) -> AuthServices:
    """
    Assemble the component graph.

    Stores and hasher default to the in-memory stores and Argon2id; pass
    your own to back the service with real persistence.
    """
    user_store = user_store or InMemoryUserStore()
    refresh_token_store = refresh_token_store or InMemoryRefreshTokenStore()
    password_hasher = password_hasher or Argon2PasswordHasher()

    codec = JwtTokenCodec.from_settings(settings)
    manager = RefreshTokenManager(refresh_token_store, user_store, codec, settings.JWT_REFRESH_EXPIRES_IN)
    gate = AuthenticationGate(
        StoreCredentialVerifier(user_store, password_hasher),
        user_store,
        password_hasher,
        manager,
    )
    return AuthServices(
        settings=settings,
        token_codec=codec,
        user_store=user_store,
        refresh_token_store=refresh_token_store,
        password_hasher=password_hasher,
        refresh_token_manager=manager,
        gate=gate,
        authenticator=RequestAuthenticator(codec, user_store, leeway=settings.JWT_LEEWAY),
        reaper=ExpiryReaper.from_settings(manager, settings),
    )


def create_app(
    settings: Optional[AuthSettings] = None,
    user_store: Optional[AbstractUserStore] = None,
    refresh_token_store: Optional[AbstractRefreshTokenStore] = None,
    password_hasher: Optional[AbstractPasswordHasher] = None,
    configure_logging: bool = True,
) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        settings: Settings to use. Defaults to ``get_settings()``.
        user_store: User store. Defaults to an in-memory store.
        refresh_token_store: Refresh token store. Defaults to an in-memory store.
        password_hasher: Password hasher. Defaults to Argon2id.
        configure_logging: Whether the lifespan configures logging from ``settings``.

    Returns:
        The configured application. Services are reachable as ``app.state.services``.
    """
    settings = settings or get_settings()
    services = build_services(settings, user_store, refresh_token_store, password_hasher)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if configure_logging:
            setup_logging(settings=settings)
        log = logger.bind(name=__name__)
        log.info(f"{settings.APP_NAME} starting ({settings.ENV})")

        if settings.REAPER_ENABLED:
            services.reaper.start()
        try:
            yield
        finally:
            await services.reaper.stop()
            log.info(f"{settings.APP_NAME} stopped")

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG, lifespan=lifespan)
    app.state.services = services
    app.add_middleware(AuthMiddleware, authenticator=services.authenticator)
    register_exception_handlers(app)
    app.include_router(router)
    return app
