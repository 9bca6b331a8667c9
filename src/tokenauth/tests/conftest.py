# ABOUTME: pytest configuration and shared fixtures for the tokenauth tests
# ABOUTME: Configures per-marker timeouts and builds settings, stores and components for tests

import base64
from datetime import timedelta

import pytest

from tokenauth.components.auth import AuthenticationGate, RefreshTokenManager, RequestAuthenticator
from tokenauth.config.settings import AuthSettings
from tokenauth.implementations.crypto import Argon2PasswordHasher, JwtTokenCodec
from tokenauth.implementations.memory import (
    InMemoryRefreshTokenStore,
    InMemoryUserStore,
    StoreCredentialVerifier,
)

TEST_SECRET = base64.b64encode(b"tokenauth-test-signing-key-32byt").decode()
TEST_ISSUER = "tokenauth-tests"
TEST_AUDIENCE = "tokenauth-clients"
ACCESS_TTL = timedelta(minutes=15)
REFRESH_TTL = timedelta(days=7)


def pytest_configure(config):
    """Configure pytest for tokenauth tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "contract: Contract tests with 60-second timeout")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        # Respect an explicit timeout marker
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif any(item.get_closest_marker(mark) for mark in ["integration", "contract"]):
            item.add_marker(pytest.mark.timeout(60))


def make_settings(**overrides) -> AuthSettings:
    """Build settings for tests without reading a .env file."""
    values = {
        "JWT_SECRET": TEST_SECRET,
        "JWT_ISSUER": TEST_ISSUER,
        "JWT_AUDIENCE": TEST_AUDIENCE,
        "JWT_EXPIRES_IN": ACCESS_TTL,
        "JWT_REFRESH_EXPIRES_IN": REFRESH_TTL,
        "REAPER_ENABLED": False,
    }
    values.update(overrides)
    return AuthSettings(_env_file=None, **values)


@pytest.fixture
def settings() -> AuthSettings:
    return make_settings()


@pytest.fixture
def token_codec(settings) -> JwtTokenCodec:
    return JwtTokenCodec.from_settings(settings)


@pytest.fixture
def password_hasher() -> Argon2PasswordHasher:
    """Argon2id with minimal cost so tests stay fast."""
    return Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def user_store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def refresh_token_store() -> InMemoryRefreshTokenStore:
    return InMemoryRefreshTokenStore()


@pytest.fixture
def refresh_token_manager(refresh_token_store, user_store, token_codec) -> RefreshTokenManager:
    return RefreshTokenManager(refresh_token_store, user_store, token_codec, REFRESH_TTL)


@pytest.fixture
def credential_verifier(user_store, password_hasher) -> StoreCredentialVerifier:
    return StoreCredentialVerifier(user_store, password_hasher)


@pytest.fixture
def gate(credential_verifier, user_store, password_hasher, refresh_token_manager) -> AuthenticationGate:
    return AuthenticationGate(credential_verifier, user_store, password_hasher, refresh_token_manager)


@pytest.fixture
def request_authenticator(token_codec, user_store) -> RequestAuthenticator:
    return RequestAuthenticator(token_codec, user_store)
