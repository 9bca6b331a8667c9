# ABOUTME: Unit tests for the store-backed credential verifier
# ABOUTME: Verifies matching, mismatching and unknown-user behavior

from unittest.mock import Mock

import pytest
import pytest_asyncio

from tokenauth.implementations.memory import StoreCredentialVerifier


class TestStoreCredentialVerifier:
    """Tests for StoreCredentialVerifier."""

    @pytest_asyncio.fixture
    async def seeded_store(self, user_store, password_hasher):
        await user_store.create("Jane Doe", "jane@example.com", password_hasher.hash("password123"))
        return user_store

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_correct_password(self, seeded_store, credential_verifier):
        assert await credential_verifier.verify("jane@example.com", "password123") is True

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_wrong_password(self, seeded_store, credential_verifier):
        assert await credential_verifier.verify("jane@example.com", "wrong-password") is False

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_user(self, seeded_store, credential_verifier):
        assert await credential_verifier.verify("nobody@example.com", "password123") is False

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_unknown_user_still_verifies_a_hash(self, user_store, password_hasher):
        spy = Mock(wraps=password_hasher)
        verifier = StoreCredentialVerifier(user_store, spy)

        assert await verifier.verify("nobody@example.com", "password123") is False
        spy.verify.assert_called_once()
