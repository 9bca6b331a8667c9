# ABOUTME: Unit tests for the in-memory user and refresh token stores
# ABOUTME: Covers uniqueness, conditional delete, expiry-scoped deletion and closed-store failures

import asyncio
from datetime import datetime, timedelta, UTC

import pytest

from tokenauth.exceptions import DataIntegrityException, StorageError
from tokenauth.models.auth.enum import Role

NOW = datetime(2024, 1, 1, 12, 0, 0, tzinfo=UTC)


class TestInMemoryRefreshTokenStore:
    """Tests for InMemoryRefreshTokenStore."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_and_find(self, refresh_token_store):
        record = await refresh_token_store.create("value-1", NOW, identity_id=3)

        found = await refresh_token_store.find_by_token("value-1")

        assert found == record
        assert found.identity_id == 3
        assert found.expires_at == NOW
        assert await refresh_token_store.find_by_token("missing") is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_ids_are_unique(self, refresh_token_store):
        first = await refresh_token_store.create("value-1", NOW, identity_id=1)
        second = await refresh_token_store.create("value-2", NOW, identity_id=1)

        assert first.id != second.id

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_duplicate_value_rejected(self, refresh_token_store):
        await refresh_token_store.create("value-1", NOW, identity_id=1)

        with pytest.raises(DataIntegrityException):
            await refresh_token_store.create("value-1", NOW, identity_id=2)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_naive_expiry_rejected(self, refresh_token_store):
        with pytest.raises(ValueError):
            await refresh_token_store.create("value-1", datetime(2024, 1, 1), identity_id=1)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_is_conditional(self, refresh_token_store):
        await refresh_token_store.create("value-1", NOW, identity_id=1)

        assert await refresh_token_store.delete("value-1") is True
        assert await refresh_token_store.delete("value-1") is False
        assert await refresh_token_store.find_by_token("value-1") is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_concurrent_deletes_succeed_once(self, refresh_token_store):
        await refresh_token_store.create("value-1", NOW, identity_id=1)

        results = await asyncio.gather(*(refresh_token_store.delete("value-1") for _ in range(5)))

        assert results.count(True) == 1

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete_expired_before_is_strict(self, refresh_token_store):
        await refresh_token_store.create("old", NOW - timedelta(seconds=1), identity_id=1)
        await refresh_token_store.create("boundary", NOW, identity_id=1)
        await refresh_token_store.create("fresh", NOW + timedelta(days=1), identity_id=2)

        deleted = await refresh_token_store.delete_expired_before(NOW)

        assert deleted == 1
        assert await refresh_token_store.find_by_token("old") is None
        assert await refresh_token_store.find_by_token("boundary") is not None
        assert await refresh_token_store.find_by_token("fresh") is not None
        assert await refresh_token_store.delete_expired_before(NOW) == 0

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_find_by_identity(self, refresh_token_store):
        await refresh_token_store.create("a", NOW, identity_id=1)
        await refresh_token_store.create("b", NOW, identity_id=2)
        await refresh_token_store.create("c", NOW, identity_id=1)

        records = await refresh_token_store.find_by_identity(1)

        assert [r.token for r in records] == ["a", "c"]
        assert await refresh_token_store.count() == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_closed_store_raises_storage_error(self, refresh_token_store):
        await refresh_token_store.close()

        assert refresh_token_store.is_closed
        with pytest.raises(StorageError):
            await refresh_token_store.find_by_token("value-1")
        with pytest.raises(StorageError):
            await refresh_token_store.delete_expired_before(NOW)


class TestInMemoryUserStore:
    """Tests for InMemoryUserStore."""

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_create_and_find(self, user_store):
        account = await user_store.create("Jane Doe", "jane@example.com", "hash")

        assert account.id == 1
        assert account.role is Role.USER
        assert await user_store.find_by_username("jane@example.com") == account
        assert await user_store.exists_by_username("jane@example.com")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, user_store):
        await user_store.create("Jane Doe", "jane@example.com", "hash")

        with pytest.raises(DataIntegrityException):
            await user_store.create("Jane Again", "jane@example.com", "hash")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_usernames_are_case_sensitive(self, user_store):
        await user_store.create("Jane Doe", "jane@example.com", "hash")

        assert not await user_store.exists_by_username("Jane@example.com")
        other = await user_store.create("Jane Upper", "Jane@example.com", "hash")
        assert other.id == 2

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_delete(self, user_store):
        await user_store.create("Jane Doe", "jane@example.com", "hash")

        assert await user_store.delete("jane@example.com") is True
        assert await user_store.delete("jane@example.com") is False
        assert await user_store.find_by_username("jane@example.com") is None

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_closed_store_raises_storage_error(self, user_store):
        await user_store.close()

        with pytest.raises(StorageError):
            await user_store.exists_by_username("jane@example.com")
