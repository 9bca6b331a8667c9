# ABOUTME: Contract tests for the storage interfaces
# ABOUTME: Verifies store implementations honor conditional delete and uniqueness contracts

from datetime import datetime, timedelta, UTC

import pytest

from tokenauth.exceptions import DataIntegrityException
from tokenauth.implementations.memory import InMemoryRefreshTokenStore, InMemoryUserStore
from tokenauth.interfaces.storage import AbstractRefreshTokenStore, AbstractUserStore
from tests.contract.base_contract_test import ContractTestBase


class TestRefreshTokenStoreContract(ContractTestBase[AbstractRefreshTokenStore]):
    """Contract tests for AbstractRefreshTokenStore."""

    @property
    def interface_class(self):
        return AbstractRefreshTokenStore

    @property
    def implementations(self):
        return [InMemoryRefreshTokenStore]

    @pytest.mark.contract
    @pytest.mark.asyncio
    async def test_behavioral_contract(self):
        for impl_class in self.implementations:
            store = impl_class()
            now = datetime.now(UTC)

            await store.create("expired", now - timedelta(seconds=1), identity_id=1)
            await store.create("live", now + timedelta(hours=1), identity_id=1)
            with pytest.raises(DataIntegrityException):
                await store.create("live", now, identity_id=2)

            assert await store.delete("live") is True
            assert await store.delete("live") is False
            assert await store.delete_expired_before(now) == 1
            assert await store.find_by_token("expired") is None
            assert await store.count() == 0

    @pytest.mark.contract
    def test_count_is_required(self):
        assert "count" in self.get_abstract_methods()

        class UncountedStore(AbstractRefreshTokenStore):
            create = InMemoryRefreshTokenStore.create
            find_by_token = InMemoryRefreshTokenStore.find_by_token
            delete = InMemoryRefreshTokenStore.delete
            delete_expired_before = InMemoryRefreshTokenStore.delete_expired_before

        with pytest.raises(TypeError):
            UncountedStore()


class TestUserStoreContract(ContractTestBase[AbstractUserStore]):
    """Contract tests for AbstractUserStore."""

    @property
    def interface_class(self):
        return AbstractUserStore

    @property
    def implementations(self):
        return [InMemoryUserStore]

    @pytest.mark.contract
    @pytest.mark.asyncio
    async def test_behavioral_contract(self):
        for impl_class in self.implementations:
            store = impl_class()

            account = await store.create("Jane Doe", "jane@example.com", "hash")
            assert (await store.find_by_username("jane@example.com")).id == account.id
            assert await store.exists_by_username("jane@example.com")
            assert not await store.exists_by_username("JANE@example.com")
            with pytest.raises(DataIntegrityException):
                await store.create("Jane", "jane@example.com", "hash")
