# ABOUTME: In-memory implementation of AbstractUserStore
# ABOUTME: Stores user accounts keyed by exact username with sequential ids

import itertools
import threading
from typing import Dict

from tokenauth.exceptions import DataIntegrityException, StorageError
from tokenauth.interfaces.storage.user_store import AbstractUserStore
from tokenauth.models.auth.enum import Role
from tokenauth.models.auth.identity import UserAccount


class InMemoryUserStore(AbstractUserStore):
    """
    In-memory implementation of AbstractUserStore.

    Usernames are compared exactly, so ``Jane`` and ``jane`` are different
    accounts. Ids are assigned sequentially starting at 1.
    """

    def __init__(self) -> None:
        self._accounts: Dict[str, UserAccount] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageError("User store is closed", code="STORE_CLOSED")

    async def find_by_username(self, username: str) -> UserAccount | None:
        self._ensure_open()
        with self._lock:
            return self._accounts.get(username)

    async def exists_by_username(self, username: str) -> bool:
        self._ensure_open()
        with self._lock:
            return username in self._accounts

    async def create(self, name: str, username: str, password_hash: str, role: Role = Role.USER) -> UserAccount:
        self._ensure_open()
        if not username:
            raise ValueError("username must be a non-empty string")

        with self._lock:
            if username in self._accounts:
                raise DataIntegrityException(
                    f"Username '{username}' is already taken",
                    code="DUPLICATE_USERNAME",
                    details={"username": username},
                )
            account = UserAccount(
                id=next(self._ids), name=name, username=username, password_hash=password_hash, role=role
            )
            self._accounts[username] = account
            return account

    async def delete(self, username: str) -> bool:
        """Remove an account. Tokens already issued for it stay signature-valid."""
        self._ensure_open()
        with self._lock:
            return self._accounts.pop(username, None) is not None

    async def close(self) -> None:
        """Close the store. Every later call raises StorageError."""
        with self._lock:
            self._closed = True
            self._accounts.clear()

    @property
    def is_closed(self) -> bool:
        return self._closed
