# ABOUTME: In-memory implementation of AbstractRefreshTokenStore
# ABOUTME: Stores refresh token records in a dictionary keyed by token value with per-call atomicity

import itertools
import threading
from datetime import datetime
from typing import Dict

from tokenauth.exceptions import DataIntegrityException, StorageError
from tokenauth.interfaces.storage.refresh_token_store import AbstractRefreshTokenStore
from tokenauth.models.auth.refresh_token import RefreshToken


class InMemoryRefreshTokenStore(AbstractRefreshTokenStore):
    """
    In-memory implementation of AbstractRefreshTokenStore.

    Features:
    - Unique token values enforced on create
    - Conditional delete reporting whether this call removed the record
    - Predicate-scoped expiry deletion
    - Thread-safe operations

    Each method holds the lock for the duration of a single call only, so no
    caller can hold the store across several calls.

    Note:
        All records are lost when the process restarts.
    """

    def __init__(self) -> None:
        self._records: Dict[str, RefreshToken] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise StorageError("Refresh token store is closed", code="STORE_CLOSED")

    async def create(self, token: str, expires_at: datetime, identity_id: int) -> RefreshToken:
        self._ensure_open()
        if not token:
            raise ValueError("token must be a non-empty string")
        if expires_at.tzinfo is None:
            raise ValueError("expires_at must be timezone-aware")

        with self._lock:
            if token in self._records:
                raise DataIntegrityException(
                    "Refresh token value already exists",
                    code="DUPLICATE_REFRESH_TOKEN",
                    details={"identity_id": identity_id},
                )
            record = RefreshToken(id=next(self._ids), token=token, expires_at=expires_at, identity_id=identity_id)
            self._records[token] = record
            return record

    async def find_by_token(self, token: str) -> RefreshToken | None:
        self._ensure_open()
        with self._lock:
            return self._records.get(token)

    async def delete(self, token: str) -> bool:
        self._ensure_open()
        with self._lock:
            return self._records.pop(token, None) is not None

    async def delete_expired_before(self, cutoff: datetime) -> int:
        self._ensure_open()
        with self._lock:
            expired = [value for value, record in self._records.items() if record.expires_at < cutoff]
            for value in expired:
                del self._records[value]
            return len(expired)

    async def count(self) -> int:
        self._ensure_open()
        with self._lock:
            return len(self._records)

    async def find_by_identity(self, identity_id: int) -> list[RefreshToken]:
        """Return every record owned by ``identity_id``, oldest first."""
        self._ensure_open()
        with self._lock:
            return sorted(
                (r for r in self._records.values() if r.identity_id == identity_id),
                key=lambda r: r.id,
            )

    async def close(self) -> None:
        """Close the store. Every later call raises StorageError."""
        with self._lock:
            self._closed = True
            self._records.clear()

    @property
    def is_closed(self) -> bool:
        return self._closed
