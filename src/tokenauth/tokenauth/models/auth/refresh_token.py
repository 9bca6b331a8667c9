# ABOUTME: Persisted refresh token record and the issued token pair
# ABOUTME: Refresh tokens are opaque random values owned by one identity

from dataclasses import dataclass, field
from datetime import datetime, UTC

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class RefreshToken:
    """
    A refresh token record as stored by a refresh token store.

    The ``token`` value is high-entropy random text, unique across the store,
    and carries no information about its owner or issue time.
    """

    id: int
    token: str
    expires_at: datetime
    identity_id: int
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the record's expiry lies strictly before ``now``."""
        current = now or datetime.now(UTC)
        return self.expires_at < current

    def __repr__(self) -> str:
        return f"RefreshToken(id={self.id}, identity_id={self.identity_id}, expires_at={self.expires_at.isoformat()})"


class TokenPair(BaseModel):
    """An access token together with the refresh token issued alongside it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token: str = Field(description="Signed access token")
    refresh_token: str = Field(serialization_alias="refreshToken", description="Opaque refresh token value")
