# ABOUTME: Access token claims model
# ABOUTME: Typed view over a decoded access token payload with expiry checks

from datetime import datetime, timedelta, UTC
from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

RESERVED_CLAIMS = frozenset({"sub", "iss", "aud", "iat", "exp"})


class Claims(BaseModel):
    """
    Claims decoded from a signature-valid access token.

    A ``Claims`` object may describe an expired token: decoding tolerates
    expiry so that rotation can read the subject of a just-expired token.
    Callers authorizing a request must check ``is_expired()`` themselves.
    """

    model_config = ConfigDict(frozen=True)

    subject: str = Field(description="The sub claim (username)")
    issuer: str | None = Field(default=None, description="The iss claim")
    audience: str | list[str] | None = Field(default=None, description="The aud claim")
    issued_at: datetime = Field(description="The iat claim")
    expires_at: datetime = Field(description="The exp claim")
    extra: Dict[str, Any] = Field(default_factory=dict, description="Every non-reserved claim")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Claims":
        """
        Build claims from a raw decoded JWT payload.

        Args:
            payload: The decoded payload. ``iat`` and ``exp`` are NumericDate seconds.

        Returns:
            The typed claims.
        """
        return cls(
            subject=str(payload["sub"]),
            issuer=payload.get("iss"),
            audience=payload.get("aud"),
            issued_at=datetime.fromtimestamp(payload["iat"], tz=UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=UTC),
            extra={k: v for k, v in payload.items() if k not in RESERVED_CLAIMS},
        )

    def is_expired(self, now: datetime | None = None, leeway: float = 0.0) -> bool:
        """Check if the token has expired, allowing ``leeway`` seconds of clock skew."""
        current = now or datetime.now(UTC)
        return current > self.expires_at + timedelta(seconds=leeway)

    def get(self, key: str, default: Any = None) -> Any:
        """Get an extra claim by name."""
        return self.extra.get(key, default)
