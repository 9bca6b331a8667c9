# ABOUTME: JWT signing and token lifetime configuration
# ABOUTME: Validates the signing secret, issuer, audience and token lifetimes at startup

import base64
import binascii
from datetime import timedelta
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# HMAC-SHA256 needs a key at least as long as its digest.
MIN_SECRET_BYTES = 32


class JwtSettings(BaseSettings):
    """Configuration for signing access tokens and sizing token lifetimes.

    Every field without a default is required, so a missing or invalid value
    fails settings construction and therefore application startup.

    Attributes:
        JWT_SECRET: Base64-encoded symmetric signing secret (at least 32 decoded bytes).
        JWT_ISSUER: Value stamped into and required from the ``iss`` claim.
        JWT_AUDIENCE: Value stamped into and required from the ``aud`` claim.
        JWT_EXPIRES_IN: Access token lifetime.
        JWT_REFRESH_EXPIRES_IN: Refresh token lifetime.
        JWT_ALGORITHM: HMAC algorithm used for signing.
        JWT_LEEWAY: Allowed clock skew in seconds when checking expiry.
    """

    JWT_SECRET: str = Field(description="Base64-encoded secret used for token signing and verification.")
    JWT_ISSUER: str = Field(min_length=1, description="Issuer of the access tokens.")
    JWT_AUDIENCE: str = Field(min_length=1, description="Audience for whom the access tokens are intended.")
    JWT_EXPIRES_IN: timedelta = Field(description="Duration after which an access token expires.")
    JWT_REFRESH_EXPIRES_IN: timedelta = Field(description="Duration after which a refresh token expires.")
    JWT_ALGORITHM: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256",
        description="HMAC algorithm used to sign access tokens.",
    )
    JWT_LEEWAY: float = Field(default=0.0, ge=0.0, description="Allowed clock skew in seconds.")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_secret(cls, v: str) -> str:
        """Ensure the secret is valid base64 and carries enough key material."""
        try:
            key_bytes = base64.b64decode(v.strip(), validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("JWT_SECRET must be base64-encoded") from e

        if len(key_bytes) < MIN_SECRET_BYTES:
            raise ValueError(
                f"JWT_SECRET must decode to at least {MIN_SECRET_BYTES} bytes, got {len(key_bytes)}"
            )
        return v.strip()

    @field_validator("JWT_ISSUER", "JWT_AUDIENCE")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()

    @field_validator("JWT_EXPIRES_IN", "JWT_REFRESH_EXPIRES_IN")
    @classmethod
    def validate_lifetime(cls, v: timedelta) -> timedelta:
        """Token lifetimes must be at least one second."""
        if v < timedelta(seconds=1):
            raise ValueError("token lifetime must be at least 1 second")
        return v

    @property
    def signing_key(self) -> bytes:
        """The decoded symmetric key bytes."""
        return base64.b64decode(self.JWT_SECRET)
