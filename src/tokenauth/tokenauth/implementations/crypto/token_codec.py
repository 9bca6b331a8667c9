# ABOUTME: PyJWT implementation of AbstractTokenCodec using HMAC-signed tokens
# ABOUTME: Issues and decodes access tokens with issuer/audience checks and expiry-tolerant decoding

from datetime import datetime, timedelta, UTC
from typing import Any, Mapping, TYPE_CHECKING

import jwt
from loguru import logger

from tokenauth.exceptions import InvalidTokenException
from tokenauth.interfaces.auth.token_codec import AbstractTokenCodec
from tokenauth.models.auth.claims import Claims, RESERVED_CLAIMS

if TYPE_CHECKING:
    from tokenauth.config.jwt import JwtSettings

_REQUIRED_CLAIMS = ["sub", "iat", "exp"]

# Failures that mean "someone else signed this, or it was meant for someone else".
_SIGNATURE_ERRORS = (jwt.InvalidSignatureError, jwt.InvalidAudienceError, jwt.InvalidIssuerError)


class JwtTokenCodec(AbstractTokenCodec):
    """
    HMAC-signed JWT access tokens backed by PyJWT.

    Tokens carry ``sub``, ``iss``, ``aud``, ``iat`` and ``exp`` plus any extra
    claims supplied at issue time. ``iat`` and ``exp`` are whole seconds, so
    ``exp - iat`` always equals the configured lifetime exactly.

    Decoding verifies the signature, issuer and audience but NOT expiry; the
    strict check lives in ``is_valid_for`` and in ``Claims.is_expired``.
    """

    def __init__(
        self,
        secret_key: bytes,
        issuer: str,
        audience: str,
        lifetime: timedelta,
        algorithm: str = "HS256",
        leeway: float = 0.0,
    ):
        """
        Initialize the codec.

        Args:
            secret_key: Decoded symmetric signing key.
            issuer: Value stamped into and required from ``iss``.
            audience: Value stamped into and required from ``aud``.
            lifetime: Access token lifetime.
            algorithm: HMAC algorithm name (HS256, HS384 or HS512).
            leeway: Allowed clock skew in seconds, applied to the issued-at check and the strict expiry check.
        """
        if not secret_key:
            raise ValueError("secret_key must not be empty")
        if lifetime < timedelta(seconds=1):
            raise ValueError("lifetime must be at least 1 second")

        self._secret_key = secret_key
        self.issuer = issuer
        self.audience = audience
        self.lifetime = lifetime
        self.algorithm = algorithm
        self.leeway = leeway
        self._logger = logger.bind(name=__name__)

    @classmethod
    def from_settings(cls, settings: "JwtSettings") -> "JwtTokenCodec":
        """Build a codec from validated JWT settings."""
        return cls(
            secret_key=settings.signing_key,
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            lifetime=settings.JWT_EXPIRES_IN,
            algorithm=settings.JWT_ALGORITHM,
            leeway=settings.JWT_LEEWAY,
        )

    def issue(self, subject: str, extra_claims: Mapping[str, Any] | None = None) -> str:
        extra = dict(extra_claims or {})
        overridden = RESERVED_CLAIMS.intersection(extra)
        if overridden:
            raise ValueError(f"Extra claims may not override reserved claims: {sorted(overridden)}")

        issued_at = int(datetime.now(UTC).timestamp())
        payload: dict[str, Any] = {
            **extra,
            "sub": subject,
            "iss": self.issuer,
            "aud": self.audience,
            "iat": issued_at,
            "exp": issued_at + int(self.lifetime.total_seconds()),
        }
        token = jwt.encode(payload, self._secret_key, algorithm=self.algorithm)
        self._logger.debug(f"Issued access token for subject '{subject}'")
        return token

    def decode(self, token: str) -> Claims:
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                leeway=self.leeway,
                options={"verify_exp": False, "require": _REQUIRED_CLAIMS},
            )
        except _SIGNATURE_ERRORS as e:
            raise InvalidTokenException(
                message="Access token failed verification",
                code="INVALID_SIGNATURE",
                details={"reason": type(e).__name__},
            ) from e
        except jwt.PyJWTError as e:
            raise InvalidTokenException(
                message="Access token is malformed",
                code="MALFORMED_TOKEN",
                details={"reason": type(e).__name__},
            ) from e

        try:
            return Claims.from_payload(payload)
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenException(
                message="Access token is malformed",
                code="MALFORMED_TOKEN",
                details={"reason": type(e).__name__},
            ) from e

    def extract_subject(self, token: str) -> str:
        return self.decode(token).subject

    def is_valid_for(self, token: str, expected_subject: str) -> bool:
        try:
            claims = self.decode(token)
        except Exception:
            return False
        if claims.is_expired(leeway=self.leeway):
            return False
        return claims.subject == expected_subject

    def __repr__(self) -> str:
        return f"JwtTokenCodec(issuer={self.issuer!r}, audience={self.audience!r}, algorithm={self.algorithm!r})"
