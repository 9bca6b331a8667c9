# ABOUTME: Abstract token codec interface for signed access tokens
# ABOUTME: Defines the contract for issuing, decoding and checking self-contained access tokens

from abc import ABC, abstractmethod
from typing import Any, Mapping

from tokenauth.models.auth.claims import Claims


class AbstractTokenCodec(ABC):
    """
    Abstract codec for signed access tokens.

    An access token is stateless: its validity is decided purely by its
    signature and its expiry at verification time. Implementations keep two
    paths deliberately distinct:

    - ``decode`` tolerates expiry, so rotation can read the subject of a
      token that has just expired.
    - ``is_valid_for`` is strict and is the only check fit for authorization.

    Note: Methods are synchronous. Signing and verification are CPU-bound and
    touch no I/O.
    """

    @abstractmethod
    def issue(self, subject: str, extra_claims: Mapping[str, Any] | None = None) -> str:
        """
        Issues a signed access token for ``subject``.

        The token carries the subject, the configured issuer and audience,
        issued-at set to now, expiry set to now plus the configured lifetime,
        and the supplied extra claims merged in.

        Args:
            subject: The token subject (a username).
            extra_claims: Additional claims to embed. Must not contain any of
                ``sub``, ``iss``, ``aud``, ``iat`` or ``exp``.

        Returns:
            str: The compact signed token.

        Raises:
            ValueError: If ``extra_claims`` tries to override a reserved claim.
        """
        pass

    @abstractmethod
    def decode(self, token: str) -> Claims:
        """
        Verifies the token's signature and returns its claims.

        An expired but signature-valid token still decodes successfully; the
        caller decides whether to accept it.

        Args:
            token: The compact signed token.

        Returns:
            Claims: The decoded claims, possibly describing an expired token.

        Raises:
            InvalidTokenException: If the signature, issuer or audience does not
                verify (code ``INVALID_SIGNATURE``), or the token is malformed
                (code ``MALFORMED_TOKEN``).
        """
        pass

    @abstractmethod
    def extract_subject(self, token: str) -> str:
        """
        Convenience wrapper over ``decode`` that reads the subject claim.

        Raises:
            InvalidTokenException: Under the same conditions as ``decode``.
        """
        pass

    @abstractmethod
    def is_valid_for(self, token: str, expected_subject: str) -> bool:
        """
        Strict validity check for authorization.

        Args:
            token: The compact signed token.
            expected_subject: The subject the token must carry.

        Returns:
            bool: True iff the signature verifies, the token is not expired,
                and its subject equals ``expected_subject``. Any failure while
                parsing yields False; this method never raises.
        """
        pass
