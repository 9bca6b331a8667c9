# ABOUTME: Explicit outcome types for authentication operations
# ABOUTME: Domain failures are returned as AuthError kinds instead of being raised

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from tokenauth.exceptions import AuthenticationException

T = TypeVar("T")


class AuthError(str, Enum):
    """
    Kinds of expected authentication failure.

    Each kind carries the short message shown to API callers and the HTTP
    status it maps to at the transport boundary.
    """

    INVALID_CREDENTIALS = "invalid_credentials"
    USERNAME_TAKEN = "username_taken"
    IDENTITY_NOT_FOUND = "identity_not_found"
    REFRESH_TOKEN_NOT_FOUND = "refresh_token_not_found"
    TOKEN_PAIR_MISMATCH = "token_pair_mismatch"
    REFRESH_TOKEN_EXPIRED = "refresh_token_expired"
    INVALID_TOKEN = "invalid_token"

    @property
    def message(self) -> str:
        return _MESSAGES[self]

    @property
    def status_code(self) -> int:
        return _STATUS_CODES.get(self, 401)


# Unknown user and wrong password share INVALID_CREDENTIALS and its message.
_MESSAGES = {
    AuthError.INVALID_CREDENTIALS: "Invalid username or password",
    AuthError.USERNAME_TAKEN: "Username is already taken",
    AuthError.IDENTITY_NOT_FOUND: "User not found",
    AuthError.REFRESH_TOKEN_NOT_FOUND: "Refresh token not found",
    AuthError.TOKEN_PAIR_MISMATCH: "Access token and refresh token do not match",
    AuthError.REFRESH_TOKEN_EXPIRED: "Refresh token has expired",
    AuthError.INVALID_TOKEN: "Invalid access token",
}

_STATUS_CODES = {
    AuthError.USERNAME_TAKEN: 409,
}


@dataclass(frozen=True)
class AuthResult(Generic[T]):
    """
    Outcome of an authentication operation: either a value or an error kind.

    Example:
        result = await gate.login(username, password)
        if not result.is_success:
            return error_response(result.error)
        pair = result.value
    """

    value: T | None = None
    error: AuthError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("AuthResult requires exactly one of value or error")

    @classmethod
    def success(cls, value: T) -> "AuthResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: AuthError) -> "AuthResult[T]":
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value or raise for a failed result.

        Raises:
            AuthenticationException: With ``code`` set to the error kind's name.
        """
        if self.error is not None:
            raise AuthenticationException(
                message=self.error.message,
                code=self.error.name,
                details={"status_code": self.error.status_code},
            )
        return self.value  # type: ignore[return-value]
