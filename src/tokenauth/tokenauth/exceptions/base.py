# ABOUTME: Core exception classes for the token authentication subsystem
# ABOUTME: Provides structured error handling with context and error codes

from typing import Dict, Any


class CoreException(Exception):
    """Base exception class for the authentication subsystem.

    Provides structured error handling with optional error codes and contextual
    details. All custom exceptions in the package inherit from this class to
    ensure consistent error handling patterns.

    Attributes:
        message: Human-readable error message
        code: Optional error code for programmatic handling
        details: Optional dictionary containing contextual information
    """

    def __init__(self, message: str, code: str | None = None, details: Dict[str, Any] | None = None):
        """Initialize CoreException with message, optional code and details.

        Args:
            message: Human-readable error message
            code: Optional error code for programmatic handling
            details: Optional dictionary containing contextual information
        """
        self.message = message
        self.code = code
        self.details = details.copy() if details else {}
        super().__init__(self.message)


class ConfigurationException(CoreException):
    """Exception raised for configuration errors.

    Used when the service cannot be assembled from its configuration, such as
    a missing signing secret or an unusable schedule.
    """

    pass


class AuthenticationException(CoreException):
    """Exception raised for authentication errors.

    Raised when a caller explicitly unwraps a failed authentication result,
    or when a token cannot be parsed. The ``code`` carries the failure kind.
    """

    pass


class InvalidTokenException(AuthenticationException):
    """Exception raised when an access token cannot be trusted.

    Codes:
        INVALID_SIGNATURE: The signature, issuer or audience does not verify.
        MALFORMED_TOKEN: The token is not a decodable JWT or lacks required claims.

    An expired but otherwise valid token never raises this exception.
    """

    pass


class DataIntegrityException(CoreException):
    """Exception raised for data integrity violations.

    Used when a store rejects a write because it would break a uniqueness
    constraint (duplicate username, duplicate refresh token value).
    """

    pass


class StorageError(CoreException):
    """Exception raised for storage operation failures.

    Used when a backing store is unavailable or a store call fails for an
    infrastructure reason. It is never translated into a domain error.
    """

    pass
