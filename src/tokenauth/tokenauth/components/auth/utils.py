# ABOUTME: Helper functions for request authentication
# ABOUTME: Extracts bearer tokens from Authorization header values

BEARER_SCHEME = "bearer"


def extract_bearer_token(auth_header: str | None) -> str | None:
    """
    Extract the token from a Bearer authorization header.

    The scheme is matched case-insensitively. Surrounding whitespace around
    the token is ignored.

    Args:
        auth_header: The Authorization header value, or None if absent.

    Returns:
        The extracted token, or None if the header is absent, uses another
        scheme, or carries an empty token.
    """
    if not auth_header:
        return None

    parts = auth_header.strip().split(None, 1)
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None

    token = parts[1].strip()
    return token or None
