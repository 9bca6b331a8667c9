from typing import Protocol


class AuthRequest(Protocol):
    """
    Protocol for framework-agnostic authentication requests.

    This protocol defines the minimal interface an incoming request must offer
    to be processed by the request authenticator. It abstracts away
    framework-specific request details (e.g., Starlette's `Request`) so the
    security logic can be reused and tested without a web server.
    """

    def get_header(self, name: str) -> str | None:
        """
        Retrieves the value of a specific HTTP header from the request.

        Args:
            name: The name of the HTTP header to retrieve (case-insensitive).

        Returns:
            The string value of the header if found, otherwise `None`.
        """
        ...

    @property
    def client_id(self) -> str | None:
        """
        An identifier for the client making the request (e.g., its IP address).

        Returns `None` if no client ID can be determined.
        """
        ...
