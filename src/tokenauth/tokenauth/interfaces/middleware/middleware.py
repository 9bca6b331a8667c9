# ABOUTME: Abstract request middleware interface
# ABOUTME: Request middleware inspects a request context and reports an authentication result

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tokenauth.models.middleware.context import RequestContext
    from tokenauth.models.middleware.result import AuthenticationResult


class AbstractRequestMiddleware(ABC):
    """
    Abstract base class for request middleware.

    Middleware receives the request-scoped context explicitly and may decorate
    it (for example by binding an identity). It reports what it did through
    the returned result rather than by raising.
    """

    @abstractmethod
    async def process(self, context: "RequestContext") -> "AuthenticationResult":
        """
        Process one request context.

        Args:
            context: The request-scoped context. May be mutated.

        Returns:
            AuthenticationResult describing the terminal state reached.
        """
        pass

    @abstractmethod
    def can_process(self, context: "RequestContext") -> bool:
        """
        Determine if this middleware applies to the given context.

        Args:
            context: RequestContext to evaluate.

        Returns:
            bool: True if ``process`` should run for this context.
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
