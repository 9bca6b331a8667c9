# ABOUTME: RequestContext model carrying per-request authentication state
# ABOUTME: Replaces ambient security context with an explicit object passed through the call chain

from datetime import datetime, UTC
from typing import Any, Dict, Optional, List
from uuid import uuid4

from pydantic import BaseModel, Field, ConfigDict, PrivateAttr

from tokenauth.models.auth.claims import Claims
from tokenauth.models.auth.identity import Identity


class RequestContext(BaseModel):
    """
    Request-scoped authentication context.

    One context is created per inbound request. The request authenticator
    binds an identity to it when the request carries a usable access token;
    downstream authorization reads ``identity`` to decide what is allowed.
    Nothing about it is global: it lives exactly as long as the request.
    """

    # Context identification
    id: str = Field(default_factory=lambda: str(uuid4()), description="Unique context identifier")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Context creation timestamp")
    request_id: Optional[str] = Field(default=None, description="Request identifier for tracing")

    # Request data
    headers: Dict[str, str] = Field(default_factory=dict, description="Inbound request headers")
    client_id: Optional[str] = Field(default=None, description="Client address or identifier")

    # Authentication state
    identity: Optional[Identity] = Field(default=None, description="Identity bound by the request authenticator")
    claims: Optional[Claims] = Field(default=None, description="Claims of the token the identity came from")

    # Metadata
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional metadata")
    execution_path: List[str] = Field(default_factory=list, description="Names of middleware that ran")

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _lowered_headers: Dict[str, str] = PrivateAttr(default_factory=dict)

    def model_post_init(self, __context: Any) -> None:
        self._lowered_headers = {k.lower(): v for k, v in self.headers.items()}

    def get_header(self, name: str) -> str | None:
        """
        Get a request header value (case-insensitive).

        Args:
            name: Header name.

        Returns:
            The header value, or None if absent.
        """
        return self._lowered_headers.get(name.lower())

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    def bind_identity(self, identity: Identity, claims: Claims | None = None) -> None:
        """
        Bind an authenticated identity to this request.

        Args:
            identity: The identity loaded for the token's subject.
            claims: The claims of the token that authenticated the request.

        Raises:
            RuntimeError: If an identity is already bound.
        """
        if self.identity is not None:
            raise RuntimeError(f"Request context {self.id} already has a bound identity")
        self.identity = identity
        self.claims = claims

    def add_execution_step(self, middleware_name: str) -> None:
        """Add a middleware to the execution path."""
        self.execution_path.append(middleware_name)

    def set_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = value

    def get_metadata(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)
