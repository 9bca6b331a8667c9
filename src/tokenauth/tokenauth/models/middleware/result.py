# ABOUTME: AuthenticationState and AuthenticationResult models for the request authenticator
# ABOUTME: Records which state a request ended in and why

from datetime import datetime, UTC
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from tokenauth.models.auth.identity import Identity


class AuthenticationState(str, Enum):
    """
    States of the per-request authentication state machine.

    NO_TOKEN and TOKEN_PRESENT are intermediate; every request ends in one of
    AUTHENTICATED, REJECTED or PASS_THROUGH.
    """

    NO_TOKEN = "no_token"
    TOKEN_PRESENT = "token_present"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"
    PASS_THROUGH = "pass_through"

    @property
    def is_terminal(self) -> bool:
        return self in (AuthenticationState.AUTHENTICATED, AuthenticationState.REJECTED, AuthenticationState.PASS_THROUGH)


class PassThroughReason(str, Enum):
    """Why a request continued without a newly bound identity."""

    NO_TOKEN = "no_token"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"
    ALREADY_AUTHENTICATED = "already_authenticated"


class AuthenticationResult(BaseModel):
    """
    Outcome of running the request authenticator on one request.

    The authenticator never stops the request: ``should_continue`` is always
    True, and rejecting unauthenticated access is left to authorization.
    """

    middleware_name: str = Field(description="Name of the middleware that produced this result")
    state: AuthenticationState = Field(description="Terminal state reached")
    reason: Optional[str] = Field(default=None, description="Why the request passed through or was rejected")
    identity: Optional[Identity] = Field(default=None, description="Identity bound during this run")

    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    completed_at: Optional[datetime] = Field(default=None)
    execution_time_ms: Optional[float] = Field(default=None)

    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional metadata")
    should_continue: bool = Field(default=True, description="Whether request processing continues")

    def mark_completed(self) -> None:
        """Set the completion timestamp and compute execution time."""
        self.completed_at = datetime.now(UTC)
        if self.execution_time_ms is None:
            self.execution_time_ms = (self.completed_at - self.started_at).total_seconds() * 1000

    @property
    def is_authenticated(self) -> bool:
        return self.state == AuthenticationState.AUTHENTICATED
