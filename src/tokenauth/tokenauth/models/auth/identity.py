# ABOUTME: Identity models for authenticated principals and stored user accounts
# ABOUTME: Separates the public identity projection from the credential-bearing account record

from dataclasses import dataclass, field
from datetime import datetime, UTC

from pydantic import BaseModel, ConfigDict, Field

from .enum import Role


class Identity(BaseModel):
    """
    The authenticated principal as seen by the rest of the application.

    This is the projection returned from registration and bound to a request
    context by the request authenticator. It never carries credentials.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Store-assigned identifier")
    name: str = Field(description="Display name")
    username: str = Field(description="Unique login name, used as the token subject")
    role: Role = Field(default=Role.USER, description="Coarse-grained authorization role")

    @property
    def subject(self) -> str:
        """The value carried in the ``sub`` claim of this identity's access tokens."""
        return self.username


@dataclass
class UserAccount:
    """
    User account as persisted by a user store.

    Holds the password hash next to the identity fields. Only the store and
    the credential verifier should ever see this object.
    """

    id: int
    name: str
    username: str
    password_hash: str
    role: Role = Role.USER
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def to_identity(self) -> Identity:
        """Project this account to its credential-free identity."""
        return Identity(id=self.id, name=self.name, username=self.username, role=self.role)
