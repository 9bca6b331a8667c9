# ABOUTME: Request body schemas for the authentication HTTP endpoints
# ABOUTME: Field validators produce the short per-field messages returned on 400 responses

from pydantic import BaseModel, ConfigDict, Field, field_validator, validate_email
from pydantic_core import PydanticCustomError

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 32


def _require_text(value: str, field_label: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_label} is mandatory")
    return value


class LoginRequest(BaseModel):
    """Body of ``POST /api/auth/login``."""

    username: str
    password: str

    @field_validator("username")
    @classmethod
    def username_not_blank(cls, v: str) -> str:
        return _require_text(v, "Username")

    @field_validator("password")
    @classmethod
    def password_not_blank(cls, v: str) -> str:
        return _require_text(v, "Password")


class RegisterRequest(BaseModel):
    """
    Body of ``POST /api/auth/register``.

    The username must be an email address. It is stored exactly as sent, so
    uniqueness stays case-sensitive.
    """

    name: str
    username: str
    password: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _require_text(v, "Name")

    @field_validator("username")
    @classmethod
    def username_is_email(cls, v: str) -> str:
        _require_text(v, "Username")
        try:
            validate_email(v)
        except PydanticCustomError as e:
            raise ValueError("Username must be an email") from e
        return v

    @field_validator("password")
    @classmethod
    def password_length(cls, v: str) -> str:
        _require_text(v, "Password")
        if not PASSWORD_MIN_LENGTH <= len(v) <= PASSWORD_MAX_LENGTH:
            raise ValueError(f"Password must have from {PASSWORD_MIN_LENGTH} to {PASSWORD_MAX_LENGTH} characters")
        return v


class RefreshTokenRequest(BaseModel):
    """Body of ``POST /api/auth/refreshToken``."""

    model_config = ConfigDict(populate_by_name=True)

    token: str
    refresh_token: str = Field(validation_alias="refreshToken")

    @field_validator("token")
    @classmethod
    def token_not_blank(cls, v: str) -> str:
        return _require_text(v, "Token")

    @field_validator("refresh_token")
    @classmethod
    def refresh_token_not_blank(cls, v: str) -> str:
        return _require_text(v, "Refresh token")


class MessageResponse(BaseModel):
    """Error body: ``{"message": ...}``."""

    message: str
