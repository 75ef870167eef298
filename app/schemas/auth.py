"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic_core import PydanticCustomError

from app.models.user import EMAIL_MAX_LEN, USERNAME_MAX_LEN
from app.schemas.common import CamelModel, require_text

PASSWORD_MAX_LEN = 128


class RegisterRequest(BaseModel):
    """New account. Missing username/password report the same message as empty ones."""

    username: str = Field(
        default="",
        max_length=USERNAME_MAX_LEN,
        validate_default=True,
        description="Username (1-50 chars)",
    )
    password: str = Field(
        default="",
        max_length=PASSWORD_MAX_LEN,
        validate_default=True,
        description="Password",
    )
    email: EmailStr | None = Field(default=None, description="Optional email address")

    @field_validator("username")
    @classmethod
    def username_required(cls, v: str) -> str:
        return require_text(v, "Username is required.")

    @field_validator("password")
    @classmethod
    def password_required(cls, v: str) -> str:
        return require_text(v, "Password is required.")

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, v: object) -> object:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("email")
    @classmethod
    def email_fits_column(cls, v: str | None) -> str | None:
        if v is not None and len(v) > EMAIL_MAX_LEN:
            raise PydanticCustomError(
                "string_too_long",
                f"Email must not exceed {EMAIL_MAX_LEN} characters.",
            )
        return v


class RegisterResponse(CamelModel):
    """Identity of the created user."""

    user_id: str


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Password")


class TokenResponse(BaseModel):
    """JWT access token returned after successful login."""

    token: str = Field(..., description="JWT access token; send as 'Authorization: Bearer <token>'")


class CurrentUser(BaseModel):
    """Authenticated user (id, username, roles) for dependency injection."""

    id: int
    username: str
    roles: list[str] = Field(default_factory=list)
