"""
Authentication module data models.

These mirror the backend session service's JSON contract. The gateway
never interprets them beyond pulling the access token out of a token
response, so unknown fields are kept and passed through.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """A user record as owned by the backend."""

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: str = Field(..., description="Email address")
    profile: dict[str, Any] = Field(default_factory=dict, description="Free-form profile data")
    created_at: str = Field(..., description="Creation timestamp as sent by the backend")


class TokenResponse(BaseModel):
    """Backend answer to login, signup and refresh."""

    model_config = ConfigDict(extra="allow")

    access_token: str = Field(..., description="Opaque bearer token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: Optional[int] = Field(None, description="Lifetime in seconds")
    user: Optional[UserResponse] = Field(None, description="The session's user")


class UserLoginRequest(BaseModel):
    """Credentials for login."""

    email: str
    password: str


class UserSignupRequest(BaseModel):
    """Account creation request."""

    username: str
    email: str
    password: str


class ChangePasswordRequest(BaseModel):
    """Password change for the current session's user."""

    current_password: str
    new_password: str


class ForgotPasswordRequest(BaseModel):
    """Start of password recovery."""

    email: str


class ResetPasswordRequest(BaseModel):
    """Completion of password recovery with an emailed reset token."""

    token: str
    new_password: str


class PasswordResetResponse(BaseModel):
    """Backend acknowledgement of a password operation."""

    model_config = ConfigDict(extra="allow")

    message: str
    success: Optional[bool] = None


class LogoutResponse(BaseModel):
    """Backend acknowledgement of logout."""

    model_config = ConfigDict(extra="allow")

    message: str


class ResetTokenValidation(BaseModel):
    """Result of validating a password reset token."""

    model_config = ConfigDict(extra="allow")

    valid: bool
    message: str = ""
    detail: Optional[str] = None
