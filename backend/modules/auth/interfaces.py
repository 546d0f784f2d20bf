"""
Authentication module interface.

Routes depend on IAuthProxy, not the concrete implementation.
This enables testing with mocks and swapping the backend transport.
"""

from typing import Protocol, runtime_checkable

from shared.models import UpstreamResult

from .models import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    UserLoginRequest,
    UserSignupRequest,
)


@runtime_checkable
class IAuthProxy(Protocol):
    """
    Interface for forwarding auth operations to the backend.

    Every method performs exactly one backend call and returns the decoded
    result unchanged. Transport and decoding failures surface as
    ExternalServiceError subclasses.
    """

    async def login(self, request: UserLoginRequest) -> UpstreamResult:
        """Forward credentials to /auth/login."""
        ...

    async def signup(self, request: UserSignupRequest) -> UpstreamResult:
        """Forward an account creation request to /auth/signup."""
        ...

    async def me(self, token: str) -> UpstreamResult:
        """Fetch the session's user from /auth/me."""
        ...

    async def refresh(self, token: str) -> UpstreamResult:
        """Exchange the current token for a fresh one at /auth/refresh."""
        ...

    async def logout(self, token: str) -> UpstreamResult:
        """Invalidate the token at /auth/logout."""
        ...

    async def change_password(self, token: str, request: ChangePasswordRequest) -> UpstreamResult:
        """Forward a password change to /auth/change-password."""
        ...

    async def forgot_password(self, request: ForgotPasswordRequest) -> UpstreamResult:
        """Start password recovery at /auth/forgot-password."""
        ...

    async def reset_password(self, request: ResetPasswordRequest) -> UpstreamResult:
        """Complete password recovery at /auth/reset-password."""
        ...

    async def validate_reset_token(self, reset_token: str) -> UpstreamResult:
        """Check a reset token at /auth/validate-reset-token/{token}."""
        ...
