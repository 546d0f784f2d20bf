"""
Authentication proxy module.

Translates between browser cookie sessions and backend bearer tokens.

Public API:
- IAuthProxy: Interface for forwarding auth operations
- SessionCookiePolicy: How the session cookie is read, issued and cleared
- Request/response models for the backend auth contract
- Auth exceptions: MissingSessionError, MissingAccessTokenError
"""

from .interfaces import IAuthProxy
from .cookies import SessionCookiePolicy, SessionGrant
from .models import (
    UserResponse,
    TokenResponse,
    UserLoginRequest,
    UserSignupRequest,
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    PasswordResetResponse,
    LogoutResponse,
    ResetTokenValidation,
)
from .exceptions import MissingSessionError, MissingAccessTokenError

__all__ = [
    # Interface
    "IAuthProxy",
    # Cookies
    "SessionCookiePolicy",
    "SessionGrant",
    # Models
    "UserResponse",
    "TokenResponse",
    "UserLoginRequest",
    "UserSignupRequest",
    "ChangePasswordRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "PasswordResetResponse",
    "LogoutResponse",
    "ResetTokenValidation",
    # Exceptions
    "MissingSessionError",
    "MissingAccessTokenError",
]
