"""
Session module data models.

AuthState is the single snapshot every consumer reads. It is immutable:
a new snapshot is produced for each transition.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field

from modules.auth.models import UserResponse


class AuthPhase(str, Enum):
    """Where the store is in its lifecycle."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    AUTHENTICATED = "authenticated"
    ANONYMOUS = "anonymous"


class AuthState(BaseModel):
    """Who is logged in, as far as this client knows."""

    user: Optional[UserResponse] = Field(None, description="Cached user, None without a session")
    is_loading: bool = Field(default=False, description="An auth operation is in flight")
    is_initialized: bool = Field(default=False, description="The first user fetch has settled")

    model_config = {"frozen": True}

    @property
    def phase(self) -> AuthPhase:
        if self.user is not None:
            return AuthPhase.AUTHENTICATED
        if not self.is_initialized:
            return AuthPhase.INITIALIZING if self.is_loading else AuthPhase.UNINITIALIZED
        return AuthPhase.ANONYMOUS

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None


class ResetTokenStatus(str, Enum):
    """Outcome of checking a password reset token."""

    VALID = "valid"
    EXPIRED = "expired"
    INVALID = "invalid"


class RegistrationResult(BaseModel):
    """Outcome of signup followed by profile completion."""

    user: UserResponse
    profile_updated: bool = False
    profile_error: Optional[str] = None
