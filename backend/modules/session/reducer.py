"""
State transitions for the auth store.

Every change to AuthState is one of the actions below, applied by reduce().
Keeping the transitions pure makes the lifecycle rules testable without
any HTTP: initialization only ever moves forward, and a cleared session
always stops loading.
"""

from dataclasses import dataclass
from typing import Union

from modules.auth.models import UserResponse

from .models import AuthState


@dataclass(frozen=True)
class OperationStarted:
    """An auth operation went out to the gateway."""

    operation: str


@dataclass(frozen=True)
class SessionEstablished:
    """The gateway confirmed a session for this user."""

    user: UserResponse


@dataclass(frozen=True)
class SessionCleared:
    """No valid session is known any more."""

    reason: str


@dataclass(frozen=True)
class UserFetchSettled:
    """A user fetch finished, successfully or not."""

    pass


AuthAction = Union[OperationStarted, SessionEstablished, SessionCleared, UserFetchSettled]


def reduce(state: AuthState, action: AuthAction) -> AuthState:
    """Return the state that follows `state` after `action`."""
    if isinstance(action, OperationStarted):
        return state.model_copy(update={"is_loading": True})
    if isinstance(action, SessionEstablished):
        return state.model_copy(update={"user": action.user, "is_loading": False})
    if isinstance(action, SessionCleared):
        return state.model_copy(update={"user": None, "is_loading": False})
    if isinstance(action, UserFetchSettled):
        return state.model_copy(update={"is_initialized": True})
    raise TypeError(f"Unknown auth action: {action!r}")
