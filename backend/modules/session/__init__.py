"""
Client-side session module.

Holds who is logged in, as far as a gateway client knows, and drives the
gateway's cookie-based auth routes on the client's behalf.

Public API:
- AuthStore: Session state plus login, signup, logout, refresh and fetch_user
- SessionFetcher: Session-scoped requests with the expired-session redirect
- AccountClient, register_account: Password and registration flows
- ErrorKind, classify_error, user_message: Failure taxonomy
"""

from .models import AuthPhase, AuthState, RegistrationResult, ResetTokenStatus
from .errors import ErrorKind, classify_error, user_message
from .exceptions import (
    SessionError,
    AuthRequestError,
    SessionExpiredError,
    StoreNotInitializedError,
)
from .store import AuthStore
from .fetch import SessionFetcher
from .account import AccountClient, register_account

__all__ = [
    # State
    "AuthPhase",
    "AuthState",
    "RegistrationResult",
    "ResetTokenStatus",
    # Errors
    "ErrorKind",
    "classify_error",
    "user_message",
    "SessionError",
    "AuthRequestError",
    "SessionExpiredError",
    "StoreNotInitializedError",
    # Clients
    "AuthStore",
    "SessionFetcher",
    "AccountClient",
    "register_account",
]
