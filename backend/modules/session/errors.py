"""
Error taxonomy for auth failures.

The backend only returns free-text `detail` strings. This module is the one
place that turns a status code and a detail into an ErrorKind and a message
fit to show a user; consumers match on the kind, never on the text.
"""

from enum import Enum
from typing import Optional

MISSING_SESSION_DETAIL = "authentication required"


class ErrorKind(str, Enum):
    """Why an auth-related request failed."""

    MISSING_SESSION = "missing_session"
    INVALID_CREDENTIALS = "invalid_credentials"
    SAME_PASSWORD = "same_password"
    NOT_FOUND = "not_found"
    EMAIL_CONFLICT = "email_conflict"
    USERNAME_CONFLICT = "username_conflict"
    RATE_LIMITED = "rate_limited"
    SESSION_EXPIRED = "session_expired"
    TRANSPORT = "transport"
    UNKNOWN = "unknown"

    @property
    def forces_logout(self) -> bool:
        """Whether the session must be dropped and the user sent to login."""
        return self in (ErrorKind.MISSING_SESSION, ErrorKind.SESSION_EXPIRED)


_MESSAGES = {
    ErrorKind.MISSING_SESSION: "Please log in to continue",
    ErrorKind.INVALID_CREDENTIALS: "Incorrect email or password",
    ErrorKind.SAME_PASSWORD: "New password must be different from current password",
    ErrorKind.NOT_FOUND: "No account found with that email",
    ErrorKind.EMAIL_CONFLICT: "An account with this email already exists",
    ErrorKind.USERNAME_CONFLICT: "This username is already taken",
    ErrorKind.RATE_LIMITED: "Too many attempts. Please wait a moment and try again",
    ErrorKind.SESSION_EXPIRED: "Session expired. Please log in again",
    ErrorKind.TRANSPORT: "Connection error. Please check your internet",
    ErrorKind.UNKNOWN: "Something went wrong. Please try again",
}


def classify_error(status_code: Optional[int], detail: Optional[str]) -> ErrorKind:
    """
    Classify a failed auth request.

    Args:
        status_code: HTTP status, or None if no response was received
        detail: The backend's `detail` text, if any

    Returns:
        The matching ErrorKind; rules are checked in order, first match wins
    """
    if status_code is None:
        return ErrorKind.TRANSPORT

    text = (detail or "").strip().lower()

    if status_code == 401 and text == MISSING_SESSION_DETAIL:
        return ErrorKind.MISSING_SESSION
    if status_code == 429 or "rate limit" in text:
        return ErrorKind.RATE_LIMITED
    if any(marker in text for marker in ("incorrect", "wrong", "invalid credentials")):
        return ErrorKind.INVALID_CREDENTIALS
    if "same" in text:
        return ErrorKind.SAME_PASSWORD
    if "already exists" in text or "taken" in text:
        return ErrorKind.EMAIL_CONFLICT if "email" in text else ErrorKind.USERNAME_CONFLICT
    if any(marker in text for marker in ("not found", "doesn't exist", "does not exist")):
        return ErrorKind.NOT_FOUND
    if status_code == 401 or "unauthorized" in text:
        return ErrorKind.SESSION_EXPIRED
    if status_code >= 500 and text in ("", "internal server error"):
        return ErrorKind.TRANSPORT
    return ErrorKind.UNKNOWN


def user_message(kind: ErrorKind) -> str:
    """Message to show the user for a failure of this kind."""
    return _MESSAGES[kind]
