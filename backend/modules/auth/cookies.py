"""
Session cookie policy.

The session token only ever lives in an HTTP-only cookie. Login, signup
and refresh write it; logout clears it; every other route only reads it.
"""

from enum import Enum
from typing import Optional

from fastapi import Request, Response

from shared.config import Settings, get_settings


class SessionGrant(str, Enum):
    """Operations allowed to issue a session cookie."""

    LOGIN = "login"
    SIGNUP = "signup"
    REFRESH = "refresh"


class SessionCookiePolicy:
    """Reads, writes and clears the session cookie according to settings."""

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings or get_settings()

    @property
    def name(self) -> str:
        return self._settings.session_cookie_name

    def max_age(self, grant: SessionGrant) -> int:
        """Cookie lifetime in seconds for the given operation."""
        return {
            SessionGrant.LOGIN: self._settings.session_ttl_login,
            SessionGrant.SIGNUP: self._settings.session_ttl_signup,
            SessionGrant.REFRESH: self._settings.session_ttl_refresh,
        }[grant]

    def read(self, request: Request) -> Optional[str]:
        """Return the session token, or None if absent or empty."""
        return request.cookies.get(self.name) or None

    def issue(self, response: Response, token: str, grant: SessionGrant) -> None:
        """Set the session cookie to a freshly issued token."""
        self._write(response, token, self.max_age(grant))

    def clear(self, response: Response) -> None:
        """Expire the session cookie immediately."""
        self._write(response, "", 0)

    def _write(self, response: Response, value: str, max_age: int) -> None:
        response.set_cookie(
            key=self.name,
            value=value,
            max_age=max_age,
            path="/",
            httponly=True,
            secure=self._settings.is_production,
            samesite="lax",
        )


def get_cookie_policy() -> SessionCookiePolicy:
    """FastAPI dependency for the session cookie policy."""
    return SessionCookiePolicy()
