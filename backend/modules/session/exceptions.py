"""
Session module exceptions.

Raised by the auth store and its helpers to the code driving them.
"""

from typing import Optional

from shared.exceptions import GatewayError

from .errors import ErrorKind, classify_error


class SessionError(GatewayError):
    """Base class for client-side session failures."""

    pass


class AuthRequestError(SessionError):
    """
    A request made on behalf of the session failed.

    The message keeps the backend's own wording so callers can show it;
    `kind` is the classified cause to branch on.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ):
        super().__init__(
            message,
            code="AUTH_REQUEST_FAILED",
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.detail = detail

    @property
    def kind(self) -> ErrorKind:
        return classify_error(self.status_code, self.detail or self.message)


class SessionExpiredError(AuthRequestError):
    """The gateway rejected the session; the user must log in again."""

    def __init__(
        self,
        message: str = "Session refresh failed - please log in again",
        detail: Optional[str] = None,
    ):
        super().__init__(message, status_code=401, detail=detail)
        self.code = "SESSION_EXPIRED"

    @property
    def kind(self) -> ErrorKind:
        return ErrorKind.SESSION_EXPIRED


class StoreNotInitializedError(SessionError):
    """A session-scoped fetch was attempted before the first user fetch settled."""

    def __init__(self, message: str = "Auth store is not initialized yet"):
        super().__init__(message, code="STORE_NOT_INITIALIZED")
