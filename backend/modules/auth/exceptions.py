"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import AuthenticationError, UpstreamProtocolError


class MissingSessionError(AuthenticationError):
    """Raised when a cookie-gated route is called without a session cookie."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="MISSING_SESSION")


class MissingAccessTokenError(UpstreamProtocolError):
    """Raised when a successful token response carries no access token."""

    def __init__(self, operation: str):
        super().__init__(f"Backend {operation} response has no access_token")
        self.details["operation"] = operation
