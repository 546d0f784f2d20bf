"""
Base exception classes for the PDF Chat gateway.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application.
"""

from typing import Optional, Any


class GatewayError(Exception):
    """
    Base exception for all gateway errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class AuthenticationError(GatewayError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class ExternalServiceError(GatewayError):
    """Error communicating with an external service."""

    def __init__(
        self,
        message: str,
        service: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.service = service
        self.details["service"] = service


class UpstreamUnavailableError(ExternalServiceError):
    """The backend could not be reached or the connection failed mid-request."""

    def __init__(self, message: str = "Backend service unavailable"):
        super().__init__(message, service="backend", code="UPSTREAM_UNAVAILABLE")


class UpstreamProtocolError(ExternalServiceError):
    """The backend answered with a body the gateway cannot interpret."""

    def __init__(self, message: str = "Backend returned an unreadable response"):
        super().__init__(message, service="backend", code="UPSTREAM_PROTOCOL")
