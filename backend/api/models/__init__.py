"""API models package."""

from .errors import ErrorResponse, ResetTokenErrorResponse

__all__ = [
    "ErrorResponse",
    "ResetTokenErrorResponse",
]
