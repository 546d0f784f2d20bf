"""
Error response models.

Every error the gateway produces or relays has the backend's shape.
"""

from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    detail: str


class ResetTokenErrorResponse(ErrorResponse):
    """Error answer of the reset-token check, which must also say the token is unusable."""

    valid: bool = False
    message: Optional[str] = None
