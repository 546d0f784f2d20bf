"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from typing import Any
from pydantic import BaseModel, Field


class UpstreamResult(BaseModel):
    """
    A decoded response from the backend service.

    Proxy routes build their HTTP response from this, so nothing about
    the original httpx response leaks past the service layer.
    """

    status_code: int = Field(..., description="HTTP status returned by the backend")
    body: Any = Field(None, description="Decoded JSON body (or text for plain responses)")

    model_config = {"frozen": True}

    @property
    def ok(self) -> bool:
        """Whether the backend answered with a 2xx status."""
        return 200 <= self.status_code < 300
