"""
Shared infrastructure for the PDF Chat gateway.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- backend: HTTP client for the backend session service
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .backend import (
    BackendClient,
    decode_json,
    decode_text,
    get_backend_client,
    reset_client_cache,
)
from .exceptions import (
    GatewayError,
    AuthenticationError,
    ExternalServiceError,
    UpstreamUnavailableError,
    UpstreamProtocolError,
)
from .models import UpstreamResult

__all__ = [
    "Settings",
    "get_settings",
    "BackendClient",
    "decode_json",
    "decode_text",
    "get_backend_client",
    "reset_client_cache",
    "GatewayError",
    "AuthenticationError",
    "ExternalServiceError",
    "UpstreamUnavailableError",
    "UpstreamProtocolError",
    "UpstreamResult",
]
