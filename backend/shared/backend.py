"""
HTTP client factory for the backend session service.

Every proxy route reaches the backend through BackendClient. A fresh
httpx.AsyncClient is opened per call: route handlers are stateless and
must not depend on anything surviving between requests.
"""

import logging
from typing import Any, Optional

import httpx

from .config import get_settings
from .exceptions import UpstreamProtocolError, UpstreamUnavailableError
from .models import UpstreamResult

logger = logging.getLogger(__name__)

# Module-level client cache
_backend_client: Optional["BackendClient"] = None


class BackendClient:
    """
    Thin async client for the backend session service.

    Args:
        base_url: Origin of the backend, e.g. http://localhost:8000
        timeout: Transport timeout in seconds (None disables it)
        transport: Optional httpx transport, used by tests to stand in
                   for the real backend
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        files: Optional[dict[str, Any]] = None,
        cookie_header: Optional[str] = None,
    ) -> httpx.Response:
        """
        Send one request to the backend.

        Args:
            method: HTTP method
            path: Path relative to the backend origin
            token: Bearer token to attach as the Authorization header
            json: JSON body
            params: Query parameters
            files: Multipart files
            cookie_header: Raw Cookie header to forward

        Returns:
            The backend response, fully read

        Raises:
            UpstreamUnavailableError: If the backend cannot be reached
        """
        headers: dict[str, str] = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        if cookie_header:
            headers["Cookie"] = cookie_header

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(
                    method,
                    path,
                    headers=headers,
                    json=json,
                    params=params,
                    files=files,
                )
        except httpx.HTTPError as e:
            logger.warning(f"Backend request {method} {path} failed: {e.__class__.__name__}")
            raise UpstreamUnavailableError(str(e) or "Backend service unavailable")

        logger.debug(f"Backend {method} {path} -> {response.status_code}")
        return response


def decode_json(
    response: httpx.Response,
    fallback_detail: Optional[str] = None,
) -> UpstreamResult:
    """
    Decode a backend JSON response.

    Args:
        response: The backend response
        fallback_detail: If set, an error response whose body is not JSON
                         becomes {"detail": fallback_detail} instead of failing

    Raises:
        UpstreamProtocolError: If the body is not JSON and no fallback applies
    """
    try:
        body = response.json()
    except ValueError:
        if fallback_detail is not None and not response.is_success:
            return UpstreamResult(
                status_code=response.status_code,
                body={"detail": fallback_detail},
            )
        raise UpstreamProtocolError(
            f"Backend returned non-JSON body with status {response.status_code}"
        )
    return UpstreamResult(status_code=response.status_code, body=body)


def decode_text(response: httpx.Response) -> UpstreamResult:
    """Wrap a plain-text backend response."""
    return UpstreamResult(status_code=response.status_code, body=response.text)


def get_backend_client() -> BackendClient:
    """
    Get the backend client configured from settings.

    Returns:
        Cached BackendClient pointing at the configured backend URL
    """
    global _backend_client

    if _backend_client is None:
        settings = get_settings()
        _backend_client = BackendClient(
            settings.backend_url,
            timeout=settings.backend_timeout,
        )

    return _backend_client


def reset_client_cache() -> None:
    """
    Reset the cached backend client.

    Useful for testing or when configuration changes.
    """
    global _backend_client
    _backend_client = None
