"""
Fixtures for the client-side session module.
"""

import httpx
import pytest

from modules.session import AuthStore


@pytest.fixture
def local_store(backend) -> AuthStore:
    """
    Auth store talking to a scripted gateway.

    The `backend` fake answers the store's /api/auth/... calls directly,
    without the real gateway app in between.
    """
    http = httpx.AsyncClient(
        transport=httpx.MockTransport(backend.handle),
        base_url="http://testserver",
    )
    return AuthStore(http)


@pytest.fixture
def unreachable_store() -> AuthStore:
    """Auth store whose every request fails at the transport level."""

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(refuse), base_url="http://testserver")
    return AuthStore(http)
