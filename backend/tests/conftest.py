"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
a scripted stand-in for the backend session service, a gateway test client
wired to it, and an auth store that talks to the gateway in-process.
"""

from typing import Any, Callable, Optional, Union

import httpx
import pytest
from fastapi.testclient import TestClient

from api.app import app
from api.dependencies import ServiceContainer, get_auth_proxy, get_resource_proxy, reset_container
from modules.session import AuthStore
from shared.backend import BackendClient, reset_client_cache
from shared.config import get_settings

BACKEND_URL = "http://backend.test"
GATEWAY_URL = "http://testserver"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeBackend:
    """
    Scripted backend session service.

    Routes are keyed by (method, path). Unscripted calls answer 404, and
    every request is recorded for inspection.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Union[httpx.Response, Handler]] = {}
        self.requests: list[httpx.Request] = []

    def on(
        self,
        method: str,
        path: str,
        status: int = 200,
        json: Any = None,
        text: Optional[str] = None,
        handler: Optional[Handler] = None,
    ) -> None:
        if handler is not None:
            self.routes[(method, path)] = handler
        elif text is not None:
            self.routes[(method, path)] = httpx.Response(status, text=text)
        else:
            self.routes[(method, path)] = httpx.Response(status, json=json)

    def fail(self, method: str, path: str) -> None:
        """Make a route fail at the transport level."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        self.routes[(method, path)] = refuse

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        if callable(route):
            return route(request)
        return route

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def client(self) -> BackendClient:
        return BackendClient(BACKEND_URL, transport=httpx.MockTransport(self.handle))


def make_user(user_id: str = "user-123", **overrides) -> dict[str, Any]:
    """A backend user record."""
    user = {
        "id": user_id,
        "username": "alice",
        "email": "alice@example.com",
        "profile": {},
        "created_at": "2024-01-01T00:00:00Z",
    }
    user.update(overrides)
    return user


def make_token(access_token: str = "tok-1", user: Optional[dict] = None) -> dict[str, Any]:
    """A backend token response."""
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": 3600,
        "user": user if user is not None else make_user(),
    }


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, backend client and container around each test."""
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()
    yield
    app.dependency_overrides.clear()
    get_settings.cache_clear()
    reset_client_cache()
    reset_container()


@pytest.fixture
def backend() -> FakeBackend:
    """A fresh scripted backend."""
    return FakeBackend()


@pytest.fixture
def user_factory() -> Callable[..., dict[str, Any]]:
    return make_user


@pytest.fixture
def token_factory() -> Callable[..., dict[str, Any]]:
    return make_token


@pytest.fixture
def user() -> dict[str, Any]:
    return make_user()


@pytest.fixture
def token_body(user) -> dict[str, Any]:
    return make_token(user=user)


@pytest.fixture
def gateway(backend: FakeBackend) -> FakeBackend:
    """Point the app's proxies at the scripted backend."""
    container = ServiceContainer(backend=backend.client())
    app.dependency_overrides[get_auth_proxy] = lambda: container.auth
    app.dependency_overrides[get_resource_proxy] = lambda: container.resources
    return backend


@pytest.fixture
def client(gateway: FakeBackend) -> TestClient:
    """Gateway test client backed by the scripted backend."""
    return TestClient(app, base_url=GATEWAY_URL)


@pytest.fixture
def session_client(client: TestClient) -> TestClient:
    """Gateway test client that already holds a session cookie."""
    # The cookie jar files cookies from dotless hosts under "<host>.local"
    client.cookies.set("access_token", "tok-1", domain="testserver.local", path="/")
    return client


@pytest.fixture
def store(gateway: FakeBackend) -> AuthStore:
    """Auth store talking to the gateway app in-process."""
    http = httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url=GATEWAY_URL,
    )
    return AuthStore(http)
