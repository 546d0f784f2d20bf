"""
Client-side auth state store.

AuthStore talks to the gateway's /api/auth routes over an httpx client whose
cookie jar plays the part of the browser: the session token lives there and
is never read by this code. The store only keeps who the gateway says is
logged in.

Operations are serialized with a lock, so a late response can never
overwrite the result of a newer operation.
"""

import asyncio
import logging
from typing import Any, Callable, List, Optional, Tuple

import httpx
from pydantic import ValidationError as PydanticValidationError

from modules.auth.models import UserResponse
from shared.config import get_settings

from .exceptions import AuthRequestError, SessionExpiredError
from .models import AuthState
from .reducer import (
    AuthAction,
    OperationStarted,
    SessionCleared,
    SessionEstablished,
    UserFetchSettled,
    reduce,
)

logger = logging.getLogger(__name__)

Subscriber = Callable[[AuthState], Any]


def read_error(response: httpx.Response, default: str) -> Tuple[str, Optional[str]]:
    """
    Work out the message for a failed response.

    Returns:
        (message, detail): the backend's `detail` when present, else its raw
        text, else `default`; detail is None when the body carried none
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        detail = body.get("detail")
        if isinstance(detail, str) and detail:
            return detail, detail

    text = response.text.strip()
    return (text or default), None



def read_token_user(response: httpx.Response) -> Optional[UserResponse]:
    """
    Pull the user out of a successful token response.

    The gateway only sets the cookie once the body carries a token, so an
    unreadable user record says nothing about the session itself.

    Returns:
        The user, or None when the body has none that validates
    """
    try:
        body = response.json()
    except ValueError:
        logger.warning("Token response body is not JSON")
        return None

    if not isinstance(body, dict) or body.get("user") is None:
        return None
    try:
        return UserResponse.model_validate(body["user"])
    except PydanticValidationError as e:
        logger.warning(f"Unreadable user in token response: {e.error_count()} errors")
        return None


class AuthStore:
    """Single source of truth for the client's session state."""

    def __init__(self, client: httpx.AsyncClient):
        self._client = client
        self._state = AuthState()
        self._subscribers: List[Subscriber] = []
        self._lock = asyncio.Lock()

    @classmethod
    def connect(
        cls,
        gateway_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: Optional[float] = None,
    ) -> "AuthStore":
        """Build a store with its own client pointed at the gateway."""
        settings = get_settings()
        client = httpx.AsyncClient(
            base_url=gateway_url or settings.gateway_url,
            timeout=settings.backend_timeout if timeout is None else timeout,
            transport=transport,
        )
        return cls(client)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "AuthStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    @property
    def state(self) -> AuthState:
        return self._state

    @property
    def client(self) -> httpx.AsyncClient:
        """The cookie-carrying client, for session-scoped requests."""
        return self._client

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Call `callback` with every new state.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _dispatch(self, action: AuthAction) -> None:
        self._state = reduce(self._state, action)
        logger.debug(f"{type(action).__name__} -> {self._state.phase.value}")
        for callback in list(self._subscribers):
            callback(self._state)

    async def initialize(self) -> None:
        """Run the first user fetch. Later calls do nothing."""
        async with self._lock:
            if self._state.is_initialized:
                return
            await self._load_user()

    async def fetch_user(self) -> Optional[UserResponse]:
        """
        Ask the gateway who is logged in.

        Never raises: any failure leaves the store anonymous. The store is
        initialized once this returns.
        """
        async with self._lock:
            return await self._load_user()

    async def _load_user(self) -> Optional[UserResponse]:
        self._dispatch(OperationStarted("fetch_user"))
        user = None
        try:
            response = await self._client.get("/api/auth/me")
            if response.is_success:
                user = UserResponse.model_validate(response.json())
            else:
                logger.debug(f"No active session (status {response.status_code})")
        except httpx.HTTPError as e:
            logger.warning(f"User fetch failed: {e}")
        except (ValueError, PydanticValidationError) as e:
            logger.warning(f"Unreadable user payload: {e}")

        if user is None:
            self._dispatch(SessionCleared("fetch_user"))
        else:
            self._dispatch(SessionEstablished(user))
        self._dispatch(UserFetchSettled())
        return user

    async def login(self, email: str, password: str) -> UserResponse:
        """
        Log in and cache the user.

        Raises:
            AuthRequestError: With the backend's message when login is refused
        """
        async with self._lock:
            return await self._start_session(
                "/api/auth/login",
                {"email": email, "password": password},
                "Login failed",
            )

    async def signup(self, username: str, email: str, password: str) -> UserResponse:
        """
        Create an account and cache its user.

        Raises:
            AuthRequestError: With the backend's message when signup is refused
        """
        async with self._lock:
            return await self._start_session(
                "/api/auth/signup",
                {"username": username, "email": email, "password": password},
                "Signup failed",
            )

    async def _start_session(self, path: str, payload: dict, default_error: str) -> UserResponse:
        self._dispatch(OperationStarted(path))
        try:
            response = await self._client.post(path, json=payload)
        except httpx.HTTPError as e:
            self._dispatch(SessionCleared(path))
            raise AuthRequestError(default_error) from e

        if not response.is_success:
            self._dispatch(SessionCleared(path))
            message, detail = read_error(response, default_error)
            raise AuthRequestError(message, response.status_code, detail)

        user = read_token_user(response)
        if user is None:
            # Cookie is set; ask the gateway for the user it belongs to
            user = await self._load_user()
            if user is None:
                raise AuthRequestError(default_error, response.status_code)
            return user

        self._dispatch(SessionEstablished(user))
        return user

    async def logout(self) -> None:
        """
        End the session.

        The local state is cleared whatever the gateway answers; failures
        are only logged.
        """
        async with self._lock:
            self._dispatch(OperationStarted("logout"))
            try:
                response = await self._client.post("/api/auth/logout")
                if not response.is_success:
                    logger.info(f"Logout answered {response.status_code}")
            except httpx.HTTPError as e:
                logger.warning(f"Logout request failed: {e}")
            finally:
                self._dispatch(SessionCleared("logout"))

    async def refresh_session(self) -> None:
        """
        Renew the session cookie.

        Raises:
            SessionExpiredError: The gateway no longer accepts the session
            AuthRequestError: Any other refresh failure
        """
        async with self._lock:
            self._dispatch(OperationStarted("refresh"))
            try:
                response = await self._client.post("/api/auth/refresh")
            except httpx.HTTPError as e:
                self._dispatch(SessionCleared("refresh"))
                raise AuthRequestError("Session refresh failed") from e

            if response.status_code == 401:
                self._dispatch(SessionCleared("refresh"))
                _, detail = read_error(response, "")
                raise SessionExpiredError(detail=detail)

            if not response.is_success:
                self._dispatch(SessionCleared("refresh"))
                message, detail = read_error(response, "Session refresh failed")
                raise AuthRequestError(message, response.status_code, detail)

            user = read_token_user(response) or self._state.user
            if user is None:
                user = await self._load_user()
                if user is None:
                    raise AuthRequestError("Session refresh failed", response.status_code)
            else:
                self._dispatch(SessionEstablished(user))
