"""
Session-aware requests for application data.

SessionFetcher is how consumers reach /api resources with the session
cookie. It owns the expired-session policy in one place: a 401 logs the
store out and, after a short delay, hands the login path to a redirect
callback.
"""

import asyncio
import logging
from typing import Any, Callable, Optional

import httpx

from shared.config import get_settings

from .exceptions import AuthRequestError, SessionExpiredError, StoreNotInitializedError
from .store import AuthStore, read_error

logger = logging.getLogger(__name__)


class SessionFetcher:
    """Make requests through an AuthStore's client."""

    def __init__(
        self,
        store: AuthStore,
        on_session_expired: Optional[Callable[[str], Any]] = None,
        redirect_delay: Optional[float] = None,
        login_path: Optional[str] = None,
    ):
        settings = get_settings()
        self._store = store
        self._on_session_expired = on_session_expired
        self._redirect_delay = (
            settings.session_expired_redirect_delay if redirect_delay is None else redirect_delay
        )
        self._login_path = login_path or settings.login_path
        self._pending_redirect: Optional[asyncio.TimerHandle] = None

    @property
    def redirect_pending(self) -> bool:
        return self._pending_redirect is not None and not self._pending_redirect.cancelled()

    def cancel_redirect(self) -> None:
        if self._pending_redirect is not None:
            self._pending_redirect.cancel()
            self._pending_redirect = None

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Send a request with the session cookie.

        Raises:
            StoreNotInitializedError: The first user fetch has not settled
            SessionExpiredError: The gateway answered 401
            AuthRequestError: No response was received
        """
        if not self._store.state.is_initialized:
            raise StoreNotInitializedError()

        try:
            response = await self._store.client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise AuthRequestError(f"{method} {path} failed") from e

        if response.status_code == 401:
            _, detail = read_error(response, "")
            await self._expire()
            raise SessionExpiredError(message="Session expired. Please log in again", detail=detail)

        return response

    async def json(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and return its JSON body.

        Raises:
            AuthRequestError: On any non-2xx answer, carrying the backend's detail
        """
        response = await self.request(method, path, **kwargs)
        if not response.is_success:
            message, detail = read_error(response, f"{method} {path} failed")
            raise AuthRequestError(message, response.status_code, detail)
        if not response.content:
            return None
        return response.json()

    async def _expire(self) -> None:
        logger.info("Session rejected by gateway, logging out")
        await self._store.logout()

        if self._on_session_expired is None or self.redirect_pending:
            return

        loop = asyncio.get_running_loop()
        self._pending_redirect = loop.call_later(
            self._redirect_delay, self._redirect
        )

    def _redirect(self) -> None:
        self._pending_redirect = None
        self._on_session_expired(self._login_path)
