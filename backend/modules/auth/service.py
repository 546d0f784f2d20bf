"""
Authentication proxy implementation.

Forwards each auth operation to the backend session service one-to-one.
No business rules live here: bodies and statuses come back untouched.
"""

import logging
from typing import Optional
from urllib.parse import quote

from shared.backend import BackendClient, decode_json, get_backend_client
from shared.models import UpstreamResult

from .interfaces import IAuthProxy
from .models import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    UserLoginRequest,
    UserSignupRequest,
)
from .exceptions import MissingAccessTokenError

logger = logging.getLogger(__name__)


class AuthProxyService(IAuthProxy):
    """
    Implementation of the auth proxy.

    Uses the shared BackendClient for transport.
    """

    def __init__(self, backend: Optional[BackendClient] = None):
        self._backend = backend or get_backend_client()

    async def login(self, request: UserLoginRequest) -> UpstreamResult:
        response = await self._backend.request("POST", "/auth/login", json=request.model_dump())
        return decode_json(response)

    async def signup(self, request: UserSignupRequest) -> UpstreamResult:
        response = await self._backend.request("POST", "/auth/signup", json=request.model_dump())
        return decode_json(response)

    async def me(self, token: str) -> UpstreamResult:
        response = await self._backend.request("GET", "/auth/me", token=token)
        return decode_json(response)

    async def refresh(self, token: str) -> UpstreamResult:
        response = await self._backend.request("GET", "/auth/refresh", token=token)
        return decode_json(response)

    async def logout(self, token: str) -> UpstreamResult:
        response = await self._backend.request("POST", "/auth/logout", token=token)
        return decode_json(response)

    async def change_password(self, token: str, request: ChangePasswordRequest) -> UpstreamResult:
        response = await self._backend.request(
            "POST", "/auth/change-password", token=token, json=request.model_dump()
        )
        return decode_json(response)

    async def forgot_password(self, request: ForgotPasswordRequest) -> UpstreamResult:
        response = await self._backend.request(
            "POST", "/auth/forgot-password", json=request.model_dump()
        )
        return decode_json(response)

    async def reset_password(self, request: ResetPasswordRequest) -> UpstreamResult:
        # Backend expects exactly these two field names
        payload = {"token": request.token, "new_password": request.new_password}
        response = await self._backend.request("POST", "/auth/reset-password", json=payload)
        return decode_json(response)

    async def validate_reset_token(self, reset_token: str) -> UpstreamResult:
        path = f"/auth/validate-reset-token/{quote(reset_token, safe='')}"
        response = await self._backend.request("GET", path)
        return decode_json(response)


def extract_access_token(result: UpstreamResult, operation: str) -> str:
    """
    Pull the access token out of a successful token response.

    Raises:
        MissingAccessTokenError: If the body has no usable token
    """
    body = result.body if isinstance(result.body, dict) else {}
    token = body.get("access_token")
    if not isinstance(token, str) or not token:
        raise MissingAccessTokenError(operation)
    return token
