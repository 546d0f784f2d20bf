"""
Account management flows built on the auth store.

Password change and recovery go through the same gateway routes as the
rest of the session; registration adds the profile step that follows a
signup.
"""

import logging
from typing import Any, Dict
from urllib.parse import quote

import httpx

from .exceptions import AuthRequestError
from .models import RegistrationResult, ResetTokenStatus
from .store import AuthStore, read_error

logger = logging.getLogger(__name__)


class AccountClient:
    """Password flows for the current client."""

    def __init__(self, store: AuthStore):
        self._store = store

    async def _post(self, path: str, payload: Dict[str, Any], default_error: str) -> Dict[str, Any]:
        try:
            response = await self._store.client.post(path, json=payload)
        except httpx.HTTPError as e:
            raise AuthRequestError(default_error) from e

        if not response.is_success:
            message, detail = read_error(response, default_error)
            error = AuthRequestError(message, response.status_code, detail)
            if error.kind.forces_logout:
                await self._store.logout()
            raise error

        try:
            body = response.json()
        except ValueError:
            body = {}
        return body if isinstance(body, dict) else {}

    async def change_password(self, current_password: str, new_password: str) -> Dict[str, Any]:
        """
        Change the logged-in user's password.

        A rejected session logs the store out before the error is raised.
        """
        return await self._post(
            "/api/auth/change-password",
            {"current_password": current_password, "new_password": new_password},
            "Failed to change password",
        )

    async def request_password_reset(self, email: str) -> Dict[str, Any]:
        return await self._post(
            "/api/auth/forgot-password",
            {"email": email},
            "Failed to send reset email",
        )

    async def reset_password(self, token: str, new_password: str) -> Dict[str, Any]:
        return await self._post(
            "/api/auth/reset-password",
            {"token": token, "new_password": new_password},
            "Failed to reset password",
        )

    async def validate_reset_token(self, token: str) -> ResetTokenStatus:
        """
        Check a reset token before showing the new-password form.

        Raises:
            AuthRequestError: The gateway could not be reached
        """
        try:
            response = await self._store.client.get(
                f"/api/auth/validate-reset-token/{quote(token, safe='')}"
            )
        except httpx.HTTPError as e:
            raise AuthRequestError("Failed to validate reset token") from e

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        if response.is_success and body.get("valid") is True:
            return ResetTokenStatus.VALID

        reason = " ".join(
            str(body.get(key) or "") for key in ("message", "detail")
        ).lower()
        if "expired" in reason:
            return ResetTokenStatus.EXPIRED
        return ResetTokenStatus.INVALID


async def register_account(
    store: AuthStore,
    username: str,
    email: str,
    password: str,
    first_name: str = "",
    last_name: str = "",
) -> RegistrationResult:
    """
    Sign up and then save the user's name on their profile.

    The account stands once signup succeeds. A failed profile update is
    logged and reported on the result, never raised.

    Raises:
        AuthRequestError: Signup itself was refused
    """
    user = await store.signup(username, email, password)

    payload = {"profile_updates": {"firstName": first_name, "lastName": last_name}}
    try:
        response = await store.client.post("/api/user/profile", json=payload)
    except httpx.HTTPError as e:
        logger.warning(f"Profile update after signup failed: {e}")
        return RegistrationResult(user=user, profile_error=str(e) or "Connection error")

    if not response.is_success:
        message, _ = read_error(response, "Profile update failed")
        logger.warning(f"Profile update after signup answered {response.status_code}: {message}")
        return RegistrationResult(user=user, profile_error=message)

    return RegistrationResult(user=user, profile_updated=True)
