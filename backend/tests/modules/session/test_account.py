"""
Tests for password flows and registration.
"""

import json

import pytest

from modules.session import (
    AccountClient,
    AuthRequestError,
    ErrorKind,
    ResetTokenStatus,
    register_account,
)


class TestAccountClient:

    @pytest.mark.asyncio
    async def test_change_password(self, local_store, backend):
        backend.on("POST", "/api/auth/change-password", json={"message": "Password updated"})

        result = await AccountClient(local_store).change_password("old", "new")

        assert result == {"message": "Password updated"}
        assert json.loads(backend.last.content) == {"current_password": "old", "new_password": "new"}

    @pytest.mark.asyncio
    async def test_wrong_current_password_keeps_session(self, local_store, backend):
        backend.on(
            "POST",
            "/api/auth/change-password",
            status=400,
            json={"detail": "Current password is incorrect"},
        )

        with pytest.raises(AuthRequestError) as exc_info:
            await AccountClient(local_store).change_password("bad", "new")

        assert exc_info.value.kind == ErrorKind.INVALID_CREDENTIALS
        assert backend.calls("POST", "/api/auth/logout") == []

    @pytest.mark.asyncio
    async def test_rejected_session_logs_out(self, local_store, backend, user):
        backend.on("GET", "/api/auth/me", json=user)
        backend.on(
            "POST",
            "/api/auth/change-password",
            status=401,
            json={"detail": "Authentication required"},
        )
        backend.on("POST", "/api/auth/logout", json={"message": "ok"})
        await local_store.initialize()

        with pytest.raises(AuthRequestError) as exc_info:
            await AccountClient(local_store).change_password("old", "new")

        assert exc_info.value.kind == ErrorKind.MISSING_SESSION
        assert local_store.state.user is None
        assert len(backend.calls("POST", "/api/auth/logout")) == 1

    @pytest.mark.asyncio
    async def test_request_password_reset(self, local_store, backend):
        backend.on("POST", "/api/auth/forgot-password", status=404, json={"detail": "User not found"})

        with pytest.raises(AuthRequestError) as exc_info:
            await AccountClient(local_store).request_password_reset("bob@example.com")

        assert exc_info.value.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_reset_password(self, local_store, backend):
        backend.on("POST", "/api/auth/reset-password", json={"message": "Password reset", "success": True})

        result = await AccountClient(local_store).reset_password("reset-abc", "new")

        assert result["success"] is True
        assert json.loads(backend.last.content) == {"token": "reset-abc", "new_password": "new"}

    @pytest.mark.asyncio
    async def test_unreachable(self, unreachable_store):
        with pytest.raises(AuthRequestError) as exc_info:
            await AccountClient(unreachable_store).request_password_reset("a@example.com")

        assert exc_info.value.message == "Failed to send reset email"
        assert exc_info.value.kind == ErrorKind.TRANSPORT


class TestValidateResetToken:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status,body,expected",
        [
            (200, {"valid": True, "message": "ok"}, ResetTokenStatus.VALID),
            (400, {"valid": False, "message": "Token has expired"}, ResetTokenStatus.EXPIRED),
            (400, {"detail": "Reset token expired"}, ResetTokenStatus.EXPIRED),
            (400, {"valid": False, "message": "Token not recognised"}, ResetTokenStatus.INVALID),
            (200, {"valid": False}, ResetTokenStatus.INVALID),
            (500, {"valid": False, "detail": "Internal server error"}, ResetTokenStatus.INVALID),
        ],
    )
    async def test_status(self, local_store, backend, status, body, expected):
        backend.on("GET", "/api/auth/validate-reset-token/reset-abc", status=status, json=body)

        assert await AccountClient(local_store).validate_reset_token("reset-abc") == expected

    @pytest.mark.asyncio
    async def test_non_json(self, local_store, backend):
        backend.on("GET", "/api/auth/validate-reset-token/reset-abc", status=502, text="Bad Gateway")

        assert await AccountClient(local_store).validate_reset_token("reset-abc") == ResetTokenStatus.INVALID

    @pytest.mark.asyncio
    async def test_unreachable(self, unreachable_store):
        with pytest.raises(AuthRequestError):
            await AccountClient(unreachable_store).validate_reset_token("reset-abc")


class TestRegisterAccount:

    @pytest.mark.asyncio
    async def test_signup_and_profile(self, local_store, backend, token_body, user):
        backend.on("POST", "/api/auth/signup", status=201, json=token_body)
        backend.on("POST", "/api/user/profile", json=user)

        result = await register_account(
            local_store, "alice", "alice@example.com", "secret", first_name="Alice", last_name="Smith"
        )

        assert result.user.id == user["id"]
        assert result.profile_updated
        assert result.profile_error is None
        assert json.loads(backend.last.content) == {
            "profile_updates": {"firstName": "Alice", "lastName": "Smith"}
        }

    @pytest.mark.asyncio
    async def test_profile_failure_keeps_account(self, local_store, backend, token_body):
        backend.on("POST", "/api/auth/signup", status=201, json=token_body)
        backend.on("POST", "/api/user/profile", status=500, json={"detail": "Internal server error"})

        result = await register_account(local_store, "alice", "alice@example.com", "secret")

        assert not result.profile_updated
        assert result.profile_error == "Internal server error"
        assert local_store.state.user is not None
        assert backend.calls("POST", "/api/auth/logout") == []

    @pytest.mark.asyncio
    async def test_signup_failure_raises(self, local_store, backend):
        backend.on("POST", "/api/auth/signup", status=400, json={"detail": "Username already taken"})

        with pytest.raises(AuthRequestError) as exc_info:
            await register_account(local_store, "alice", "alice@example.com", "secret")

        assert exc_info.value.kind == ErrorKind.USERNAME_CONFLICT
        assert backend.calls("POST", "/api/user/profile") == []
