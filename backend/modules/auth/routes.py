"""
Auth proxy endpoints.

One route per backend auth operation. Each reads the session cookie,
forwards the call with the cookie as a bearer token, and relays the
backend's JSON and status. Only login, signup, refresh and logout touch
the cookie.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.dependencies import get_auth_proxy
from api.models import ResetTokenErrorResponse
from api.middleware.auth import get_optional_session_token, get_session_token
from api.responses import INTERNAL_ERROR_DETAIL, detail_response, internal_error, relay
from shared.exceptions import ExternalServiceError

from .cookies import SessionCookiePolicy, SessionGrant, get_cookie_policy
from .exceptions import MissingSessionError
from .interfaces import IAuthProxy
from .models import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LogoutResponse,
    PasswordResetResponse,
    ResetPasswordRequest,
    ResetTokenValidation,
    TokenResponse,
    UserLoginRequest,
    UserResponse,
    UserSignupRequest,
)
from .service import extract_access_token

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", responses={200: {"model": TokenResponse}})
async def login(
    request: UserLoginRequest,
    proxy: IAuthProxy = Depends(get_auth_proxy),
    cookies: SessionCookiePolicy = Depends(get_cookie_policy),
) -> JSONResponse:
    """
    Log in with email and password.

    On success the backend's token becomes the session cookie.
    Failures are relayed unchanged and leave cookies alone.
    """
    result = await proxy.login(request)
    if not result.ok:
        return relay(result)

    token = extract_access_token(result, "login")
    response = relay(result)
    cookies.issue(response, token, SessionGrant.LOGIN)
    return response


@router.post("/signup", responses={201: {"model": TokenResponse}})
async def signup(
    request: UserSignupRequest,
    proxy: IAuthProxy = Depends(get_auth_proxy),
    cookies: SessionCookiePolicy = Depends(get_cookie_policy),
) -> JSONResponse:
    """
    Create an account and start a session for it.

    Answers 201 on success.
    """
    result = await proxy.signup(request)
    if not result.ok:
        return relay(result)

    token = extract_access_token(result, "signup")
    response = relay(result, status_code=201)
    cookies.issue(response, token, SessionGrant.SIGNUP)
    return response


@router.get("/me", responses={200: {"model": UserResponse}})
async def me(
    token: str = Depends(get_session_token),
    proxy: IAuthProxy = Depends(get_auth_proxy),
) -> JSONResponse:
    """Return the current session's user."""
    return relay(await proxy.me(token))


@router.api_route(
    "/refresh",
    methods=["GET", "POST"],
    responses={200: {"model": TokenResponse}},
)
async def refresh(
    token: str = Depends(get_session_token),
    proxy: IAuthProxy = Depends(get_auth_proxy),
    cookies: SessionCookiePolicy = Depends(get_cookie_policy),
) -> JSONResponse:
    """
    Exchange the session token for a fresh one.

    A rejected refresh is relayed but does not clear the cookie;
    the client is expected to log out explicitly.
    """
    result = await proxy.refresh(token)
    if not result.ok:
        return relay(result)

    new_token = extract_access_token(result, "refresh")
    response = relay(result)
    cookies.issue(response, new_token, SessionGrant.REFRESH)
    return response


@router.post("/logout", responses={200: {"model": LogoutResponse}})
async def logout(
    token: Optional[str] = Depends(get_optional_session_token),
    proxy: IAuthProxy = Depends(get_auth_proxy),
    cookies: SessionCookiePolicy = Depends(get_cookie_policy),
) -> JSONResponse:
    """
    End the session.

    Whatever happens upstream, the response expires the session cookie.
    """
    if token is None:
        response = detail_response(MissingSessionError().message, 401)
    else:
        try:
            response = relay(await proxy.logout(token))
        except ExternalServiceError as e:
            logger.warning(f"Backend logout failed, clearing cookie anyway: {e.code}")
            response = internal_error()

    cookies.clear(response)
    return response


@router.post("/change-password", responses={200: {"model": PasswordResetResponse}})
async def change_password(
    request: ChangePasswordRequest,
    token: str = Depends(get_session_token),
    proxy: IAuthProxy = Depends(get_auth_proxy),
) -> JSONResponse:
    """Change the current user's password."""
    return relay(await proxy.change_password(token, request))


@router.post("/forgot-password", responses={200: {"model": PasswordResetResponse}})
async def forgot_password(
    request: ForgotPasswordRequest,
    proxy: IAuthProxy = Depends(get_auth_proxy),
) -> JSONResponse:
    """
    Start password recovery.

    Whether unknown accounts are disclosed is up to the backend.
    """
    return relay(await proxy.forgot_password(request))


@router.post("/reset-password", responses={200: {"model": PasswordResetResponse}})
async def reset_password(
    request: ResetPasswordRequest,
    proxy: IAuthProxy = Depends(get_auth_proxy),
) -> JSONResponse:
    """Set a new password using a reset token."""
    return relay(await proxy.reset_password(request))


@router.get(
    "/validate-reset-token/{reset_token}",
    responses={
        200: {"model": ResetTokenValidation},
        500: {"model": ResetTokenErrorResponse},
    },
)
async def validate_reset_token(
    reset_token: str,
    proxy: IAuthProxy = Depends(get_auth_proxy),
) -> JSONResponse:
    """
    Check whether a reset token is still usable.

    Local failures answer with an explicit invalid result rather than
    the generic error body, so the reset page can always render.
    """
    try:
        return relay(await proxy.validate_reset_token(reset_token))
    except ExternalServiceError as e:
        logger.warning(f"Reset token validation failed: {e.code}")
        body = ResetTokenErrorResponse(
            valid=False,
            message=INTERNAL_ERROR_DETAIL,
            detail=INTERNAL_ERROR_DETAIL,
        )
        return JSONResponse(content=body.model_dump(), status_code=500)
