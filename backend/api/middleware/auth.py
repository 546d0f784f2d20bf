"""
Session cookie authentication.

Turns the browser's HTTP-only session cookie into the bearer token the
backend expects. Nothing is validated here: the backend owns that decision.
"""

from typing import Optional
from fastapi import Depends, Request

from modules.auth.cookies import SessionCookiePolicy, get_cookie_policy
from modules.auth.exceptions import MissingSessionError


async def get_session_token(
    request: Request,
    policy: SessionCookiePolicy = Depends(get_cookie_policy),
) -> str:
    """
    Dependency that requires a session cookie.

    Use this for routes that forward an authenticated call. Without the
    cookie the request is answered 401 before any backend call is made.

    Usage:
        @router.get("/protected")
        async def protected_route(token: str = Depends(get_session_token)):
            ...
    """
    token = policy.read(request)
    if token is None:
        raise MissingSessionError()
    return token


async def get_optional_session_token(
    request: Request,
    policy: SessionCookiePolicy = Depends(get_cookie_policy),
) -> Optional[str]:
    """
    Dependency that returns the session token if there is one.

    Use this for routes that must answer even without a session,
    such as logout clearing a stale cookie.
    """
    return policy.read(request)

