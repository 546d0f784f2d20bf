"""
User-related endpoints.

Provides the profile update used after signup and from settings.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from modules.proxy.interfaces import IResourceProxy
from modules.proxy.models import UpdateUserProfileRequest
from ..dependencies import get_resource_proxy
from ..middleware.auth import get_session_token
from ..responses import relay

router = APIRouter()


@router.post("/profile")
async def update_profile(
    request: UpdateUserProfileRequest,
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """
    Merge fields into the current user's profile.

    Requires a session cookie.
    """
    return relay(await proxy.update_profile(token, request))
