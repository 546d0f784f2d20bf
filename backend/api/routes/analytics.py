"""
Analytics endpoints.

The numbers are computed by the backend; these routes only relay them.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from modules.proxy.interfaces import IResourceProxy
from ..dependencies import get_resource_proxy
from ..middleware.auth import get_session_token
from ..responses import relay

router = APIRouter()


@router.get("/dashboard")
async def dashboard(
    days: int = Query(default=7, ge=1),
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Usage dashboard for the last `days` days."""
    return relay(await proxy.analytics_dashboard(token, days))


@router.get("/trends")
async def trends(
    days: int = Query(default=7, ge=1),
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Usage trends for the last `days` days."""
    return relay(await proxy.analytics_trends(token, days))
