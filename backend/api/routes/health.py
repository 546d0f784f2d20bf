"""
Health and monitoring endpoints.

These are not session-gated: the browser's cookies are forwarded as-is
and the backend decides what to show.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from modules.proxy.interfaces import IResourceProxy
from ..dependencies import get_resource_proxy
from ..responses import relay

router = APIRouter()

PROMETHEUS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"


@router.get("/health")
async def health_check(
    request: Request,
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Backend health, including its dependency checks."""
    return relay(await proxy.health(request.headers.get("cookie")))


@router.get("/stats")
async def stats(
    request: Request,
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """System-wide totals and performance figures."""
    return relay(await proxy.stats(request.headers.get("cookie")))


@router.get("/providers/status")
async def providers_status(
    request: Request,
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Availability of the backend's LLM providers."""
    return relay(await proxy.providers_status(request.headers.get("cookie")))


@router.get("/metrics")
async def metrics(
    request: Request,
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> Response:
    """
    Prometheus metrics.

    Relayed as plain text on success; errors stay JSON.
    """
    result = await proxy.metrics(request.headers.get("cookie"))
    if not result.ok:
        return relay(result)
    return Response(content=result.body, media_type=PROMETHEUS_CONTENT_TYPE)
