"""
Response helpers shared by the proxy routes.

Backend answers are relayed with their original status and body; local
failures all collapse into one catch-all 500 body.
"""

from typing import Optional

from fastapi.responses import JSONResponse

from shared.models import UpstreamResult

INTERNAL_ERROR_DETAIL = "Internal server error"


def relay(result: UpstreamResult, status_code: Optional[int] = None) -> JSONResponse:
    """Build a JSON response from a backend result, keeping its status unless overridden."""
    return JSONResponse(content=result.body, status_code=status_code or result.status_code)


def detail_response(detail: str, status_code: int) -> JSONResponse:
    """Build a {"detail": ...} error response."""
    return JSONResponse(content={"detail": detail}, status_code=status_code)


def internal_error() -> JSONResponse:
    """The uniform answer to transport and decoding failures."""
    return detail_response(INTERNAL_ERROR_DETAIL, 500)
