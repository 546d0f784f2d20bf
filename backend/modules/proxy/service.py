"""
Resource proxy implementation.

Each method is one backend call. Monitoring endpoints forward the browser's
cookies verbatim instead of a bearer token and tolerate non-JSON error bodies.
"""

from typing import Optional
from urllib.parse import quote

import httpx

from shared.backend import BackendClient, decode_json, decode_text, get_backend_client
from shared.models import UpstreamResult

from .interfaces import IResourceProxy
from .models import (
    CreateConversationRequest,
    QueryRequest,
    UpdateUserProfileRequest,
    UploadedFile,
)


class ResourceProxyService(IResourceProxy):
    """Implementation of the resource proxy over the shared BackendClient."""

    def __init__(self, backend: Optional[BackendClient] = None):
        self._backend = backend or get_backend_client()

    # Documents

    async def list_documents(self, token: str, limit: int, offset: int) -> UpstreamResult:
        response = await self._backend.request(
            "GET", "/documents/", token=token, params={"limit": limit, "offset": offset}
        )
        return decode_json(response)

    async def upload_pdf(self, token: str, upload: UploadedFile) -> UpstreamResult:
        files = {"file": (upload.filename, upload.content, upload.content_type)}
        response = await self._backend.request("POST", "/upload_pdf/", token=token, files=files)
        return decode_json(response)

    async def query(self, token: str, request: QueryRequest) -> UpstreamResult:
        response = await self._backend.request(
            "POST", "/query/", token=token, json=request.model_dump(exclude_unset=True)
        )
        return decode_json(response)

    # Conversations

    async def create_conversation(self, token: str, request: CreateConversationRequest) -> UpstreamResult:
        response = await self._backend.request(
            "POST", "/conversations/", token=token, json=request.model_dump(exclude_unset=True)
        )
        return decode_json(response)

    async def delete_conversation(self, token: str, conversation_id: str) -> UpstreamResult:
        response = await self._backend.request(
            "DELETE", f"/conversations/{_segment(conversation_id)}", token=token
        )
        return _decode_delete(response)

    async def list_messages(self, token: str, conversation_id: str, limit: int) -> UpstreamResult:
        response = await self._backend.request(
            "GET",
            f"/conversations/{_segment(conversation_id)}/messages",
            token=token,
            params={"limit": limit},
        )
        return decode_json(response)

    async def delete_messages(self, token: str, conversation_id: str) -> UpstreamResult:
        response = await self._backend.request(
            "DELETE", f"/conversations/{_segment(conversation_id)}/messages", token=token
        )
        return _decode_delete(response)

    # Analytics

    async def analytics_dashboard(self, token: str, days: int) -> UpstreamResult:
        response = await self._backend.request(
            "GET", "/analytics/dashboard", token=token, params={"days": days}
        )
        if response.is_success:
            return decode_json(response)
        result = decode_json(response, fallback_detail="Failed to fetch analytics")
        detail = result.body.get("detail") if isinstance(result.body, dict) else None
        return UpstreamResult(
            status_code=result.status_code,
            body={"detail": detail or "Failed to fetch analytics"},
        )

    async def analytics_trends(self, token: str, days: int) -> UpstreamResult:
        response = await self._backend.request(
            "GET", "/analytics/trends", token=token, params={"days": days}
        )
        if response.is_success:
            return decode_json(response)
        return UpstreamResult(
            status_code=response.status_code,
            body={"detail": "Failed to fetch trends"},
        )

    # User

    async def update_profile(self, token: str, request: UpdateUserProfileRequest) -> UpstreamResult:
        response = await self._backend.request(
            "POST", "/user/profile", token=token, json=request.model_dump()
        )
        return decode_json(response)

    # Monitoring

    async def health(self, cookie_header: Optional[str]) -> UpstreamResult:
        response = await self._backend.request("GET", "/health", cookie_header=cookie_header)
        return decode_json(response, fallback_detail="Health check failed")

    async def stats(self, cookie_header: Optional[str]) -> UpstreamResult:
        response = await self._backend.request("GET", "/stats", cookie_header=cookie_header)
        return decode_json(response, fallback_detail="Stats fetch failed")

    async def providers_status(self, cookie_header: Optional[str]) -> UpstreamResult:
        response = await self._backend.request(
            "GET", "/providers/status", cookie_header=cookie_header
        )
        return decode_json(response, fallback_detail="Providers status fetch failed")

    async def metrics(self, cookie_header: Optional[str]) -> UpstreamResult:
        response = await self._backend.request("GET", "/metrics", cookie_header=cookie_header)
        if response.is_success:
            return decode_text(response)
        return decode_json(response, fallback_detail="Metrics fetch failed")


def _segment(value: str) -> str:
    """Quote a value for use as a single path segment."""
    return quote(value, safe="")


def _decode_delete(response: httpx.Response) -> UpstreamResult:
    # Successful deletes may come back empty (204)
    if response.is_success:
        return UpstreamResult(status_code=response.status_code, body=None)
    return decode_json(response)
