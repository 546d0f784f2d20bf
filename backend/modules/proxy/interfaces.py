"""
Resource proxy interface.

Documents, conversations, analytics and monitoring endpoints are all
forwarded to the backend without interpretation.
"""

from typing import Optional, Protocol, runtime_checkable

from shared.models import UpstreamResult

from .models import (
    CreateConversationRequest,
    QueryRequest,
    UpdateUserProfileRequest,
    UploadedFile,
)


@runtime_checkable
class IResourceProxy(Protocol):
    """Interface for forwarding non-auth calls to the backend."""

    async def list_documents(self, token: str, limit: int, offset: int) -> UpstreamResult:
        ...

    async def upload_pdf(self, token: str, upload: UploadedFile) -> UpstreamResult:
        ...

    async def query(self, token: str, request: QueryRequest) -> UpstreamResult:
        ...

    async def create_conversation(self, token: str, request: CreateConversationRequest) -> UpstreamResult:
        ...

    async def delete_conversation(self, token: str, conversation_id: str) -> UpstreamResult:
        ...

    async def list_messages(self, token: str, conversation_id: str, limit: int) -> UpstreamResult:
        ...

    async def delete_messages(self, token: str, conversation_id: str) -> UpstreamResult:
        ...

    async def analytics_dashboard(self, token: str, days: int) -> UpstreamResult:
        ...

    async def analytics_trends(self, token: str, days: int) -> UpstreamResult:
        ...

    async def update_profile(self, token: str, request: UpdateUserProfileRequest) -> UpstreamResult:
        ...

    async def health(self, cookie_header: Optional[str]) -> UpstreamResult:
        ...

    async def stats(self, cookie_header: Optional[str]) -> UpstreamResult:
        ...

    async def providers_status(self, cookie_header: Optional[str]) -> UpstreamResult:
        ...

    async def metrics(self, cookie_header: Optional[str]) -> UpstreamResult:
        """Prometheus text on success, a {"detail"} body otherwise."""
        ...
