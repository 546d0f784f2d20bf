"""
Resource proxy request models.

Only the fields the browser is known to send are declared; anything else
is passed through so the backend stays the sole judge of the payload.
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field


class QueryRequest(BaseModel):
    """A question about an uploaded document."""

    model_config = ConfigDict(extra="allow")

    query: str
    pdf_id: str
    conversation_id: Optional[str] = None
    top_k: Optional[int] = None
    use_reranking: Optional[bool] = None
    prefer_fast_response: Optional[bool] = None
    preferred_provider: Optional[str] = None
    preferred_model: Optional[str] = None


class CreateConversationRequest(BaseModel):
    """Start a conversation about a document."""

    model_config = ConfigDict(extra="allow")

    document_id: str
    title: Optional[str] = None


class UpdateUserProfileRequest(BaseModel):
    """Partial update of the free-form user profile."""

    profile_updates: dict[str, Any] = Field(default_factory=dict)


class UploadedFile(BaseModel):
    """A file received from the browser, ready to forward."""

    filename: str
    content: bytes
    content_type: str = "application/pdf"
