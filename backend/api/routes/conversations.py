"""
Conversation endpoints.

Provides create, delete and message history for chat conversations.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from modules.proxy.interfaces import IResourceProxy
from modules.proxy.models import CreateConversationRequest
from ..dependencies import get_resource_proxy
from ..middleware.auth import get_session_token
from ..responses import detail_response, relay

router = APIRouter()


@router.post("/create")
async def create_conversation(
    request: CreateConversationRequest,
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Start a new conversation about a document."""
    return relay(await proxy.create_conversation(token, request))


@router.delete("/{conversation_id}")
async def delete_conversation(
    conversation_id: str,
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Delete a conversation."""
    result = await proxy.delete_conversation(token, conversation_id)
    if not result.ok:
        return relay(result)
    return detail_response("Conversation deleted successfully", 200)


@router.get("/{conversation_id}/messages")
async def list_messages(
    conversation_id: str,
    limit: int = Query(default=50, ge=1),
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Get a conversation's message history."""
    return relay(await proxy.list_messages(token, conversation_id, limit))


@router.delete("/{conversation_id}/messages")
async def delete_messages(
    conversation_id: str,
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Delete a conversation's messages."""
    result = await proxy.delete_messages(token, conversation_id)
    if not result.ok:
        return relay(result)
    return detail_response("Message deleted successfully", 200)
