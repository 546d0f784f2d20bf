"""
Resource proxy module.

Forwards documents, conversations, analytics, profile and monitoring
calls to the backend.

Public API:
- IResourceProxy: Interface for forwarding resource operations
- Request models: QueryRequest, CreateConversationRequest,
  UpdateUserProfileRequest, UploadedFile
"""

from .interfaces import IResourceProxy
from .models import (
    QueryRequest,
    CreateConversationRequest,
    UpdateUserProfileRequest,
    UploadedFile,
)

__all__ = [
    "IResourceProxy",
    "QueryRequest",
    "CreateConversationRequest",
    "UpdateUserProfileRequest",
    "UploadedFile",
]
