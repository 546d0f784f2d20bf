"""
Document endpoints.

Listing, upload and question answering are forwarded to the backend
with the session cookie as bearer token.
"""

from typing import Optional

from fastapi import APIRouter, Depends, File, Query, UploadFile
from fastapi.responses import JSONResponse

from modules.proxy.interfaces import IResourceProxy
from modules.proxy.models import QueryRequest, UploadedFile
from ..dependencies import get_resource_proxy
from ..middleware.auth import get_session_token
from ..responses import detail_response, relay

router = APIRouter()


@router.get("/documents")
async def list_documents(
    limit: int = Query(default=20, ge=0),
    offset: int = Query(default=0, ge=0),
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """List the current user's documents."""
    return relay(await proxy.list_documents(token, limit, offset))


@router.post("/upload_pdf")
async def upload_pdf(
    file: Optional[UploadFile] = File(default=None),
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """
    Upload a PDF for processing.

    The multipart file part is re-sent to the backend unchanged.
    """
    if file is None:
        return detail_response("File is required", 400)

    upload = UploadedFile(
        filename=file.filename or "upload.pdf",
        content=await file.read(),
        content_type=file.content_type or "application/pdf",
    )
    return relay(await proxy.upload_pdf(token, upload))


@router.post("/query")
async def query(
    request: QueryRequest,
    token: str = Depends(get_session_token),
    proxy: IResourceProxy = Depends(get_resource_proxy),
) -> JSONResponse:
    """Ask a question about a document."""
    return relay(await proxy.query(token, request))
