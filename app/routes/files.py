"""File management endpoints."""

import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, Response
from starlette.datastructures import UploadFile

from app.core.config import settings
from app.deps import get_file_gateway
from app.schemas.files import ErrorResponse, FileMetadata, UploadResult
from app.services.files import FileGateway
from app.storage.contracts import InvalidInputError

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix=f"{settings.API_PREFIX}/files",
    tags=["files"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)


def _content_disposition(key: str) -> str:
    try:
        key.encode("latin-1")
    except UnicodeEncodeError:
        return f"attachment; filename*=UTF-8''{quote(key)}"
    return f'attachment; filename="{key}"'


@router.post("/upload", response_model=UploadResult)
async def upload_file(
    request: Request,
    gateway: FileGateway = Depends(get_file_gateway),
):
    """Upload a file and return its key with a presigned download URL.

    The form is read directly so a missing, plain-text or unnamed `file`
    part is an InvalidInputError rather than a framework validation error.
    """
    form = await request.form()
    file = form.get("file")
    if not isinstance(file, UploadFile) or not file.filename:
        raise InvalidInputError("upload", "multipart field 'file' must be a named file")

    content = await file.read()
    key = await run_in_threadpool(gateway.upload, content, file.filename, file.content_type)
    url = await run_in_threadpool(gateway.presigned_url, key)

    return UploadResult(key=key, url=url)


@router.get("/download/{key:path}")
def download_file(key: str, gateway: FileGateway = Depends(get_file_gateway)):
    """Download the whole object as an attachment."""
    data = gateway.download(key)
    return Response(
        content=data,
        media_type="application/octet-stream",
        headers={"Content-Disposition": _content_disposition(key)},
    )


@router.get("/presigned-url/{key:path}", response_class=PlainTextResponse)
def get_presigned_url(key: str, gateway: FileGateway = Depends(get_file_gateway)):
    """Presigned GET URL valid for one hour."""
    return gateway.presigned_url(key)


@router.get("/list", response_model=list[FileMetadata])
def list_files(gateway: FileGateway = Depends(get_file_gateway)):
    """List all files in the bucket."""
    return gateway.list_files()


@router.delete("/delete/{key:path}", response_class=PlainTextResponse)
def delete_file(key: str, gateway: FileGateway = Depends(get_file_gateway)):
    """Delete a file. Deleting a missing key still succeeds."""
    gateway.delete(key)
    return f"File deleted successfully: {key}"
