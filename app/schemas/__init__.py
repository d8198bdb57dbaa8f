"""API schemas for file management."""

from app.schemas.files import (
    DEFAULT_CONTENT_TYPE,
    ErrorResponse,
    FileMetadata,
    UploadResult,
)

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "ErrorResponse",
    "FileMetadata",
    "UploadResult",
]
