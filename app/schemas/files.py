"""API models for the file endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class FileMetadata(BaseModel):
    """Live projection of one object in the bucket."""

    key: str
    size: int = Field(ge=0)
    content_type: str = Field(default=DEFAULT_CONTENT_TYPE, alias="contentType")
    last_modified: Optional[datetime] = Field(default=None, alias="lastModified")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class UploadResult(BaseModel):
    """Returned once per successful upload."""

    key: str
    url: str
    message: str = "File uploaded successfully"


class ErrorResponse(BaseModel):
    """Error body shared by every file endpoint."""

    message: str
    key: Optional[str] = None
