"""Object store gateway.

Maps each file operation to a single call against the storage backend.
Pure pass-through: no local state, no caching, no retries.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from uuid import uuid4

from app.schemas.files import DEFAULT_CONTENT_TYPE, FileMetadata
from app.storage.contracts import InvalidInputError, ObjectStorage, Presigner
from app.storage.factory import StorageConfig

logger = logging.getLogger(__name__)

PRESIGN_TTL_SECONDS = 3600


def generate_key(filename: str) -> str:
    """Return a collision-free key: ``<uuid4>-<filename>``."""
    return f"{uuid4()}-{filename}"


def to_local_datetime(value: datetime | str | None) -> datetime | None:
    """Convert a backend timestamp to an aware datetime in the local zone.

    Accepts aware or naive (assumed UTC) datetimes and ISO-8601 strings,
    including a trailing ``Z``. Missing or blank values map to None.
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        if value.endswith("Z"):
            value = value[:-1] + "+00:00"
        value = datetime.fromisoformat(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone()


class FileGateway:
    """Translates file operations into object-storage calls for one bucket."""

    def __init__(self, storage: ObjectStorage, presigner: Presigner, config: StorageConfig):
        self._storage = storage
        self._presigner = presigner
        self._config = config

    @property
    def bucket(self) -> str:
        return self._config.bucket

    def bucket_ready(self) -> bool:
        return self._storage.bucket_exists(self.bucket)

    def upload(self, data: bytes, filename: str | None, content_type: str | None = None) -> str:
        """Store ``data`` under a freshly generated key and return the key.

        Raises:
            InvalidInputError: Empty body or missing filename.
            StorageWriteError: Backend rejected the write.
        """
        if not filename:
            raise InvalidInputError("upload", "file name is required")
        if not data:
            raise InvalidInputError("upload", "file is empty")

        key = generate_key(filename)
        logger.info("Uploading %s (%d bytes) to bucket %s", key, len(data), self.bucket)
        self._storage.put_bytes(self.bucket, key, data, content_type=content_type)
        logger.info("Uploaded %s to bucket %s", key, self.bucket)
        return key

    def presigned_url(self, key: str) -> str:
        """Issue a fresh GET URL valid for one hour.

        The object is checked first so a missing key raises NotFoundError
        instead of yielding a URL that can never resolve.
        """
        logger.info("Generating presigned URL for %s", key)
        self._storage.stat(self.bucket, key)
        return self._presigner.presign_get(self.bucket, key, ttl_seconds=PRESIGN_TTL_SECONDS)

    def download(self, key: str) -> bytes:
        logger.info("Downloading %s from bucket %s", key, self.bucket)
        return self._storage.get_bytes(self.bucket, key)

    def list_files(self) -> list[FileMetadata]:
        """List every object in the bucket in backend order."""
        logger.info("Listing files in bucket %s", self.bucket)
        return [
            FileMetadata(
                key=obj.key,
                size=obj.size,
                content_type=obj.content_type or DEFAULT_CONTENT_TYPE,
                last_modified=to_local_datetime(obj.last_modified),
            )
            for obj in self._storage.list_objects(self.bucket)
        ]

    def delete(self, key: str) -> None:
        """Delete ``key``. Absent keys are not an error."""
        logger.info("Deleting %s from bucket %s", key, self.bucket)
        self._storage.delete(self.bucket, key)
        logger.info("Deleted %s from bucket %s", key, self.bucket)


__all__ = ["FileGateway", "PRESIGN_TTL_SECONDS", "generate_key", "to_local_datetime"]
