"""Storage interfaces, value types and error types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Protocol, runtime_checkable


class StorageError(Exception):
    """Wraps underlying storage exceptions with operation context."""

    def __init__(self, op: str, bucket: str | None, key: str | None, message: str):
        self.op = op
        self.bucket = bucket
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:  # pragma: no cover - trivial string formatting
        bucket_repr = self.bucket or "<unknown>"
        key_repr = self.key or "<unknown>"
        return f"{self.op} failed for bucket={bucket_repr} key={key_repr}: {self.message}"


class NotFoundError(StorageError):
    """The requested key does not exist in the bucket."""


class StorageReadError(StorageError):
    """Backend failure while reading object bytes."""


class StorageWriteError(StorageError):
    """Backend failure while writing or deleting an object."""


class StorageUnavailableError(StorageError):
    """No backend is configured for this process."""


class InvalidInputError(Exception):
    """Rejected payload. Raised before any backend call is made."""

    def __init__(self, op: str, message: str):
        self.op = op
        self.message = message
        super().__init__(f"{op} rejected: {message}")


@dataclass(frozen=True, slots=True)
class ObjectInfo:
    """Backend listing entry, decoupled from any SDK type."""

    key: str
    size: int
    content_type: str | None = None
    last_modified: datetime | str | None = None


@runtime_checkable
class ObjectStorage(Protocol):
    """Contract for object storage implementations."""

    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str | None = None,
    ) -> str:
        ...

    def get_bytes(self, bucket: str, key: str) -> bytes:
        ...

    def stat(self, bucket: str, key: str) -> ObjectInfo:
        ...

    def list_objects(self, bucket: str) -> Iterable[ObjectInfo]:
        ...

    def delete(self, bucket: str, key: str) -> None:
        ...

    def bucket_exists(self, bucket: str) -> bool:
        ...


@runtime_checkable
class Presigner(Protocol):
    """Presigner interface for generating temporary URLs."""

    def presign_get(self, bucket: str, key: str, ttl_seconds: int = 3600) -> str:
        ...


__all__ = [
    "InvalidInputError",
    "NotFoundError",
    "ObjectInfo",
    "ObjectStorage",
    "Presigner",
    "StorageError",
    "StorageReadError",
    "StorageUnavailableError",
    "StorageWriteError",
]
