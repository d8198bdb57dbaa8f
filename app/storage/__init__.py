"""Storage package: object storage abstraction."""

from app.storage.contracts import (
    InvalidInputError,
    NotFoundError,
    ObjectInfo,
    ObjectStorage,
    Presigner,
    StorageError,
    StorageReadError,
    StorageUnavailableError,
    StorageWriteError,
)
from app.storage.factory import StorageConfig, build_storage
from app.storage.minio_impl import MinioStorage

__all__ = [
    "InvalidInputError",
    "MinioStorage",
    "NotFoundError",
    "ObjectInfo",
    "ObjectStorage",
    "Presigner",
    "StorageConfig",
    "StorageError",
    "StorageReadError",
    "StorageUnavailableError",
    "StorageWriteError",
    "build_storage",
]
