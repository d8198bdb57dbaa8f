"""MinIO-backed implementation of the storage interfaces."""

from __future__ import annotations

import io
import logging
from datetime import timedelta
from typing import Iterator

from minio import Minio
from minio.error import S3Error

from app.storage.contracts import (
    NotFoundError,
    ObjectInfo,
    ObjectStorage,
    Presigner,
    StorageError,
    StorageReadError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchObject", "NotFound", "ResourceNotFound"})


def _wrap_error(
    op: str,
    bucket: str | None,
    key: str | None,
    exc: Exception,
    error_cls: type[StorageError] = StorageError,
) -> StorageError:
    if isinstance(exc, S3Error) and exc.code in _NOT_FOUND_CODES:
        error_cls = NotFoundError
    logger.warning("%s failed for %s/%s: %s", op, bucket, key, exc)
    return error_cls(op=op, bucket=bucket, key=key, message=str(exc))


class MinioStorage(ObjectStorage, Presigner):
    """Object storage abstraction backed by MinIO SDK.

    Works against AWS S3 as well as any S3-compatible endpoint.
    """

    def __init__(self, client: Minio):
        self._client = client

    # --------------------
    # ObjectStorage methods
    # --------------------
    def put_bytes(
        self,
        bucket: str,
        key: str,
        data: bytes,
        *,
        content_type: str | None = None,
    ) -> str:
        try:
            # MinIO requires a file-like object with read() method
            self._client.put_object(
                bucket_name=bucket,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type or "application/octet-stream",
            )
            return f"{bucket}/{key}"
        except Exception as exc:
            raise _wrap_error("put", bucket, key, exc, StorageWriteError) from exc

    def get_bytes(self, bucket: str, key: str) -> bytes:
        try:
            obj = self._client.get_object(bucket, key)
            try:
                return obj.read()
            finally:
                obj.close()
                obj.release_conn()
        except Exception as exc:
            raise _wrap_error("get", bucket, key, exc, StorageReadError) from exc

    def stat(self, bucket: str, key: str) -> ObjectInfo:
        try:
            obj = self._client.stat_object(bucket, key)
        except Exception as exc:
            raise _wrap_error("stat", bucket, key, exc, StorageReadError) from exc
        return ObjectInfo(
            key=obj.object_name,
            size=obj.size or 0,
            content_type=obj.content_type,
            last_modified=obj.last_modified,
        )

    def list_objects(self, bucket: str) -> list[ObjectInfo]:
        try:
            return list(self._iter_objects(bucket))
        except Exception as exc:
            raise _wrap_error("list", bucket, None, exc) from exc

    def _iter_objects(self, bucket: str) -> Iterator[ObjectInfo]:
        for obj in self._client.list_objects(bucket, recursive=True):
            if obj.is_dir:
                continue
            yield ObjectInfo(
                key=obj.object_name,
                size=obj.size or 0,
                content_type=obj.content_type,
                last_modified=obj.last_modified,
            )

    def delete(self, bucket: str, key: str) -> None:
        try:
            self._client.remove_object(bucket, key)
        except S3Error as exc:
            # Deleting an absent key is a success
            if exc.code in _NOT_FOUND_CODES:
                return
            raise _wrap_error("delete", bucket, key, exc, StorageWriteError) from exc
        except Exception as exc:
            raise _wrap_error("delete", bucket, key, exc, StorageWriteError) from exc

    def bucket_exists(self, bucket: str) -> bool:
        try:
            return self._client.bucket_exists(bucket)
        except Exception as exc:
            raise _wrap_error("bucket_exists", bucket, None, exc) from exc

    # -------------
    # Presigner API
    # -------------
    def presign_get(self, bucket: str, key: str, ttl_seconds: int = 3600) -> str:
        try:
            return self._client.get_presigned_url(
                method="GET",
                bucket_name=bucket,
                object_name=key,
                expires=timedelta(seconds=ttl_seconds),
            )
        except Exception as exc:
            raise _wrap_error("presign_get", bucket, key, exc) from exc


__all__ = ["MinioStorage"]
