"""Factory for building storage instances from an explicit configuration."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlparse

from minio import Minio

from app.storage.minio_impl import MinioStorage


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Connection settings for the object-storage backend and its bucket."""

    endpoint: str
    access_key: str
    secret_key: str
    region: str
    bucket: str
    secure: bool = True


def normalize_endpoint(endpoint: str) -> tuple[str, bool]:
    """Extract host:port from endpoint URL and determine if secure (https).

    A bare host without a scheme is treated as secure.

    Returns:
        Tuple of (host:port, secure_flag)
    """
    if "://" not in endpoint:
        return endpoint.rstrip("/"), True
    parsed = urlparse(endpoint)
    secure = parsed.scheme == "https"
    host = parsed.netloc or parsed.path.rstrip("/")
    return host, secure


def build_storage(config: StorageConfig) -> MinioStorage:
    """Build MinioStorage for the given configuration.

    The region is passed through so presigning never needs a bucket-location
    lookup. No bucket is created here.
    """
    client = Minio(
        config.endpoint,
        access_key=config.access_key,
        secret_key=config.secret_key,
        secure=config.secure,
        region=config.region or None,
    )
    return MinioStorage(client)


__all__ = ["StorageConfig", "build_storage", "normalize_endpoint"]
