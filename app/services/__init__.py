"""Business logic services."""

from app.services.files import (
    PRESIGN_TTL_SECONDS,
    FileGateway,
    generate_key,
    to_local_datetime,
)

__all__ = [
    "FileGateway",
    "PRESIGN_TTL_SECONDS",
    "generate_key",
    "to_local_datetime",
]
