"""Shared dependencies for FastAPI routes."""

from __future__ import annotations

from fastapi import Request

from app.services.files import FileGateway
from app.storage.contracts import StorageUnavailableError


def get_file_gateway(request: Request) -> FileGateway:
    """Return the gateway built by the application lifespan.

    Storage without credentials is left unconfigured rather than failing
    startup, so routes answer 503 in that case.
    """
    gateway = getattr(request.app.state, "files", None)
    if gateway is None:
        raise StorageUnavailableError("configure", None, None, "Storage not configured")
    return gateway


__all__ = ["get_file_gateway"]
