"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.logging import setup_logging
from app.routes import files_router, health_router
from app.schemas.files import ErrorResponse
from app.services.files import FileGateway
from app.storage.contracts import (
    InvalidInputError,
    NotFoundError,
    StorageError,
    StorageUnavailableError,
)
from app.storage.factory import build_storage

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize resources on startup."""
    setup_logging(settings.LOG_LEVEL)

    if settings.storage_configured:
        config = settings.storage_config()
        storage = build_storage(config)
        app.state.files = FileGateway(storage, storage, config)
        logger.info("Object storage configured for bucket %s at %s", config.bucket, config.endpoint)
    else:
        logger.warning("Object storage credentials missing; file endpoints disabled")
        app.state.files = None

    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)


def _error(status_code: int, message: str, key: str | None = None) -> JSONResponse:
    body = ErrorResponse(message=message, key=key)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return _error(400, exc.message)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(404, f"File not found: {exc.key}", exc.key)


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    return _error(503, exc.message)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error("Storage %s failed: %s", exc.op, exc.message)
    return _error(500, exc.message, exc.key)


# Register routers
app.include_router(health_router)
app.include_router(files_router)
