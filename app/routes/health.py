"""Health check endpoints."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    return {"status": "ok"}


@router.get("/health/ready")
def readiness_check(request: Request):
    """Readiness probe - checks the configured bucket is reachable."""
    checks = {}
    all_ok = True

    gateway = getattr(request.app.state, "files", None)
    if gateway is not None:
        try:
            if gateway.bucket_ready():
                checks["storage"] = "ok"
            else:
                checks["storage"] = f"error: bucket {gateway.bucket} not found"
                all_ok = False
        except Exception as e:
            checks["storage"] = f"error: {e}"
            all_ok = False
    else:
        checks["storage"] = "not configured"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={"status": "ok" if all_ok else "degraded", "checks": checks},
    )
