"""Health & Readiness Probes.

Invariants:
    - GET /health always returns 200 if the process is up (liveness)
    - GET /health/ready returns 503 until storage is initialized (readiness)
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from tcg_api.config import get_settings
from tcg_api.infrastructure import memory_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
@router.get("/", include_in_schema=False)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "tcg-api",
        "env": get_settings().env,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — storage must be initialized."""
    if memory_store.storage is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
