"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /api/health/ always returns 200 if process is up (liveness)
    - GET /api/health/ready returns 503 until the resource registry is loaded (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from app import __version__
from app.config import get_settings
from app.infrastructure import resource_registry

logger = logging.getLogger(__name__)
router = APIRouter(prefix=f"{get_settings().api_prefix}/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "responserift-api",
        "version": __version__,
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — fixtures loaded into the registry."""
    registry = resource_registry.registry
    if registry is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "fixtures_not_loaded",
            },
        )
    return {"status": "ready", "checks": {"collections": registry.counts()}}
