"""
Health check API routes.

Liveness and readiness probes.
"""

from fastapi import APIRouter, Response, status

from augure.di.container import get_container

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/live", status_code=status.HTTP_200_OK)
async def liveness_probe():
    """Process is up; no dependency checks."""
    return {"status": "healthy"}


@router.get("/ready", status_code=status.HTTP_200_OK)
async def readiness_probe(response: Response):
    """
    Readiness probe endpoint.

    Returns 503 when the database is unreachable.
    """
    db_healthy = await get_container().database.health_check()

    if not db_healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "healthy" if db_healthy else "unhealthy",
        "checks": {"database": db_healthy},
    }
