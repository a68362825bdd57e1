"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Depends, status

from kvgate.core.exceptions import StoreError
from kvgate.database.store import KeyValueStore
from kvgate.dependencies.services import get_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(store: KeyValueStore = Depends(get_store)):
    """
    Readiness check that verifies the store connection.
    Always returns 200; the body reports "degraded" if the store is down.
    """
    checks = {
        "api": "healthy",
        "store": "unknown",
    }

    try:
        if await store.ping():
            checks["store"] = "healthy"
        else:
            checks["store"] = "unhealthy: no reply"
    except StoreError as e:
        checks["store"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
