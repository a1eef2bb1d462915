"""Health check API endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..index_holder import IndexHolder
from ..models.response import HealthResponse
from .search import get_index_holder

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the documentation search service"
)
async def health_check(holder: IndexHolder = Depends(get_index_holder)) -> HealthResponse:
    """
    Report service health.

    An empty index is reported as degraded: the service answers queries but
    has nothing to find.
    """
    stats = holder.index.get_stats()
    status = "healthy" if stats["total_entries"] > 0 else "degraded"

    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        index_stats=stats,
    )


@router.get(
    "/health/ready",
    summary="Readiness check",
    description="Check if the service is ready to accept requests"
)
async def readiness_check(holder: IndexHolder = Depends(get_index_holder)) -> JSONResponse:
    """Report readiness along with the current index statistics."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "ready",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "index_stats": holder.index.get_stats(),
        }
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Report that the process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "uptime": time.time() - app_start_time,
        }
    )
