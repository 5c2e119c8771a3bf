"""Health check API endpoints."""

import time
from datetime import datetime

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import HealthResponse

router = APIRouter(prefix="/api/v1", tags=["health"])
settings = get_settings()

# Import the global store and engine instances
from ..engine_instance import lookup_engine, word_store

# Track application start time
app_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check the health status of the dictionary service"
)
async def health_check() -> HealthResponse:
    """
    Perform a health check on the dictionary service.
    
    The service stays usable when the word store is down (lookups fall back
    to the offline word list), so a store outage reports "degraded".
    """
    dependencies = {
        "lookup_engine": "healthy",
        "word_store": "healthy",
    }
    
    try:
        await word_store.count_words()
    except Exception:
        dependencies["word_store"] = "unhealthy"
    
    status = "healthy" if all(s == "healthy" for s in dependencies.values()) else "degraded"
    
    return HealthResponse(
        status=status,
        version=settings.app_version,
        uptime=time.time() - app_start_time,
        dependencies=dependencies
    )


@router.get(
    "/health/live",
    summary="Liveness check",
    description="Check if the service is alive and responding"
)
async def liveness_check() -> JSONResponse:
    """Check if the service process is alive."""
    return JSONResponse(
        status_code=200,
        content={
            "status": "alive",
            "timestamp": datetime.utcnow().isoformat(),
            "uptime": time.time() - app_start_time,
            "total_queries": lookup_engine.get_stats()["total_queries"]
        }
    )
