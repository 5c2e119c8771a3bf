"""Metrics and monitoring API endpoints."""

import psutil
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..config import get_settings
from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])
settings = get_settings()

# Import the global lookup engine instance
from ..engine_instance import lookup_engine


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get performance metrics",
    description="Get lookup counts by hit type, timing and memory usage"
)
async def get_metrics() -> MetricsResponse:
    """Get performance metrics for the lookup engine."""
    stats = lookup_engine.get_stats()
    
    memory_info = psutil.Process().memory_info()
    memory_usage_mb = memory_info.rss / (1024 * 1024)  # Convert to MB
    
    return MetricsResponse(
        total_queries=stats["total_queries"],
        average_response_time_ms=stats["average_execution_time_ms"],
        hit_type_counts=stats["hit_types"],
        fallback_rate=stats["rates"]["fallback"],
        memory_usage_mb=memory_usage_mb
    )


@router.get(
    "/metrics/detailed",
    summary="Get detailed metrics",
    description="Get the raw engine statistics and pipeline configuration"
)
async def get_detailed_metrics() -> JSONResponse:
    """Get raw engine statistics together with the active pipeline settings."""
    return JSONResponse(
        status_code=200,
        content={
            "engine": lookup_engine.get_stats(),
            "configuration": {
                "store_backend": settings.store_backend,
                "exact_hit_threshold": settings.exact_hit_threshold,
                "high_confidence_threshold": settings.high_confidence_threshold,
                "medium_confidence_threshold": settings.medium_confidence_threshold,
                "fuzzy_sample_limit": settings.fuzzy_sample_limit,
                "fuzzy_distance_threshold": settings.fuzzy_distance_threshold,
                "lookup_timeout_seconds": settings.lookup_timeout_seconds,
                "cache_fuzzy_index": settings.cache_fuzzy_index,
            },
        }
    )
