"""Main FastAPI application for the Hindi Dictionary."""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
import structlog

from .api import (
    filters_router,
    health_router,
    lookup_router,
    metrics_router,
    words_router,
)
from .config import get_settings
from .engine_instance import lookup_engine, word_store
from .models.response import ErrorResponse
from .storage import PostgresWordStore, seed_store

settings = get_settings()

# Configure structured logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer(ensure_ascii=False)
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    logger.info(
        "Starting Hindi Dictionary service",
        version=settings.app_version,
        store_backend=settings.store_backend
    )

    # The service must come up even when the database is down; lookups
    # then run on the offline word list.
    try:
        if isinstance(word_store, PostgresWordStore):
            await word_store.ensure_schema()
        if settings.seed_on_startup:
            inserted = await seed_store(word_store)
            logger.info("Word store ready", seeded_words=inserted)
    except Exception as e:
        logger.error("Failed to prepare word store", error=str(e))

    yield

    # Shutdown
    await lookup_engine.drain_side_effects()
    logger.info("Shutting down Hindi Dictionary service")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Hindi word lookup with Hinglish transliteration, synonyms and crossword filters",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan
)

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=1000)


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next) -> Response:
    """Log all API requests."""
    start_time = time.time()

    response = await call_next(request)

    if request.url.path.startswith("/api"):
        process_time = time.time() - start_time
        logger.info(
            "Request completed",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            process_time_ms=round(process_time * 1000, 2)
        )

    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report invalid requests as 400 with the validation details."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error="Bad Request",
            message="Invalid request",
            details={
                "errors": [
                    {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
                    for error in exc.errors()
                ]
            }
        ).model_dump(mode="json")
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle global exceptions."""
    logger.error(
        "Unhandled exception",
        method=request.method,
        url=str(request.url),
        error=str(exc),
        exc_info=True
    )

    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error="Internal Server Error",
            message="An unexpected error occurred",
            details={"exception": str(exc)} if settings.debug else None
        ).model_dump(mode="json")
    )


# Include API routers
app.include_router(lookup_router)
app.include_router(words_router)
app.include_router(filters_router)
app.include_router(health_router)
app.include_router(metrics_router)


# Root endpoint
@app.get("/", summary="Root endpoint", description="Get basic information about the API")
async def root() -> dict:
    """Root endpoint with basic API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Hindi word lookup with Hinglish transliteration support",
        "docs_url": "/docs",
        "health_url": "/api/v1/health",
        "endpoints": {
            "lookup": "/api/v1/lookup?q=namaste",
            "word": "/api/v1/words/{word_id}",
            "filter": "/api/v1/filter",
            "metrics": "/api/v1/metrics"
        },
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "hindi_dictionary.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=1 if settings.debug else settings.workers,
        log_level=settings.log_level.lower()
    )
