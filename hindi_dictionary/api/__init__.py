"""API endpoints for the Hindi dictionary service."""

from .filters import router as filters_router
from .health import router as health_router
from .lookup import router as lookup_router
from .metrics import router as metrics_router
from .words import router as words_router

__all__ = [
    "filters_router",
    "health_router",
    "lookup_router",
    "metrics_router",
    "words_router",
]
