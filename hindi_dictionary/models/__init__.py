"""Data models for the Hindi dictionary service."""

from .domain import (
    Antonym,
    ConfidenceBand,
    HitType,
    LookupResult,
    RelatedWord,
    ScoredCandidate,
    SearchLogEntry,
    Synonym,
    WordRecord,
    WordRelations,
)
from .request import FilterOptions, FilterRequest
from .response import (
    ErrorResponse,
    FilterResponse,
    HealthResponse,
    LookupResponse,
    MetricsResponse,
    WordDetailResponse,
)

__all__ = [
    "Antonym",
    "ConfidenceBand",
    "HitType",
    "LookupResult",
    "RelatedWord",
    "ScoredCandidate",
    "SearchLogEntry",
    "Synonym",
    "WordRecord",
    "WordRelations",
    "FilterOptions",
    "FilterRequest",
    "ErrorResponse",
    "FilterResponse",
    "HealthResponse",
    "LookupResponse",
    "MetricsResponse",
    "WordDetailResponse",
]
