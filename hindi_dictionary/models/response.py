"""Response models for API endpoints."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .domain import (
    Antonym,
    ConfidenceBand,
    HitType,
    LookupResult,
    RelatedWord,
    ScoredCandidate,
    Synonym,
    WordRecord,
)


class LookupResponse(BaseModel):
    """Response for lookup queries."""
    
    query: str = Field(..., description="Normalized query")
    is_devanagari: bool = Field(..., description="Whether the query contains Devanagari")
    primary: Optional[WordRecord] = Field(None, description="Best matching word")
    score: Optional[float] = Field(None, description="Score of the best match")
    synonyms: List[Synonym] = Field(default_factory=list)
    antonyms: List[Antonym] = Field(default_factory=list)
    related_words: List[RelatedWord] = Field(default_factory=list)
    candidates: List[ScoredCandidate] = Field(default_factory=list, description="Runner-up matches")
    hit_type: HitType = Field(..., description="How the result was obtained")
    confidence_band: ConfidenceBand = Field(..., description="Coarse match quality")
    error_message: Optional[str] = Field(None, description="Advisory message for degraded or empty results")
    execution_time_ms: float = Field(..., description="Lookup time in milliseconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Response timestamp")

    @classmethod
    def from_result(cls, result: LookupResult, execution_time_ms: float) -> "LookupResponse":
        return cls(execution_time_ms=execution_time_ms, **result.model_dump())


class WordDetailResponse(WordRecord):
    """A word together with its relation edges."""
    
    synonyms: List[Synonym] = Field(default_factory=list)
    antonyms: List[Antonym] = Field(default_factory=list)
    related_words: List[RelatedWord] = Field(default_factory=list)


class FilterResponse(BaseModel):
    """Response for crossword filter requests."""
    
    words: List[str] = Field(..., description="Words that passed every filter, in display order")
    total_input: int = Field(..., description="Number of words received")
    total_results: int = Field(..., description="Number of words returned")


class ErrorResponse(BaseModel):
    """Error response model."""
    
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""
    
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""
    
    total_queries: int = Field(..., description="Total lookups processed")
    average_response_time_ms: float = Field(..., description="Average lookup time")
    hit_type_counts: Dict[str, int] = Field(..., description="Lookups per hit type")
    fallback_rate: float = Field(..., description="Share of lookups served from the offline backup")
    memory_usage_mb: float = Field(..., description="Memory usage in MB")
    timestamp: datetime = Field(default_factory=datetime.utcnow, description="Metrics timestamp")
