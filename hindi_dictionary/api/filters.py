"""Crossword filter API endpoints."""

from fastapi import APIRouter

from ..core.filters import rank_and_filter
from ..models.request import FilterRequest
from ..models.response import FilterResponse

router = APIRouter(prefix="/api/v1", tags=["filters"])


@router.post(
    "/filter",
    response_model=FilterResponse,
    summary="Filter candidate words",
    description="Filter words by length, prefix, suffix, substring or '_' pattern and order them"
)
async def filter_words(request: FilterRequest) -> FilterResponse:
    """Apply crossword filters to a list of candidate words."""
    words = rank_and_filter(request.words, request)
    
    return FilterResponse(
        words=words,
        total_input=len(request.words),
        total_results=len(words)
    )
