"""Lookup API endpoints."""

import time

from fastapi import APIRouter, HTTPException, Query

from ..config import get_settings
from ..models.response import LookupResponse

router = APIRouter(prefix="/api/v1", tags=["lookup"])
settings = get_settings()

# Import the global lookup engine instance
from ..engine_instance import lookup_engine


@router.get(
    "/lookup",
    response_model=LookupResponse,
    summary="Look up a word",
    description="Resolve a Hindi, romanized or Hinglish query to a dictionary entry"
)
async def lookup_word(
    q: str = Query(..., description="The word to look up", min_length=1)
) -> LookupResponse:
    """
    Look up a word.
    
    Pipeline failures never produce an error status: degraded results are
    reported through `hit_type` and `error_message`.
    """
    if len(q) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )
    
    start_time = time.time()
    result = await lookup_engine.lookup(q)
    execution_time = (time.time() - start_time) * 1000
    
    return LookupResponse.from_result(result, execution_time)
