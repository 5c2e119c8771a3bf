"""Word detail API endpoints."""

from fastapi import APIRouter, HTTPException, Path

from ..exceptions import StoreUnavailableError, WordNotFoundError
from ..models.response import WordDetailResponse

router = APIRouter(prefix="/api/v1", tags=["words"])

# Import the global lookup engine instance
from ..engine_instance import lookup_engine


@router.get(
    "/words/{word_id}",
    response_model=WordDetailResponse,
    summary="Get word details",
    description="Get a word with its synonyms, antonyms and related words"
)
async def get_word(
    word_id: int = Path(..., ge=1, description="The word identifier")
) -> WordDetailResponse:
    """Get a word with its relation edges and count the view."""
    try:
        return await lookup_engine.get_word_detail(word_id)
        
    except WordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except StoreUnavailableError as e:
        raise HTTPException(status_code=503, detail=f"Word store unavailable: {str(e)}")
