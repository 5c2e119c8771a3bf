"""Request models for API endpoints."""

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator


class FilterOptions(BaseModel):
    """Crossword-style post-filter options. Empty values disable a filter."""
    
    exact_length: int = Field(default=0, ge=0, le=50, description="Required length in characters (0 = any)")
    length_bucket: Literal["all", "2-3", "4", "5+"] = Field(default="all")
    multi_word_only: bool = Field(default=False, description="Keep only words containing a space or hyphen")
    starts_with: str = Field(default="")
    ends_with: str = Field(default="")
    contains: str = Field(default="")
    pattern: str = Field(default="", description="Pattern with '_' for unknown letters, e.g. क_ल")
    sort_mode: Literal["alpha", "vowel"] = Field(default="alpha")

    @field_validator("starts_with", "ends_with", "contains", "pattern")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Strip surrounding whitespace from text filters."""
        return v.strip()


class FilterRequest(FilterOptions):
    """Request model for the crossword filter endpoint."""
    
    words: List[str] = Field(..., max_length=5000, description="Candidate words to filter")
