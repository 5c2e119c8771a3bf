"""Domain models shared by the lookup pipeline and the word stores."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HitType(str, Enum):
    """How a lookup result was obtained."""
    
    DB_EXACT = "db_exact"
    DB_INPUT_FORM = "db_input_form"
    FUZZY = "fuzzy"
    NO_HIT = "no_hit"
    FALLBACK = "fallback"


class ConfidenceBand(str, Enum):
    """Coarse match quality bucket for display."""
    
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class WordRecord(BaseModel):
    """A dictionary entry."""
    
    model_config = ConfigDict(frozen=True)
    
    id: int = Field(..., description="Stable unique identifier")
    headword: str = Field(..., description="Canonical Devanagari spelling")
    transliteration: str = Field(..., description="Romanized rendering of the headword")
    pos: Optional[str] = Field(None, description="Part of speech")
    meaning_hi: str = Field(..., description="Primary meaning")
    meaning_en: Optional[str] = Field(None, description="Secondary (English) meaning")
    input_forms: List[str] = Field(default_factory=list, description="Alternate spellings for exact lookup")
    source: str = Field(default="dictionary", description="Provenance tag")
    confidence: str = Field(default="high", description="Stored confidence tag")
    usage_count: int = Field(default=0, ge=0, description="Successful detail lookups")
    fetched_at: datetime = Field(default_factory=datetime.utcnow, description="Creation timestamp")


class Synonym(BaseModel):
    """Synonym edge owned by a word."""
    
    word_id: int
    synonym_hi: str


class Antonym(BaseModel):
    """Antonym edge owned by a word."""
    
    word_id: int
    antonym_hi: str


class RelatedWord(BaseModel):
    """Related-word edge owned by a word."""
    
    word_id: int
    related_hi: str
    similarity: float = Field(default=0.0, ge=0.0, le=1.0)
    reason: Optional[str] = None


class WordRelations(BaseModel):
    """All relation edges of a single word."""
    
    synonyms: List[Synonym] = Field(default_factory=list)
    antonyms: List[Antonym] = Field(default_factory=list)
    related_words: List[RelatedWord] = Field(default_factory=list)


class ScoredCandidate(BaseModel):
    """A word paired with its match score for one lookup."""
    
    model_config = ConfigDict(frozen=True)
    
    word: WordRecord
    score: float = Field(..., ge=0.0, le=1.0)


class LookupResult(BaseModel):
    """Outcome of a single lookup; always well formed, never mutated."""
    
    model_config = ConfigDict(frozen=True)
    
    query: str = Field(..., description="Normalized query")
    is_devanagari: bool = Field(default=False)
    primary: Optional[WordRecord] = None
    score: Optional[float] = Field(None, description="Score of the primary match")
    synonyms: List[Synonym] = Field(default_factory=list)
    antonyms: List[Antonym] = Field(default_factory=list)
    related_words: List[RelatedWord] = Field(default_factory=list)
    candidates: List[ScoredCandidate] = Field(default_factory=list)
    hit_type: HitType
    confidence_band: ConfidenceBand
    error_message: Optional[str] = None


class SearchLogEntry(BaseModel):
    """Audit record of a lookup."""
    
    query: str
    resolved_word_id: Optional[int] = None
    hit_type: HitType
    created_at: datetime = Field(default_factory=datetime.utcnow)
