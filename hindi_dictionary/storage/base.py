"""Word store interface consumed by the lookup pipeline."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple

from ..models.domain import SearchLogEntry, WordRecord, WordRelations

# (related word, similarity, reason)
RelatedSpec = Tuple[str, float, Optional[str]]


class WordStore(ABC):
    """
    Abstract word store.
    
    Implementations raise StoreUnavailableError, and nothing else, when the
    backing store cannot be reached. Empty results are not errors.
    """
    
    @abstractmethod
    async def fetch_by_exact_or_input_form(self, query: str) -> List[WordRecord]:
        """
        Words whose headword equals the query, whose transliteration equals
        it case-insensitively, or whose input forms contain it
        case-insensitively. Order is unspecified.
        """
    
    @abstractmethod
    async def fetch_relations(self, word_id: int) -> WordRelations:
        """Synonyms, antonyms and related words (by similarity, descending) of a word."""
    
    @abstractmethod
    async def fetch_sample(self, limit: int) -> List[WordRecord]:
        """Up to `limit` words for building the fuzzy index."""
    
    @abstractmethod
    async def increment_usage(self, word_id: int) -> None:
        """Increment a word's usage counter."""
    
    @abstractmethod
    async def append_search_log(self, entry: SearchLogEntry) -> None:
        """Record a lookup in the search log."""
    
    @abstractmethod
    async def get_word(self, word_id: int) -> Optional[WordRecord]:
        """A single word by id, or None."""
    
    @abstractmethod
    async def count_words(self) -> int:
        """Number of stored words."""
    
    @abstractmethod
    async def add_word(
        self,
        headword: str,
        transliteration: str,
        meaning_hi: str,
        pos: Optional[str] = None,
        meaning_en: Optional[str] = None,
        input_forms: Sequence[str] = (),
        source: str = "dictionary",
        confidence: str = "high",
        usage_count: int = 0,
    ) -> WordRecord:
        """Insert a word and return it with its assigned id."""
    
    @abstractmethod
    async def add_relations(
        self,
        word_id: int,
        synonyms: Sequence[str] = (),
        antonyms: Sequence[str] = (),
        related: Sequence[RelatedSpec] = (),
    ) -> None:
        """Attach relation edges to an existing word."""
