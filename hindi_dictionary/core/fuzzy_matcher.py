"""Weighted approximate matching over a sample of the word corpus."""

import time
from typing import Dict, List, NamedTuple, Optional, Sequence

import structlog
from rapidfuzz import fuzz

from ..models.domain import ScoredCandidate, WordRecord
from .normalizer import QueryNormalizer

logger = structlog.get_logger(__name__)

# Stand-in for a zero distance so a perfect field match still weighs in
EPSILON = 1e-9

# Points taken off a substring alignment so whole-string matches still rank first
PARTIAL_MATCH_PENALTY = 10.0

DEFAULT_WEIGHTS: Dict[str, float] = {
    "headword": 0.45,
    "transliteration": 0.25,
    "input_forms": 0.30,
}


class _IndexEntry(NamedTuple):
    word: WordRecord
    fields: Dict[str, List[str]]


class FuzzyIndex:
    """
    Read-only fuzzy index over headword, transliteration and input forms.
    
    Each field yields a distance in [0, 1] (1 - normalized similarity of its
    best value). Fields farther than the threshold do not match. A word's
    distance is the product of its matching fields' distances, each raised
    to the field's normalized weight; words with no matching field are
    left out. The score is 1 - distance.
    """
    
    def __init__(
        self,
        words: Sequence[WordRecord],
        weights: Optional[Dict[str, float]] = None,
        threshold: float = 0.3,
    ) -> None:
        """
        Build the index.
        
        Args:
            words: Corpus sample to index
            weights: Per-field weights (normalized to sum to 1)
            threshold: Maximum per-field distance that still counts as a match
        """
        weights = weights or DEFAULT_WEIGHTS
        total = sum(weights.values())
        if total <= 0:
            raise ValueError("Field weights must sum to a positive value")
        
        self.weights = {field: weight / total for field, weight in weights.items()}
        self.threshold = threshold
        self.normalizer = QueryNormalizer()
        self.built_at = time.time()
        self._entries = [self._make_entry(word) for word in words]
    
    def _make_entry(self, word: WordRecord) -> _IndexEntry:
        normalize = self.normalizer.normalize
        fields = {
            "headword": [normalize(word.headword)],
            "transliteration": [normalize(word.transliteration)],
            "input_forms": [normalize(form) for form in word.input_forms if form],
        }
        return _IndexEntry(word=word, fields=fields)
    
    def __len__(self) -> int:
        return len(self._entries)
    
    @staticmethod
    def _similarity(query: str, value: str) -> float:
        """
        Similarity of a query to one field value on a 0-100 scale.
        
        Whole-string similarity, or the best substring alignment less a
        fixed penalty, whichever is higher. A short prefix such as "nam"
        therefore still reaches "namaste".
        """
        whole = fuzz.ratio(query, value)
        partial = fuzz.partial_ratio(query, value) - PARTIAL_MATCH_PENALTY
        return max(whole, partial)
    
    def _field_distance(self, query: str, values: List[str]) -> Optional[float]:
        """Distance of the best value in a field, or None if beyond the threshold."""
        if not values:
            return None
        
        cutoff = (1.0 - self.threshold) * 100
        best_similarity = max(self._similarity(query, value) for value in values)
        if best_similarity < cutoff:
            return None
        
        return 1.0 - best_similarity / 100.0
    
    def search(self, query: str, limit: int = 100) -> List[ScoredCandidate]:
        """
        Run a query against the index.
        
        Args:
            query: Normalized query
            limit: Maximum number of results
            
        Returns:
            Matches sorted by score descending, ties in corpus order
        """
        if not query:
            return []
        
        results = []
        for entry in self._entries:
            distance = 1.0
            matched = False
            
            for field, values in entry.fields.items():
                field_distance = self._field_distance(query, values)
                if field_distance is None:
                    continue
                matched = True
                distance *= max(field_distance, EPSILON) ** self.weights.get(field, 0.0)
            
            if matched:
                score = min(1.0, max(0.0, 1.0 - distance))
                results.append(ScoredCandidate(word=entry.word, score=score))
        
        results.sort(key=lambda candidate: candidate.score, reverse=True)
        return results[:limit]


def build_index(
    words: Sequence[WordRecord],
    weights: Optional[Dict[str, float]] = None,
    threshold: float = 0.3,
) -> FuzzyIndex:
    """Build a fuzzy index and log its size."""
    start_time = time.time()
    index = FuzzyIndex(words, weights=weights, threshold=threshold)
    logger.info(
        "fuzzy_index_built",
        total_words=len(index),
        build_time_ms=round((time.time() - start_time) * 1000, 2),
    )
    return index
