"""Built-in offline word list used when the word store is unavailable."""

from typing import List

from ..models.domain import ScoredCandidate, WordRecord
from .scorer import score_candidates

MOCK_WORDS: List[WordRecord] = [
    WordRecord(
        id=1, headword="नमस्ते", transliteration="namaste", pos="interjection",
        meaning_hi="अभिवादन", meaning_en="Greeting", input_forms=["namaste"],
        source="mock", confidence="high", usage_count=100,
    ),
    WordRecord(
        id=2, headword="प्रेम", transliteration="prem", pos="noun",
        meaning_hi="प्यार", meaning_en="Love", input_forms=["prem"],
        source="mock", confidence="high", usage_count=90,
    ),
    WordRecord(
        id=3, headword="शांति", transliteration="shanti", pos="noun",
        meaning_hi="सुकून", meaning_en="Peace", input_forms=["shanti"],
        source="mock", confidence="high", usage_count=80,
    ),
]


def mock_fallback(query: str) -> List[ScoredCandidate]:
    """Score the offline word list against a query."""
    return score_candidates(query, MOCK_WORDS)
