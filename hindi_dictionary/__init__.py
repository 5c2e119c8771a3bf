"""
Hindi Dictionary - word lookup with Hinglish transliteration support.

Resolves Devanagari, romanized or loosely transliterated queries to
dictionary entries through exact matching, phonetic spelling variants and
fuzzy matching, degrading to an offline word list when the store is down.
"""

__version__ = "1.0.0"

from .core.engine import LookupEngine
from .core.filters import rank_and_filter
from .models.domain import ConfidenceBand, HitType, LookupResult, WordRecord

__all__ = [
    "LookupEngine",
    "rank_and_filter",
    "ConfidenceBand",
    "HitType",
    "LookupResult",
    "WordRecord",
]
