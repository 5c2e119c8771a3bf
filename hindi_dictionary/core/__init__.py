"""Core lookup pipeline."""

from .confidence import classify_confidence
from .engine import LookupEngine
from .filters import filter_by_pattern, rank_and_filter
from .fuzzy_matcher import FuzzyIndex, build_index
from .normalizer import QueryNormalizer, generate_variants, is_devanagari, normalize_query
from .scorer import CandidateScorer, score_candidates

__all__ = [
    "LookupEngine",
    "QueryNormalizer",
    "CandidateScorer",
    "FuzzyIndex",
    "build_index",
    "classify_confidence",
    "filter_by_pattern",
    "generate_variants",
    "is_devanagari",
    "normalize_query",
    "rank_and_filter",
    "score_candidates",
]
