"""Deterministic priority-cascade scoring of fetched words."""

from typing import Callable, List, NamedTuple, Sequence

from ..models.domain import ScoredCandidate, WordRecord
from .normalizer import normalize_query


class ScoringRule(NamedTuple):
    """A named predicate and the score it assigns when it matches."""
    
    name: str
    score: float
    matches: Callable[[str, str, str, WordRecord], bool]


# Evaluated top to bottom; the first matching rule decides the score.
# Predicates receive (query, headword, transliteration, word), text lower-cased.
SCORING_RULES: List[ScoringRule] = [
    ScoringRule("headword_exact", 1.0, lambda q, hw, tr, w: hw == q),
    ScoringRule(
        "input_form_exact", 0.9,
        lambda q, hw, tr, w: any(form.lower() == q for form in w.input_forms),
    ),
    ScoringRule("transliteration_exact", 0.85, lambda q, hw, tr, w: tr == q),
    ScoringRule("headword_prefix", 0.7, lambda q, hw, tr, w: hw.startswith(q)),
    ScoringRule("transliteration_prefix", 0.6, lambda q, hw, tr, w: tr.startswith(q)),
    ScoringRule("substring", 0.55, lambda q, hw, tr, w: q in hw or q in tr),
]

RESIDUAL_SCORE = 0.1


class CandidateScorer:
    """Scores and ranks words against a query."""
    
    def __init__(self, rules: Sequence[ScoringRule] = SCORING_RULES) -> None:
        self.rules = list(rules)
    
    def score_word(self, query: str, word: WordRecord) -> float:
        """
        Score a single word against an already normalized query.
        
        Args:
            query: Normalized query
            word: Word to score
            
        Returns:
            Score of the first matching rule, or the residual score
        """
        headword = word.headword.lower()
        transliteration = word.transliteration.lower()
        
        for rule in self.rules:
            if rule.matches(query, headword, transliteration, word):
                return rule.score
        
        return RESIDUAL_SCORE
    
    def score(self, query: str, words: Sequence[WordRecord]) -> List[ScoredCandidate]:
        """
        Score every word and sort by score descending.
        
        No word is dropped. Ties keep their fetch order.
        
        Args:
            query: Query text (normalized here again, which is idempotent)
            words: Fetched words
            
        Returns:
            Scored candidates, best first
        """
        normalized = normalize_query(query)
        scored = [
            ScoredCandidate(word=word, score=self.score_word(normalized, word))
            for word in words
        ]
        scored.sort(key=lambda candidate: candidate.score, reverse=True)
        return scored


_default_scorer = CandidateScorer()


def score_candidates(query: str, words: Sequence[WordRecord]) -> List[ScoredCandidate]:
    """Score words with the default rule cascade."""
    return _default_scorer.score(query, words)
