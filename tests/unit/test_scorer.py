"""Unit tests for the candidate scorer."""

import pytest

from hindi_dictionary.core.scorer import (
    RESIDUAL_SCORE,
    SCORING_RULES,
    CandidateScorer,
    score_candidates,
)
from hindi_dictionary.models.domain import WordRecord


def make_word(word_id, headword, transliteration, input_forms=()):
    return WordRecord(
        id=word_id,
        headword=headword,
        transliteration=transliteration,
        meaning_hi="अर्थ",
        input_forms=list(input_forms),
    )


class TestCandidateScorer:
    """Test cases for the CandidateScorer class."""
    
    @pytest.fixture
    def scorer(self):
        return CandidateScorer()
    
    @pytest.fixture
    def namaste(self):
        return make_word(1, "नमस्ते", "namaste", ["namaste", "namaskar"])
    
    def test_rules_are_ordered_by_priority(self):
        scores = [rule.score for rule in SCORING_RULES]
        assert scores == sorted(scores, reverse=True)
        assert scores[0] == 1.0
        assert RESIDUAL_SCORE < scores[-1]
    
    def test_headword_exact(self, scorer, namaste):
        assert scorer.score_word("नमस्ते", namaste) == 1.0
    
    def test_input_form_beats_transliteration(self, scorer, namaste):
        # "namaste" is both an input form and the transliteration
        assert scorer.score_word("namaste", namaste) == 0.9
    
    def test_input_form_case_insensitive(self, scorer):
        word = make_word(2, "नमस्कार", "namaskaar", ["Namaskar"])
        assert scorer.score_word("namaskar", word) == 0.9
    
    def test_transliteration_exact(self, scorer):
        word = make_word(3, "प्रेम", "Prem")
        assert scorer.score_word("prem", word) == 0.85
    
    def test_headword_prefix(self, scorer, namaste):
        assert scorer.score_word("नम", namaste) == 0.7
    
    def test_transliteration_prefix(self, scorer, namaste):
        assert scorer.score_word("nama", namaste) == 0.6
    
    def test_substring(self, scorer, namaste):
        assert scorer.score_word("mast", namaste) == 0.55
        assert scorer.score_word("स्त", namaste) == 0.55
    
    def test_residual(self, scorer, namaste):
        assert scorer.score_word("zzz", namaste) == RESIDUAL_SCORE
    
    def test_never_drops_and_sorts_descending(self, scorer, namaste):
        words = [
            make_word(10, "कमल", "kamal"),
            namaste,
            make_word(11, "नमक", "namak"),
        ]
        scored = scorer.score("namaste", words)
        
        assert {c.word.id for c in scored} == {w.id for w in words}
        assert len(scored) == len(words)
        assert [c.score for c in scored] == sorted((c.score for c in scored), reverse=True)
        assert scored[0].word.id == 1
    
    def test_ties_keep_fetch_order(self, scorer):
        words = [make_word(i, f"शब्द{i}", f"shabd{i}") for i in range(5)]
        scored = scorer.score("zzz", words)
        assert [c.word.id for c in scored] == [0, 1, 2, 3, 4]
    
    def test_query_is_normalized(self, scorer, namaste):
        scored = scorer.score("  NAMASTE ", [namaste])
        assert scored[0].score == 0.9
    
    def test_empty_input(self, scorer):
        assert scorer.score("namaste", []) == []


def test_module_level_score_candidates():
    word = make_word(1, "किताब", "kitab", ["kitab", "book"])
    assert score_candidates("book", [word])[0].score == 0.9
