"""Unit tests for the weighted fuzzy index."""

import pytest

from hindi_dictionary.core.fuzzy_matcher import FuzzyIndex, build_index
from hindi_dictionary.models.domain import WordRecord
from hindi_dictionary.storage.seed import SEED_WORDS


@pytest.fixture
def corpus():
    """The starter dictionary as word records."""
    return [
        WordRecord(
            id=i + 1,
            headword=entry["headword"],
            transliteration=entry["transliteration"],
            meaning_hi=entry["meaning_hi"],
            input_forms=entry["input_forms"],
        )
        for i, entry in enumerate(SEED_WORDS)
    ]


class TestFuzzyIndex:
    """Test cases for the FuzzyIndex class."""
    
    @pytest.fixture
    def index(self, corpus):
        return FuzzyIndex(corpus, threshold=0.3)
    
    def test_weights_are_normalized(self, index):
        assert sum(index.weights.values()) == pytest.approx(1.0)
        assert index.weights["headword"] == pytest.approx(0.45)
    
    def test_index_size(self, index, corpus):
        assert len(index) == len(corpus)
    
    def test_single_typo_in_transliteration(self, index):
        results = index.search("namste")
        
        assert results
        assert results[0].word.transliteration == "namaste"
        assert 0.5 < results[0].score < 1.0
    
    def test_typo_in_devanagari(self, index):
        results = index.search("नमस्त")
        
        assert results
        assert results[0].word.headword == "नमस्ते"
    
    def test_short_prefix_in_transliteration(self, index):
        results = index.search("nam")

        assert results
        assert results[0].word.transliteration == "namaste"

    def test_short_prefix_in_devanagari(self, index):
        results = index.search("नम")

        assert results
        assert results[0].word.headword == "नमस्ते"

    def test_whole_match_outranks_substring(self):
        words = [
            WordRecord(id=1, headword="प्रेमी", transliteration="premi", meaning_hi="प्रेम करने वाला"),
            WordRecord(id=2, headword="प्रेम", transliteration="prem", meaning_hi="प्यार"),
        ]

        results = FuzzyIndex(words).search("prem")

        assert [c.word.id for c in results] == [2, 1]
        assert results[0].score > results[1].score

    def test_exact_match_scores_near_one(self, index):
        results = index.search("kitab")
        
        assert results[0].word.transliteration == "kitab"
        assert results[0].score > 0.99
    
    def test_scores_in_range_and_sorted(self, index):
        results = index.search("prem")
        
        for candidate in results:
            assert 0.0 <= candidate.score <= 1.0
        assert [c.score for c in results] == sorted((c.score for c in results), reverse=True)
    
    def test_unrelated_query_has_no_results(self, index):
        assert index.search("xyzzy123") == []
    
    def test_empty_query(self, index):
        assert index.search("") == []
    
    def test_limit(self, corpus):
        words = [
            WordRecord(id=i, headword="शब्द", transliteration=f"shabd{i % 10}", meaning_hi="अर्थ")
            for i in range(50)
        ]
        index = FuzzyIndex(words)
        assert len(index.search("shabd1", limit=5)) == 5
    
    def test_empty_corpus(self):
        index = FuzzyIndex([])
        assert len(index) == 0
        assert index.search("namaste") == []
    
    def test_invalid_weights(self, corpus):
        with pytest.raises(ValueError):
            FuzzyIndex(corpus, weights={"headword": 0.0})
    
    def test_stricter_threshold_finds_fewer(self, corpus):
        loose = FuzzyIndex(corpus, threshold=0.5).search("namskr")
        strict = FuzzyIndex(corpus, threshold=0.1).search("namskr")
        assert len(strict) <= len(loose)


def test_build_index(corpus):
    index = build_index(corpus, threshold=0.3)
    assert isinstance(index, FuzzyIndex)
    assert index.threshold == 0.3
