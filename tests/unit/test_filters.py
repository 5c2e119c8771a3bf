"""Unit tests for the crossword filters."""

import pytest

from hindi_dictionary.core.filters import (
    filter_by_exact_length,
    filter_by_length_bucket,
    filter_by_pattern,
    filter_contains,
    filter_ends_with,
    filter_multi_word,
    filter_starts_with,
    hindi_alphabetical_sort,
    hindi_vowel_order_sort,
    matches_pattern,
    rank_and_filter,
    unique_words,
)
from hindi_dictionary.models.request import FilterOptions


class TestPatternFilter:
    """Test cases for underscore pattern matching."""
    
    def test_wildcard_matches(self):
        assert filter_by_pattern(["कमल", "कपल"], "क_ल") == ["कमल", "कपल"]
    
    def test_mismatch_excluded(self):
        assert filter_by_pattern(["कमल"], "क_त") == []
    
    def test_length_must_match(self):
        assert filter_by_pattern(["कमला", "कल"], "क_ल") == []
    
    def test_empty_pattern_keeps_everything(self):
        assert filter_by_pattern(["कमल", "दिल"], "") == ["कमल", "दिल"]
    
    def test_all_wildcards(self):
        assert matches_pattern("दिल", "___") is True
        assert matches_pattern("दिल", "__") is False
    
    def test_latin_pattern(self):
        assert filter_by_pattern(["prem", "pram", "param"], "pr_m") == ["prem", "pram"]


class TestSimpleFilters:
    """Test cases for prefix, suffix, substring and length filters."""
    
    @pytest.fixture
    def words(self):
        return ["प्रेम", "प्यार", "स्नेह", "दिल से", "प्रेम-पत्र", "कमल"]
    
    def test_starts_with(self, words):
        assert filter_starts_with(words, "प्र") == ["प्रेम", "प्रेम-पत्र"]
    
    def test_ends_with(self, words):
        assert filter_ends_with(words, "ह") == ["स्नेह"]
    
    def test_contains(self, words):
        assert filter_contains(words, "ेम") == ["प्रेम", "प्रेम-पत्र"]
    
    def test_multi_word(self, words):
        assert filter_multi_word(words, True) == ["दिल से", "प्रेम-पत्र"]
        assert filter_multi_word(words, False) == words
    
    def test_exact_length_counts_code_points(self):
        assert filter_by_exact_length(["कमल", "शांति", "दिल"], 3) == ["कमल", "दिल"]
        assert filter_by_exact_length(["कमल", "शांति"], 0) == ["कमल", "शांति"]
    
    def test_length_buckets(self):
        words = ["ab", "abc", "abcd", "abcde", "a"]
        assert filter_by_length_bucket(words, "2-3") == ["ab", "abc"]
        assert filter_by_length_bucket(words, "4") == ["abcd"]
        assert filter_by_length_bucket(words, "5+") == ["abcde"]
        assert filter_by_length_bucket(words, "all") == words
    
    def test_unique_words_keeps_first(self):
        assert unique_words(["दिल", "कमल", "दिल"]) == ["दिल", "कमल"]


class TestOrdering:
    """Test cases for alphabetical and vowel-first ordering."""
    
    def test_alphabetical_follows_varnamala(self):
        assert hindi_alphabetical_sort(["कमल", "इमली", "आम", "अनार"]) == ["अनार", "आम", "इमली", "कमल"]
    
    def test_alphabetical_puts_nukta_letters_last(self):
        assert hindi_alphabetical_sort(["\u0958लम", "हवा", "कमल"]) == ["कमल", "हवा", "\u0958लम"]
    
    def test_vowel_order_puts_vowels_first(self):
        assert hindi_vowel_order_sort(["apple", "कमल", "आम"]) == ["आम", "apple", "कमल"]
        assert hindi_alphabetical_sort(["कमल", "आम", "apple"]) == ["apple", "आम", "कमल"]
    
    def test_vowel_order_between_vowels(self):
        assert hindi_vowel_order_sort(["ऊन", "अब", "एक"]) == ["अब", "ऊन", "एक"]


class TestRankAndFilter:
    """Test cases for the combined filter pipeline."""
    
    def test_defaults_only_sort_and_dedupe(self):
        assert rank_and_filter(["कमल", "दिल", "कमल"]) == ["कमल", "दिल"]
    
    def test_combined_filters(self):
        words = ["कमल", "कपल", "कलम", "कमला", "नमक"]
        options = FilterOptions(pattern="क__", starts_with="क", ends_with="ल")
        assert rank_and_filter(words, options) == ["कपल", "कमल"]
    
    def test_exact_length_and_vowel_sort(self):
        words = ["आम", "दिल", "अब", "कमल"]
        options = FilterOptions(exact_length=2, sort_mode="vowel")
        assert rank_and_filter(words, options) == ["अब", "आम"]
    
    def test_is_pure(self):
        words = ["दिल", "कमल"]
        rank_and_filter(words, FilterOptions(contains="क"))
        assert words == ["दिल", "कमल"]
    
    def test_options_strip_whitespace(self):
        options = FilterOptions(pattern=" क_ल ")
        assert options.pattern == "क_ल"
