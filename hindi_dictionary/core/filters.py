"""Pure crossword-style filters and orderings for candidate word lists."""

from typing import Iterable, List, Optional

from ..models.request import FilterOptions

# Independent vowels in traditional order
HINDI_VOWELS = ['अ', 'आ', 'इ', 'ई', 'उ', 'ऊ', 'ऋ', 'ए', 'ऐ', 'ओ', 'औ']


def _length(word: str) -> int:
    # Code points, so matras and viramas count as letters
    return len(word)


def unique_words(words: Iterable[str]) -> List[str]:
    """Drop duplicates, keeping the first occurrence."""
    return list(dict.fromkeys(words))


def hindi_alphabetical_sort(words: Iterable[str]) -> List[str]:
    """
    Sort by code point, which approximates varnamala order.
    
    Precomposed nukta letters (U+0958-U+095F, e.g. क़) sort after the whole
    consonant range instead of beside their base consonant.
    """
    return sorted(words)


def hindi_vowel_order_sort(words: Iterable[str]) -> List[str]:
    """Words starting with an independent vowel first, in vowel order; the rest alphabetically."""
    def sort_key(word: str):
        first = word[:1]
        if first in HINDI_VOWELS:
            return (0, HINDI_VOWELS.index(first), word)
        return (1, 0, word)
    
    return sorted(words, key=sort_key)


def filter_by_exact_length(words: Iterable[str], length: int) -> List[str]:
    if not length:
        return list(words)
    return [w for w in words if _length(w) == length]


def filter_by_length_bucket(words: Iterable[str], bucket: str) -> List[str]:
    """Keep words in a length bucket: 'all', '2-3', '4' or '5+'."""
    def in_bucket(word: str) -> bool:
        length = _length(word)
        if bucket == '2-3':
            return 2 <= length <= 3
        if bucket == '4':
            return length == 4
        if bucket == '5+':
            return length >= 5
        return True
    
    return [w for w in words if in_bucket(w)]


def filter_multi_word(words: Iterable[str], enabled: bool) -> List[str]:
    if not enabled:
        return list(words)
    return [w for w in words if ' ' in w or '-' in w]


def filter_starts_with(words: Iterable[str], prefix: str) -> List[str]:
    if not prefix:
        return list(words)
    return [w for w in words if w.startswith(prefix)]


def filter_ends_with(words: Iterable[str], suffix: str) -> List[str]:
    if not suffix:
        return list(words)
    return [w for w in words if w.endswith(suffix)]


def filter_contains(words: Iterable[str], needle: str) -> List[str]:
    if not needle:
        return list(words)
    return [w for w in words if needle in w]


def matches_pattern(word: str, pattern: str) -> bool:
    """
    Check a word against a crossword pattern.
    
    '_' stands for exactly one unknown character; every other character
    must match in place. Lengths must be equal.
    """
    if _length(word) != _length(pattern):
        return False
    
    return all(p == '_' or p == c for p, c in zip(pattern, word))


def filter_by_pattern(words: Iterable[str], pattern: str) -> List[str]:
    """Keep words matching an underscore pattern, e.g. 'क_ल' keeps 'कमल'."""
    if not pattern:
        return list(words)
    return [w for w in words if matches_pattern(w, pattern)]


def rank_and_filter(words: Iterable[str], options: Optional[FilterOptions] = None) -> List[str]:
    """
    Apply every enabled filter, then order the survivors.
    
    Args:
        words: Candidate words
        options: Filter options (all filters off, alphabetical order if None)
        
    Returns:
        Filtered words in display order
    """
    options = options or FilterOptions()
    
    result = unique_words(words)
    result = filter_by_exact_length(result, options.exact_length)
    result = filter_by_length_bucket(result, options.length_bucket)
    result = filter_multi_word(result, options.multi_word_only)
    result = filter_starts_with(result, options.starts_with)
    result = filter_ends_with(result, options.ends_with)
    result = filter_contains(result, options.contains)
    result = filter_by_pattern(result, options.pattern)
    
    if options.sort_mode == 'vowel':
        return hindi_vowel_order_sort(result)
    return hindi_alphabetical_sort(result)
