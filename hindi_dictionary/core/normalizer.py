"""Query normalization, script detection and Hinglish variant generation."""

import re
from typing import List, Tuple


# Devanagari Unicode block
DEVANAGARI_REGEX = re.compile(r'[\u0900-\u097F]')

# Phonetic reductions for romanized Hindi, applied in this order
HINGLISH_RULES: List[Tuple[str, str]] = [
    ('aa', 'a'),
    ('ee', 'i'),
    ('oo', 'u'),
    ('ri', 'r'),
    ('kh', 'k'),
    ('gh', 'g'),
    ('chh', 'ch'),
    ('th', 't'),
    ('dh', 'd'),
    ('ph', 'p'),
    ('bh', 'b'),
]


class QueryNormalizer:
    """Handles query normalization for consistent lookups."""
    
    def __init__(self) -> None:
        """Initialize the normalizer."""
        self.whitespace_regex = re.compile(r'\s+')
        self.rules = [(re.compile(pattern), replacement) for pattern, replacement in HINGLISH_RULES]
        
    def normalize(self, text: str) -> str:
        """
        Normalize a raw query.
        
        Trims, lower-cases and collapses internal whitespace to single
        spaces. An empty result means "no query".
        
        Args:
            text: Raw query text
            
        Returns:
            Normalized query
        """
        if not text:
            return ""
        
        return self.whitespace_regex.sub(' ', text.strip().lower())
    
    def is_devanagari(self, text: str) -> bool:
        """Return True if the text contains any Devanagari code point."""
        return bool(DEVANAGARI_REGEX.search(text or ""))
    
    def generate_variants(self, text: str) -> List[str]:
        """
        Generate Hinglish spelling variants of a romanized query.
        
        Each rule is applied to the original text on its own, so the
        result holds at most one variant per rule plus the original.
        
        Args:
            text: Latin-script query
            
        Returns:
            Deduplicated variants, original first
        """
        variants = [text]
        
        for regex, replacement in self.rules:
            variant = regex.sub(replacement, text)
            if variant and variant not in variants:
                variants.append(variant)
        
        return variants


_default_normalizer = QueryNormalizer()


def normalize_query(text: str) -> str:
    """Module-level shortcut for QueryNormalizer.normalize."""
    return _default_normalizer.normalize(text)


def is_devanagari(text: str) -> bool:
    """Module-level shortcut for QueryNormalizer.is_devanagari."""
    return _default_normalizer.is_devanagari(text)


def generate_variants(text: str) -> List[str]:
    """Module-level shortcut for QueryNormalizer.generate_variants."""
    return _default_normalizer.generate_variants(text)
