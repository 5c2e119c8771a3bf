"""Starter dictionary content."""

from typing import Any, Dict, List

import structlog

from .base import WordStore

logger = structlog.get_logger(__name__)

SEED_WORDS: List[Dict[str, Any]] = [
    {
        "headword": "नमस्ते",
        "transliteration": "namaste",
        "pos": "interjection",
        "meaning_hi": "अभिवादन करने का एक तरीका",
        "meaning_en": "A respectful greeting",
        "input_forms": ["namaste", "namaskar", "namasthe"],
        "usage_count": 100,
        "synonyms": ["नमस्कार", "प्रणाम"],
    },
    {
        "headword": "प्रेम",
        "transliteration": "prem",
        "pos": "noun",
        "meaning_hi": "गहरा स्नेह या लगाव",
        "meaning_en": "Love, affection",
        "input_forms": ["prem", "pyar", "love"],
        "usage_count": 85,
        "synonyms": ["प्यार", "स्नेह", "मोहब्बत", "अनुराग"],
        "antonyms": ["घृणा", "नफरत"],
        "related": [("दिल", 0.8, "Contextual"), ("भावना", 0.6, "Category")],
    },
    {
        "headword": "शांति",
        "transliteration": "shanti",
        "pos": "noun",
        "meaning_hi": "मन की स्थिरता और सुकून",
        "meaning_en": "Peace, tranquility",
        "input_forms": ["shanti", "peace", "sukoon"],
        "usage_count": 70,
    },
    {
        "headword": "विश्वास",
        "transliteration": "vishwas",
        "pos": "noun",
        "meaning_hi": "किसी पर भरोसा करना",
        "meaning_en": "Trust, belief",
        "input_forms": ["vishwas", "trust", "bharosa"],
        "usage_count": 60,
    },
    {
        "headword": "मित्र",
        "transliteration": "mitra",
        "pos": "noun",
        "meaning_hi": "दोस्त, सखा",
        "meaning_en": "Friend",
        "input_forms": ["mitra", "dost", "friend"],
        "usage_count": 90,
        "synonyms": ["दोस्त", "सखा", "यार"],
        "antonyms": ["शत्रु", "दुश्मन"],
    },
    {
        "headword": "किताब",
        "transliteration": "kitab",
        "pos": "noun",
        "meaning_hi": "पुस्तक, पोथी",
        "meaning_en": "Book",
        "input_forms": ["kitab", "pustak", "book"],
        "usage_count": 50,
    },
    {
        "headword": "सपना",
        "transliteration": "sapna",
        "pos": "noun",
        "meaning_hi": "स्वप्न, ख्याली पुलाव",
        "meaning_en": "Dream",
        "input_forms": ["sapna", "dream", "swapan"],
        "usage_count": 45,
    },
]


async def seed_store(store: WordStore) -> int:
    """
    Load the starter dictionary into an empty store.
    
    Args:
        store: Target store
        
    Returns:
        Number of words inserted (0 if the store already had words)
    """
    if await store.count_words() > 0:
        return 0
    
    logger.info("seeding_word_store", total_words=len(SEED_WORDS))
    
    for entry in SEED_WORDS:
        entry = dict(entry)
        synonyms = entry.pop("synonyms", [])
        antonyms = entry.pop("antonyms", [])
        related = entry.pop("related", [])
        
        word = await store.add_word(**entry)
        if synonyms or antonyms or related:
            await store.add_relations(word.id, synonyms=synonyms, antonyms=antonyms, related=related)
    
    logger.info("seeding_complete", total_words=len(SEED_WORDS))
    return len(SEED_WORDS)
