"""In-process word store."""

from typing import Dict, List, Optional, Sequence

from ..models.domain import (
    Antonym,
    RelatedWord,
    SearchLogEntry,
    Synonym,
    WordRecord,
    WordRelations,
)
from .base import RelatedSpec, WordStore


class InMemoryWordStore(WordStore):
    """Dictionary-backed word store, used for development and tests."""
    
    def __init__(self) -> None:
        """Initialize an empty store."""
        self._words: Dict[int, WordRecord] = {}
        self._relations: Dict[int, WordRelations] = {}
        self.search_logs: List[SearchLogEntry] = []
        self._next_id = 1
    
    async def fetch_by_exact_or_input_form(self, query: str) -> List[WordRecord]:
        lowered = query.lower()
        return [
            word for word in self._words.values()
            if word.headword == query
            or word.transliteration.lower() == lowered
            or any(form.lower() == lowered for form in word.input_forms)
        ]
    
    async def fetch_relations(self, word_id: int) -> WordRelations:
        relations = self._relations.get(word_id)
        if relations is None:
            return WordRelations()
        
        return WordRelations(
            synonyms=list(relations.synonyms),
            antonyms=list(relations.antonyms),
            related_words=sorted(
                relations.related_words, key=lambda r: r.similarity, reverse=True
            ),
        )
    
    async def fetch_sample(self, limit: int) -> List[WordRecord]:
        return list(self._words.values())[:limit]
    
    async def increment_usage(self, word_id: int) -> None:
        word = self._words.get(word_id)
        if word is not None:
            self._words[word_id] = word.model_copy(update={"usage_count": word.usage_count + 1})
    
    async def append_search_log(self, entry: SearchLogEntry) -> None:
        self.search_logs.append(entry)
    
    async def get_word(self, word_id: int) -> Optional[WordRecord]:
        return self._words.get(word_id)
    
    async def count_words(self) -> int:
        return len(self._words)
    
    async def add_word(
        self,
        headword: str,
        transliteration: str,
        meaning_hi: str,
        pos: Optional[str] = None,
        meaning_en: Optional[str] = None,
        input_forms: Sequence[str] = (),
        source: str = "dictionary",
        confidence: str = "high",
        usage_count: int = 0,
    ) -> WordRecord:
        word = WordRecord(
            id=self._next_id,
            headword=headword,
            transliteration=transliteration,
            pos=pos,
            meaning_hi=meaning_hi,
            meaning_en=meaning_en,
            input_forms=list(input_forms),
            source=source,
            confidence=confidence,
            usage_count=usage_count,
        )
        self._words[word.id] = word
        self._next_id += 1
        return word
    
    async def add_relations(
        self,
        word_id: int,
        synonyms: Sequence[str] = (),
        antonyms: Sequence[str] = (),
        related: Sequence[RelatedSpec] = (),
    ) -> None:
        relations = self._relations.setdefault(word_id, WordRelations())
        relations.synonyms.extend(Synonym(word_id=word_id, synonym_hi=s) for s in synonyms)
        relations.antonyms.extend(Antonym(word_id=word_id, antonym_hi=a) for a in antonyms)
        relations.related_words.extend(
            RelatedWord(word_id=word_id, related_hi=text, similarity=similarity, reason=reason)
            for text, similarity, reason in related
        )
