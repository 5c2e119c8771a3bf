"""PostgreSQL word store built on psycopg2."""

import asyncio
from typing import Any, Dict, List, Optional, Sequence

import psycopg2
import psycopg2.extras
import structlog

from ..exceptions import StoreUnavailableError
from ..models.domain import (
    Antonym,
    RelatedWord,
    SearchLogEntry,
    Synonym,
    WordRecord,
    WordRelations,
)
from .base import RelatedSpec, WordStore

logger = structlog.get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS words (
    id SERIAL PRIMARY KEY,
    headword_hi TEXT NOT NULL,
    transliteration TEXT NOT NULL,
    pos TEXT,
    meaning_hi TEXT NOT NULL,
    meaning_en TEXT,
    input_forms TEXT[],
    source TEXT DEFAULT 'dictionary',
    confidence TEXT DEFAULT 'high',
    usage_count INTEGER DEFAULT 0,
    fetched_at TIMESTAMP DEFAULT NOW()
);
CREATE TABLE IF NOT EXISTS synonyms (
    id SERIAL PRIMARY KEY,
    word_id INTEGER NOT NULL REFERENCES words(id),
    synonym_hi TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS antonyms (
    id SERIAL PRIMARY KEY,
    word_id INTEGER NOT NULL REFERENCES words(id),
    antonym_hi TEXT NOT NULL
);
CREATE TABLE IF NOT EXISTS related_words (
    id SERIAL PRIMARY KEY,
    word_id INTEGER NOT NULL REFERENCES words(id),
    related_hi TEXT NOT NULL,
    similarity REAL DEFAULT 0.0,
    reason TEXT
);
CREATE TABLE IF NOT EXISTS search_logs (
    id SERIAL PRIMARY KEY,
    query TEXT NOT NULL,
    resolved_word_id INTEGER REFERENCES words(id),
    hit_type TEXT,
    created_at TIMESTAMP DEFAULT NOW()
);
"""

FETCH_EXACT_SQL = """
SELECT * FROM words
WHERE headword_hi = %(query)s
   OR lower(transliteration) = %(lowered)s
   OR EXISTS (SELECT 1 FROM unnest(input_forms) AS form WHERE lower(form) = %(lowered)s)
"""


def _row_to_word(row: Dict[str, Any]) -> WordRecord:
    return WordRecord(
        id=row["id"],
        headword=row["headword_hi"],
        transliteration=row["transliteration"],
        pos=row.get("pos"),
        meaning_hi=row["meaning_hi"],
        meaning_en=row.get("meaning_en"),
        input_forms=row.get("input_forms") or [],
        source=row.get("source") or "dictionary",
        confidence=row.get("confidence") or "high",
        usage_count=row.get("usage_count") or 0,
        fetched_at=row["fetched_at"],
    )


class PostgresWordStore(WordStore):
    """
    Word store over the relational dictionary schema.
    
    Each call opens its own connection on a worker thread so the event
    loop never blocks on the database.
    """
    
    def __init__(self, db_config: Dict[str, Any]) -> None:
        """
        Initialize the store.
        
        Args:
            db_config: psycopg2.connect keyword arguments
        """
        self.db_config = db_config
    
    def _execute(self, sql: str, params: Any = None, fetch: str = "all") -> Any:
        """Run one statement in its own transaction."""
        try:
            conn = psycopg2.connect(**self.db_config)
        except psycopg2.Error as e:
            raise StoreUnavailableError(f"Cannot connect to word store: {e}") from e
        
        try:
            with conn:
                with conn.cursor(cursor_factory=psycopg2.extras.RealDictCursor) as cur:
                    cur.execute(sql, params)
                    if fetch == "all":
                        return cur.fetchall()
                    if fetch == "one":
                        return cur.fetchone()
                    return None
        except psycopg2.Error as e:
            raise StoreUnavailableError(f"Word store query failed: {e}") from e
        finally:
            conn.close()
    
    async def _run(self, sql: str, params: Any = None, fetch: str = "all") -> Any:
        return await asyncio.to_thread(self._execute, sql, params, fetch)
    
    async def ensure_schema(self) -> None:
        """Create the dictionary tables if they do not exist."""
        await self._run(SCHEMA_SQL, fetch="none")
        logger.info("word_store_schema_ready", database=self.db_config.get("database"))
    
    async def fetch_by_exact_or_input_form(self, query: str) -> List[WordRecord]:
        rows = await self._run(FETCH_EXACT_SQL, {"query": query, "lowered": query.lower()})
        return [_row_to_word(row) for row in rows]
    
    async def fetch_relations(self, word_id: int) -> WordRelations:
        synonym_rows, antonym_rows, related_rows = await asyncio.gather(
            self._run("SELECT * FROM synonyms WHERE word_id = %s ORDER BY id", (word_id,)),
            self._run("SELECT * FROM antonyms WHERE word_id = %s ORDER BY id", (word_id,)),
            self._run(
                "SELECT * FROM related_words WHERE word_id = %s ORDER BY similarity DESC, id",
                (word_id,),
            ),
        )
        return WordRelations(
            synonyms=[Synonym(word_id=r["word_id"], synonym_hi=r["synonym_hi"]) for r in synonym_rows],
            antonyms=[Antonym(word_id=r["word_id"], antonym_hi=r["antonym_hi"]) for r in antonym_rows],
            related_words=[
                RelatedWord(
                    word_id=r["word_id"],
                    related_hi=r["related_hi"],
                    similarity=r["similarity"] or 0.0,
                    reason=r["reason"],
                )
                for r in related_rows
            ],
        )
    
    async def fetch_sample(self, limit: int) -> List[WordRecord]:
        rows = await self._run("SELECT * FROM words ORDER BY id LIMIT %s", (limit,))
        return [_row_to_word(row) for row in rows]
    
    async def increment_usage(self, word_id: int) -> None:
        await self._run(
            "UPDATE words SET usage_count = COALESCE(usage_count, 0) + 1 WHERE id = %s",
            (word_id,),
            fetch="none",
        )
    
    async def append_search_log(self, entry: SearchLogEntry) -> None:
        await self._run(
            "INSERT INTO search_logs (query, resolved_word_id, hit_type, created_at) "
            "VALUES (%s, %s, %s, %s)",
            (entry.query, entry.resolved_word_id, entry.hit_type.value, entry.created_at),
            fetch="none",
        )
    
    async def get_word(self, word_id: int) -> Optional[WordRecord]:
        row = await self._run("SELECT * FROM words WHERE id = %s", (word_id,), fetch="one")
        return _row_to_word(row) if row else None
    
    async def count_words(self) -> int:
        row = await self._run("SELECT count(*) AS total FROM words", fetch="one")
        return int(row["total"])
    
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
        row = await self._run(
            "INSERT INTO words (headword_hi, transliteration, pos, meaning_hi, meaning_en, "
            "input_forms, source, confidence, usage_count) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s) RETURNING *",
            (headword, transliteration, pos, meaning_hi, meaning_en,
             list(input_forms), source, confidence, usage_count),
            fetch="one",
        )
        return _row_to_word(row)
    
    async def add_relations(
        self,
        word_id: int,
        synonyms: Sequence[str] = (),
        antonyms: Sequence[str] = (),
        related: Sequence[RelatedSpec] = (),
    ) -> None:
        for synonym in synonyms:
            await self._run(
                "INSERT INTO synonyms (word_id, synonym_hi) VALUES (%s, %s)",
                (word_id, synonym),
                fetch="none",
            )
        for antonym in antonyms:
            await self._run(
                "INSERT INTO antonyms (word_id, antonym_hi) VALUES (%s, %s)",
                (word_id, antonym),
                fetch="none",
            )
        for text, similarity, reason in related:
            await self._run(
                "INSERT INTO related_words (word_id, related_hi, similarity, reason) "
                "VALUES (%s, %s, %s, %s)",
                (word_id, text, similarity, reason),
                fetch="none",
            )
