"""Lookup orchestration: structured fetch, fuzzy fallback and offline backup."""

import asyncio
import time
from typing import Any, Awaitable, Dict, List, Optional, Set, Tuple

import structlog

from ..config import Settings, get_settings
from ..exceptions import WordNotFoundError
from ..models.domain import (
    ConfidenceBand,
    HitType,
    LookupResult,
    ScoredCandidate,
    SearchLogEntry,
    WordRelations,
)
from ..models.response import WordDetailResponse
from ..storage.base import WordStore
from .confidence import classify_confidence
from .fuzzy_matcher import FuzzyIndex, build_index
from .mock_corpus import mock_fallback
from .normalizer import QueryNormalizer
from .scorer import CandidateScorer

logger = structlog.get_logger(__name__)

NO_RESULTS_MESSAGE = "No results found"
OFFLINE_MESSAGE = "Using offline backup"


class LookupEngine:
    """
    Resilient word lookup over a word store.

    `lookup` never raises: store failures and timeouts degrade to the
    built-in offline word list and are reported through the result's
    hit type and error message.
    """

    def __init__(self, store: WordStore, settings: Optional[Settings] = None) -> None:
        """
        Initialize the lookup engine.

        Args:
            store: Word store to query
            settings: Pipeline configuration (application settings if None)
        """
        self.store = store
        self.settings = settings or get_settings()
        self.normalizer = QueryNormalizer()
        self.scorer = CandidateScorer()

        # Lazily built on the first fuzzy fallback, shared by later lookups
        self._fuzzy_index: Optional[FuzzyIndex] = None
        self._pending: Set[asyncio.Task] = set()

        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "hit_types": {hit_type.value: 0 for hit_type in HitType},
            "total_execution_time": 0.0,
            "fuzzy_index_builds": 0,
        }

    async def lookup(self, raw_query: str) -> LookupResult:
        """
        Look up a raw user query.

        Args:
            raw_query: Devanagari, romanized or loosely transliterated text

        Returns:
            A well-formed LookupResult for every input
        """
        start_time = time.time()
        query = self.normalizer.normalize(raw_query)

        if not query:
            result = LookupResult(
                query="",
                hit_type=HitType.NO_HIT,
                confidence_band=ConfidenceBand.LOW,
            )
            self._record(result, start_time)
            return result

        try:
            result = await asyncio.wait_for(
                self._run_pipeline(query),
                timeout=self.settings.lookup_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "lookup_timed_out",
                query=query,
                timeout_seconds=self.settings.lookup_timeout_seconds,
            )
            result = self._offline_result(query, "Lookup timed out")
        except Exception as e:
            logger.warning("lookup_degraded_to_offline", query=query, error=str(e))
            result = self._offline_result(query, str(e) or type(e).__name__)

        self._record(result, start_time)
        return result

    async def _run_pipeline(self, query: str) -> LookupResult:
        is_devanagari = self.normalizer.is_devanagari(query)

        ranked, via_variant = await self._structured_fetch(query, is_devanagari)
        if ranked:
            top = ranked[0]
            if via_variant or top.score < self.settings.exact_hit_threshold:
                hit_type = HitType.DB_INPUT_FORM
            else:
                hit_type = HitType.DB_EXACT

            relations = await self.store.fetch_relations(top.word.id)
            self._spawn(self._log_search(query, top.word.id, hit_type), "append_search_log")
            self._spawn(self.store.increment_usage(top.word.id), "increment_usage")
            return self._build_result(query, is_devanagari, ranked, hit_type, relations)

        ranked, offline = await self._fuzzy_fallback(query)
        if ranked:
            top = ranked[0]
            if offline:
                # Offline words have no rows in the store, so no relations and no resolved id
                relations = WordRelations()
                resolved_id = None
            else:
                relations = await self.store.fetch_relations(top.word.id)
                resolved_id = top.word.id
            self._spawn(self._log_search(query, resolved_id, HitType.FUZZY), "append_search_log")
            return self._build_result(query, is_devanagari, ranked, HitType.FUZZY, relations)

        self._spawn(self._log_search(query, None, HitType.NO_HIT), "append_search_log")
        return LookupResult(
            query=query,
            is_devanagari=is_devanagari,
            hit_type=HitType.NO_HIT,
            confidence_band=ConfidenceBand.LOW,
            error_message=NO_RESULTS_MESSAGE,
        )

    async def _structured_fetch(
        self, query: str, is_devanagari: bool
    ) -> Tuple[List[ScoredCandidate], bool]:
        """
        Exact and input-form fetch, widened to Hinglish variants on a miss.

        Returns:
            Ranked candidates and whether they came from variants only
        """
        words = await self.store.fetch_by_exact_or_input_form(query)
        if words:
            return self.scorer.score(query, words), False

        if is_devanagari:
            return [], False

        variants = self.normalizer.generate_variants(query)[1:]
        if not variants:
            return [], False

        batches = await asyncio.gather(
            *(self.store.fetch_by_exact_or_input_form(variant) for variant in variants)
        )

        seen: Set[int] = set()
        ranked: List[ScoredCandidate] = []
        for variant, batch in zip(variants, batches):
            fresh = [word for word in batch if word.id not in seen]
            seen.update(word.id for word in fresh)
            # Score against the spelling that actually matched
            ranked.extend(self.scorer.score(variant, fresh))

        ranked.sort(key=lambda candidate: candidate.score, reverse=True)
        if ranked:
            logger.debug("variant_fetch_hit", query=query, variants=variants, total=len(ranked))
        return ranked, bool(ranked)

    async def _fuzzy_fallback(self, query: str) -> Tuple[List[ScoredCandidate], bool]:
        """
        Search the fuzzy index, or the offline word list if it cannot be built.

        Returns:
            Ranked candidates and whether they came from the offline list
        """
        try:
            index = await self._get_fuzzy_index()
        except Exception as e:
            logger.warning("fuzzy_fallback_failed", query=query, error=str(e))
            return mock_fallback(query), True

        # An empty sample is an empty dictionary, not an outage: it ends in
        # no_hit rather than the offline list.
        return index.search(query, limit=self.settings.fuzzy_max_results), False

    async def _get_fuzzy_index(self) -> FuzzyIndex:
        if self.settings.cache_fuzzy_index and self._fuzzy_index is not None:
            return self._fuzzy_index

        words = await self.store.fetch_sample(self.settings.fuzzy_sample_limit)
        index = build_index(
            words,
            weights={
                "headword": self.settings.headword_weight,
                "transliteration": self.settings.transliteration_weight,
                "input_forms": self.settings.input_forms_weight,
            },
            threshold=self.settings.fuzzy_distance_threshold,
        )
        self._stats["fuzzy_index_builds"] += 1

        if self.settings.cache_fuzzy_index:
            self._fuzzy_index = index
        return index

    def invalidate_index(self) -> None:
        """Drop the cached fuzzy index; the next fuzzy fallback rebuilds it."""
        self._fuzzy_index = None

    def _build_result(
        self,
        query: str,
        is_devanagari: bool,
        ranked: List[ScoredCandidate],
        hit_type: HitType,
        relations: WordRelations,
    ) -> LookupResult:
        top = ranked[0]
        return LookupResult(
            query=query,
            is_devanagari=is_devanagari,
            primary=top.word,
            score=top.score,
            synonyms=relations.synonyms,
            antonyms=relations.antonyms,
            related_words=relations.related_words,
            candidates=ranked[1:1 + self.settings.max_candidates],
            hit_type=hit_type,
            confidence_band=classify_confidence(
                top.score,
                self.settings.high_confidence_threshold,
                self.settings.medium_confidence_threshold,
            ),
        )

    def _offline_result(self, query: str, error_message: str) -> LookupResult:
        ranked = mock_fallback(query)
        if not ranked:
            return LookupResult(
                query=query,
                is_devanagari=self.normalizer.is_devanagari(query),
                hit_type=HitType.FALLBACK,
                confidence_band=ConfidenceBand.LOW,
                error_message=error_message,
            )

        top = ranked[0]
        return LookupResult(
            query=query,
            is_devanagari=self.normalizer.is_devanagari(query),
            primary=top.word,
            score=top.score,
            candidates=ranked[1:1 + self.settings.max_candidates],
            hit_type=HitType.FALLBACK,
            confidence_band=ConfidenceBand.LOW,
            error_message=OFFLINE_MESSAGE,
        )

    async def _log_search(self, query: str, word_id: Optional[int], hit_type: HitType) -> None:
        await self.store.append_search_log(
            SearchLogEntry(query=query, resolved_word_id=word_id, hit_type=hit_type)
        )

    def _spawn(self, awaitable: Awaitable[None], action: str) -> None:
        """Run a side effect as a detached task; its outcome never reaches the caller."""
        task = asyncio.ensure_future(self._best_effort(awaitable, action))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    @staticmethod
    async def _best_effort(awaitable: Awaitable[None], action: str) -> None:
        try:
            await awaitable
        except Exception as e:
            logger.debug("side_effect_failed", action=action, error=str(e))

    async def drain_side_effects(self) -> None:
        """Wait for detached side effects started so far."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)

    async def get_word_detail(self, word_id: int) -> WordDetailResponse:
        """
        Fetch a word with its relations and count the view.

        Args:
            word_id: Word identifier

        Returns:
            Word detail including relation edges

        Raises:
            WordNotFoundError: No word has this id
            StoreUnavailableError: The store could not be reached
        """
        word = await self.store.get_word(word_id)
        if word is None:
            raise WordNotFoundError(word_id)

        relations = await self.store.fetch_relations(word_id)
        self._spawn(self.store.increment_usage(word_id), "increment_usage")

        return WordDetailResponse(
            **word.model_dump(),
            synonyms=relations.synonyms,
            antonyms=relations.antonyms,
            related_words=relations.related_words,
        )

    def _record(self, result: LookupResult, start_time: float) -> None:
        execution_time = (time.time() - start_time) * 1000
        self._stats["total_queries"] += 1
        self._stats["hit_types"][result.hit_type.value] += 1
        self._stats["total_execution_time"] += execution_time

        logger.info(
            "lookup_completed",
            query=result.query,
            hit_type=result.hit_type.value,
            confidence_band=result.confidence_band.value,
            word_id=result.primary.id if result.primary else None,
            execution_time_ms=round(execution_time, 2),
        )

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = {
            "total_queries": self._stats["total_queries"],
            "hit_types": dict(self._stats["hit_types"]),
            "total_execution_time": self._stats["total_execution_time"],
            "fuzzy_index_builds": self._stats["fuzzy_index_builds"],
            "fuzzy_index_size": len(self._fuzzy_index) if self._fuzzy_index is not None else 0,
        }

        total = stats["total_queries"]
        if total > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / total
            stats["rates"] = {
                hit_type: count / total for hit_type, count in stats["hit_types"].items()
            }
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["rates"] = {hit_type: 0.0 for hit_type in stats["hit_types"]}

        return stats

    def reset_stats(self) -> None:
        """Reset statistics."""
        self._stats = self._empty_stats()
