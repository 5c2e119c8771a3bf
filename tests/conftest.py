"""Shared fixtures: seeded and deliberately failing word stores."""

import asyncio

import pytest

from hindi_dictionary.config import Settings
from hindi_dictionary.exceptions import StoreUnavailableError
from hindi_dictionary.storage import InMemoryWordStore, seed_store


class UnavailableStore(InMemoryWordStore):
    """A store whose every read fails as if the database were down."""
    
    async def fetch_by_exact_or_input_form(self, query):
        raise StoreUnavailableError("connection refused")
    
    async def fetch_relations(self, word_id):
        raise StoreUnavailableError("connection refused")
    
    async def fetch_sample(self, limit):
        raise StoreUnavailableError("connection refused")


class BrokenSampleStore(InMemoryWordStore):
    """Structured fetch works, but the fuzzy index cannot be built."""
    
    async def fetch_sample(self, limit):
        raise StoreUnavailableError("sample query failed")


class BrokenRelationsStore(InMemoryWordStore):
    """Relation fetch fails after a successful structured fetch."""
    
    async def fetch_relations(self, word_id):
        raise StoreUnavailableError("relations table unavailable")


class BrokenSideEffectsStore(InMemoryWordStore):
    """Search logging and usage counting always fail."""
    
    async def append_search_log(self, entry):
        raise RuntimeError("log table is read-only")
    
    async def increment_usage(self, word_id):
        raise RuntimeError("usage counter locked")


class SlowStore(InMemoryWordStore):
    """Structured fetch hangs longer than any reasonable deadline."""
    
    async def fetch_by_exact_or_input_form(self, query):
        await asyncio.sleep(2)
        return []


def make_seeded(store):
    asyncio.run(seed_store(store))
    return store


@pytest.fixture
def settings():
    """Pipeline settings with the documented defaults."""
    return Settings(lookup_timeout_seconds=5.0, cache_fuzzy_index=True)


@pytest.fixture
def seeded_store():
    """An in-memory store holding the starter dictionary."""
    return make_seeded(InMemoryWordStore())


@pytest.fixture
def unavailable_store():
    return UnavailableStore()


@pytest.fixture
def broken_sample_store():
    return BrokenSampleStore()


@pytest.fixture
def broken_sample_store_with_word():
    """A failing-sample store whose only word, id 1, is not an offline word."""
    store = BrokenSampleStore()
    
    async def _fill():
        word = await store.add_word(headword="सपना", transliteration="sapna", meaning_hi="स्वप्न")
        await store.add_relations(word.id, synonyms=["ख्वाब"], antonyms=["यथार्थ"])
    
    asyncio.run(_fill())
    return store


@pytest.fixture
def broken_relations_store():
    return make_seeded(BrokenRelationsStore())


@pytest.fixture
def broken_side_effects_store():
    return make_seeded(BrokenSideEffectsStore())


@pytest.fixture
def slow_store():
    return SlowStore()
