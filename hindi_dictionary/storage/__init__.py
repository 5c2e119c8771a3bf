"""Word store implementations."""

from .base import WordStore
from .memory import InMemoryWordStore
from .postgres import PostgresWordStore
from .seed import SEED_WORDS, seed_store

__all__ = [
    "WordStore",
    "InMemoryWordStore",
    "PostgresWordStore",
    "SEED_WORDS",
    "seed_store",
]
