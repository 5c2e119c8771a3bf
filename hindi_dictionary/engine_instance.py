"""Global word store and lookup engine instances to avoid circular imports."""

from .config import get_settings
from .core.engine import LookupEngine
from .storage import InMemoryWordStore, PostgresWordStore, WordStore


def create_store(settings) -> WordStore:
    """Create the word store selected by configuration."""
    if settings.store_backend == "postgres":
        return PostgresWordStore({
            "host": settings.db_host,
            "port": settings.db_port,
            "database": settings.db_name,
            "user": settings.db_user,
            "password": settings.db_password,
        })
    return InMemoryWordStore()


# Global instances
settings = get_settings()
word_store = create_store(settings)
lookup_engine = LookupEngine(word_store, settings=settings)
