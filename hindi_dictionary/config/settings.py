"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""
    
    # Application
    app_name: str = Field(default="Hindi Dictionary")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)
    
    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    workers: int = Field(default=1)
    
    # Logging
    log_level: str = Field(default="INFO")
    
    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173", "http://localhost:8000"]
    )
    
    # Word store
    store_backend: str = Field(default="memory")  # "memory" or "postgres"
    seed_on_startup: bool = Field(default=True)
    
    # Database Configuration
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_name: str = Field(default="dictionary")
    db_user: str = Field(default="postgres")
    db_password: Optional[str] = Field(default=None)
    
    # Lookup pipeline thresholds
    exact_hit_threshold: float = Field(default=0.9)
    high_confidence_threshold: float = Field(default=0.85)
    medium_confidence_threshold: float = Field(default=0.65)
    max_candidates: int = Field(default=20)
    max_query_length: int = Field(default=100)
    lookup_timeout_seconds: float = Field(default=5.0)
    
    # Fuzzy fallback
    fuzzy_sample_limit: int = Field(default=1500)
    fuzzy_distance_threshold: float = Field(default=0.3)
    fuzzy_max_results: int = Field(default=100)
    headword_weight: float = Field(default=0.45)
    transliteration_weight: float = Field(default=0.25)
    input_forms_weight: float = Field(default=0.30)
    cache_fuzzy_index: bool = Field(default=True)
    
    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
