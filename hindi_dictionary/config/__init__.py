"""Configuration management for the Hindi dictionary service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
