"""Cached settings loaders.

Each loader builds its settings model once per process. Call
``cache_clear()`` on a loader in tests after changing the environment.
"""

from __future__ import annotations

from functools import lru_cache

from .logs import LoggingSettings
from .pagination import PaginationSettings


@lru_cache(maxsize=1)
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings.

    Returns:
        Validated and frozen LoggingSettings instance.
    """
    return LoggingSettings()


@lru_cache(maxsize=1)
def get_pagination_settings() -> PaginationSettings:
    """Get cached pagination settings.

    Returns:
        Validated and frozen PaginationSettings instance.
    """
    return PaginationSettings()


def clear_settings_cache() -> None:
    """Drop every cached settings instance."""
    get_logging_settings.cache_clear()
    get_pagination_settings.cache_clear()
