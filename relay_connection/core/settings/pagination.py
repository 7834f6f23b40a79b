"""Pagination settings for connection windowing.

Centralizes the defaults applied when a caller builds a connection without
passing explicit options.

Environment variables use PAGINATION_ prefix.
Example: PAGINATION_DEFAULT_SORTED=true, PAGINATION_DEFAULT_DESC=false
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationSettings(BaseSettings):
    """Pagination configuration settings.

    Attributes:
        default_sorted: Assume input sequences are already in comparator order.
        default_desc: Window in descending comparator order by default.

    Example:
        settings = PaginationSettings()
        options = ConnectionOptions(
            sorted=settings.default_sorted,
            desc=settings.default_desc,
        )
    """

    default_sorted: bool = Field(
        default=False,
        description="Skip the sort pass when options are not supplied",
    )
    default_desc: bool = Field(
        default=False,
        description="Use descending order when options are not supplied",
    )

    model_config = SettingsConfigDict(
        env_prefix="PAGINATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
        extra="ignore",
    )
