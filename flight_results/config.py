"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunables of the
results pipeline: page size, where itineraries with missing sort fields
land, display placeholders, and where the sample payload lives.

Configuration can be overridden via environment variables:
- FLR_PAGINATION_PAGE_SIZE=50
- FLR_SORT_MISSING_PLACEMENT=first
- FLR_SOURCE_DATA_DIR=/path/to/data
- FLR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaginationConfig(BaseSettings):
    """Pagination configuration.

    Environment variables prefixed with FLR_PAGINATION_.
    """

    model_config = SettingsConfigDict(env_prefix="FLR_PAGINATION_")

    page_size: int = Field(default=20, ge=1)
    # False keeps the "page is full" heuristic for has_next
    exact_has_next: bool = False


class SortingConfig(BaseSettings):
    """Sorting configuration.

    Environment variables prefixed with FLR_SORT_.
    """

    model_config = SettingsConfigDict(env_prefix="FLR_SORT_")

    missing_placement: Literal["first", "last"] = "last"
    cache_enabled: bool = True
    cache_max_size: int = Field(default=32, ge=1)


class DisplayConfig(BaseSettings):
    """Display configuration for rendered result cards.

    Environment variables prefixed with FLR_DISPLAY_.
    """

    model_config = SettingsConfigDict(env_prefix="FLR_DISPLAY_")

    timestamp_format: str = "%Y-%m-%d %H:%M"
    missing_placeholder: str = "N/A"


class SourceConfig(BaseSettings):
    """Itinerary payload location.

    Environment variables prefixed with FLR_SOURCE_.
    """

    model_config = SettingsConfigDict(env_prefix="FLR_SOURCE_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    itineraries_file: str = "itineraries.json"

    @property
    def itineraries_path(self) -> Path:
        """Full path to the itineraries JSON file."""
        return self.data_dir / self.itineraries_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with FLR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="FLR_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.pagination.page_size)
        print(config.source.itineraries_path)

    Environment variables prefixed with FLR_.
    """

    model_config = SettingsConfigDict(env_prefix="FLR_")

    pagination: PaginationConfig = Field(default_factory=PaginationConfig)
    sorting: SortingConfig = Field(default_factory=SortingConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    source: SourceConfig = Field(default_factory=SourceConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)

    @property
    def project_root(self) -> Path:
        """Return the project root directory."""
        return Path(__file__).resolve().parent.parent


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The application configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
