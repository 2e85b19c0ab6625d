"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for all configuration:
data file locations, routing behaviour and logging.

Configuration can be overridden via environment variables:
- RTR_MAP_DATA_DIR=/path/to/data
- RTR_ROUTING_REQUIRE_STRONGLY_CONNECTED=false
- RTR_ROUTING_CACHE_PREDECESSORS=false
- RTR_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class RoadMapConfig(BaseSettings):
    """Road map data configuration.

    Environment variables prefixed with RTR_MAP_.
    """

    model_config = SettingsConfigDict(env_prefix="RTR_MAP_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    locations_file: str = "locations.csv"
    segments_file: str = "segments.csv"
    trips_file: str = "trips.csv"

    @property
    def locations_path(self) -> Path:
        """Full path to locations CSV file."""
        return self.data_dir / self.locations_file

    @property
    def segments_path(self) -> Path:
        """Full path to road segments CSV file."""
        return self.data_dir / self.segments_file

    @property
    def trips_path(self) -> Path:
        """Full path to trips CSV file."""
        return self.data_dir / self.trips_file


class RoutingConfig(BaseSettings):
    """Trip planning configuration.

    Environment variables prefixed with RTR_ROUTING_.
    """

    model_config = SettingsConfigDict(env_prefix="RTR_ROUTING_")

    require_strongly_connected: bool = True
    cache_predecessors: bool = True
    cache_max_size: Optional[int] = Field(default=None, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with RTR_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="RTR_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.routing.require_strongly_connected)
        print(config.road_map.segments_path)

    Environment variables prefixed with RTR_.
    """

    model_config = SettingsConfigDict(env_prefix="RTR_")

    road_map: RoadMapConfig = Field(default_factory=RoadMapConfig)
    routing: RoutingConfig = Field(default_factory=RoutingConfig)
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
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the logging level and format to the root logger.

    Log records go to stderr so they never mix with trip output.

    Raises:
        ConfigurationError: If the level is not a known logging level.
    """
    config = config or get_config().observability
    level = config.level.upper()
    # getLevelName maps registered names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"Unknown log level: {config.level!r}", setting_name="level"
        )
    logging.basicConfig(
        level=level,
        format=config.format,
        force=True,
    )
