"""Centralized configuration using Pydantic Settings.

Configuration can be overridden via environment variables:
- PG_GRAPH_DATA_DIR=/path/to/data
- PG_ANALYSIS_MAX_ENUMERATION_VERTICES=40
- PG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Seed data configuration.

    Environment variables prefixed with PG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    interactions_file: str = "interactions.csv"
    drug_targets_file: str = "drug_targets.csv"
    drug_destinations_file: str = "drug_destinations.csv"

    @property
    def interactions_path(self) -> Path:
        """Full path to the protein interactions CSV file."""
        return self.data_dir / self.interactions_file

    @property
    def drug_targets_path(self) -> Path:
        """Full path to the drug -> target protein CSV file."""
        return self.data_dir / self.drug_targets_file

    @property
    def drug_destinations_path(self) -> Path:
        """Full path to the target -> destination protein CSV file."""
        return self.data_dir / self.drug_destinations_file


class AnalysisConfig(BaseSettings):
    """Analysis limits and caching.

    Environment variables prefixed with PG_ANALYSIS_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_ANALYSIS_")

    max_enumeration_vertices: int = Field(default=25, ge=1)
    cache_max_entries: int = Field(default=32, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with PG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.interactions_path)

    Environment variables prefixed with PG_.
    """

    model_config = SettingsConfigDict(env_prefix="PG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the cached application configuration.

    To reload configuration (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache."""
    get_config.cache_clear()
