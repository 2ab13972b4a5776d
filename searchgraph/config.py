"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for the tunable parts of
the graph: the parallel-edge policy, the default path solver and the
logging setup.

Configuration can be overridden via environment variables:
- SG_GRAPH_DEDUPE_EDGES=true
- SG_GRAPH_DEFAULT_STRATEGY=dfs
- SG_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GraphConfig(BaseSettings):
    """Graph behaviour configuration.

    Environment variables prefixed with SG_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_GRAPH_")

    dedupe_edges: bool = False
    default_strategy: Literal["bfs", "dfs"] = "bfs"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with SG_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.dedupe_edges)
        print(config.observability.level)

    Environment variables prefixed with SG_.
    """

    model_config = SettingsConfigDict(env_prefix="SG_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
