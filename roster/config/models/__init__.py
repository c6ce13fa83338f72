"""Configuration section models."""

from roster.config.models.api import APIConfig
from roster.config.models.imports import ImportConfig
from roster.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from roster.config.models.storage import RedisConfig, StorageConfig

__all__ = [
    "APIConfig",
    "ImportConfig",
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    "RedisConfig",
    "StorageConfig",
]
