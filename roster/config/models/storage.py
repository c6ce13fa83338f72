"""Storage backend configuration models."""

import os
from typing import Literal

from pydantic import BaseModel, Field

BackendType = Literal["inmemory", "redis"]


class RedisConfig(BaseModel):
    """Redis connection and key layout settings."""

    url: str | None = Field(
        default=None,
        description="Connection URL (falls back to REDIS_URL, then localhost)",
    )
    key_prefix: str = Field(
        default="student",
        min_length=1,
        description="Key prefix for student hashes (key is '<prefix>:<id>')",
    )
    socket_timeout: float | None = Field(
        default=5.0,
        gt=0,
        description="Socket timeout in seconds, None to wait forever",
    )
    scan_count: int = Field(
        default=500,
        gt=0,
        description="COUNT hint for SCAN when listing records",
    )

    def resolved_url(self) -> str:
        """Return the configured URL, the REDIS_URL env var, or the default."""
        return self.url or os.environ.get("REDIS_URL", "redis://127.0.0.1:6379/0")


class StorageConfig(BaseModel):
    """Configuration for the student store."""

    backend: BackendType = Field(
        default="redis",
        description="Store backend type",
    )
    redis: RedisConfig = Field(
        default_factory=RedisConfig,
        description="Redis settings",
    )
