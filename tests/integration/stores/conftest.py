"""Pytest fixtures for store integration tests.

Tests run against the Redis server at TEST_REDIS_URL and skip
gracefully when it is unavailable.
"""

import os
from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
import pytest_asyncio
import redis.asyncio as redis

from roster.config.models.storage import RedisConfig
from roster.db.errors import StorageUnavailable
from roster.db.redis import RedisHandle


@pytest.fixture(scope="session")
def redis_url() -> str:
    """Get Redis URL for tests."""
    return os.environ.get("TEST_REDIS_URL", "redis://localhost:6379/15")


@pytest.fixture
def key_prefix() -> str:
    """A key prefix private to one test."""
    return f"test_student_{uuid4().hex[:8]}"


@pytest_asyncio.fixture
async def redis_handle(redis_url: str, key_prefix: str) -> AsyncIterator[RedisHandle]:
    """Open a RedisHandle for tests.

    Skips tests if Redis is not available.
    """
    handle = RedisHandle(RedisConfig(url=redis_url, key_prefix=key_prefix, scan_count=10))
    try:
        await handle.connect()
    except StorageUnavailable:
        pytest.skip("Redis not available (set TEST_REDIS_URL or start a local server)")

    yield handle

    client = await handle.acquire()
    async for key in client.scan_iter(match=f"{key_prefix}:*"):
        await client.delete(key)
    await handle.close()


@pytest_asyncio.fixture
async def redis_client(redis_handle: RedisHandle) -> redis.Redis:
    """The raw client behind the handle, for inspecting stored hashes."""
    return await redis_handle.acquire()
